"""Adaptors over iterables whose items are ``Ok`` or ``Err`` results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Union


@dataclass(frozen=True)
class Ok:
    """A successful result holding ``value``."""

    value: Any

    def is_ok(self) -> bool:
        """Always true."""
        return True

    def is_err(self) -> bool:
        """Always false."""
        return False


@dataclass(frozen=True)
class Err:
    """A failed result holding ``error``."""

    error: Any

    def is_ok(self) -> bool:
        """Always false."""
        return False

    def is_err(self) -> bool:
        """Always true."""
        return True


Result = Union[Ok, Err]


def _not_a_result(item: Any) -> TypeError:
    return TypeError(f"expected Ok or Err, got {item!r}")


def map_ok(iterable: Iterable[Result], func: Callable[[Any], Any]) -> Iterator[Result]:
    """Apply ``func`` to the value of every ``Ok``; pass ``Err`` items through."""
    for item in iterable:
        match item:
            case Ok(value):
                yield Ok(func(value))
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def map_into(iterable: Iterable[Any], convert: Callable[[Any], Any]) -> Iterator[Any]:
    """Convert every item with ``convert``."""
    for item in iterable:
        yield convert(item)


def filter_ok(
    iterable: Iterable[Result], predicate: Callable[[Any], bool]
) -> Iterator[Result]:
    """Keep the ``Ok`` items whose value satisfies ``predicate`` and every ``Err``."""
    for item in iterable:
        match item:
            case Ok(value):
                if predicate(value):
                    yield item
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def filter_map_ok(
    iterable: Iterable[Result], func: Callable[[Any], Any]
) -> Iterator[Result]:
    """Map ``Ok`` values through ``func``, dropping those where it returns ``None``.

    ``Err`` items pass through unchanged.
    """
    for item in iterable:
        match item:
            case Ok(value):
                mapped = func(value)
                if mapped is not None:
                    yield Ok(mapped)
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def flatten_ok(iterable: Iterable[Result]) -> Iterator[Result]:
    """Flatten iterable ``Ok`` values into one ``Ok`` per element; pass ``Err`` through."""
    for item in iterable:
        match item:
            case Ok(value):
                for inner in value:
                    yield Ok(inner)
            case Err():
                yield item
            case _:
                raise _not_a_result(item)