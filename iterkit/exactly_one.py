"""Take the single item of an iterable, or report how many there were."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

_MISSING = object()


class ExactlyOneError(ValueError):
    """Raised when an iterable does not hold exactly one item.

    The error is also an iterator that yields every item of the original
    iterable, the ones already read included.
    """

    def __init__(self, first_two: Iterable[Any], rest: Iterable[Any]) -> None:
        buffered = list(first_two)
        if len(buffered) > 2:
            raise ValueError(f"at most two buffered items, got {len(buffered)}")
        super().__init__()
        self._buffered = buffered
        self._rest = iter(rest)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._buffered:
            return self._buffered.pop(0)
        return next(self._rest)

    def __str__(self) -> str:
        if self._buffered:
            return "got at least 2 elements when exactly one was expected"
        return "got zero elements when exactly one was expected"


def exactly_one(iterable: Iterable[Any]) -> Any:
    """The only item of ``iterable``; :class:`ExactlyOneError` otherwise."""
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        raise ExactlyOneError((), iterator)
    second = next(iterator, _MISSING)
    if second is _MISSING:
        return first
    raise ExactlyOneError((first, second), iterator)


def at_most_one(iterable: Iterable[Any]) -> Any:
    """The only item of ``iterable``, ``None`` if empty; error for two or more."""
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return None
    second = next(iterator, _MISSING)
    if second is _MISSING:
        return first
    raise ExactlyOneError((first, second), iterator)