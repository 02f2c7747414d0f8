"""General iterator adaptors: interleaving, products, put-back and friends."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

_MISSING = object()


class PutBack:
    """An iterator that can take back one item to yield again first."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._top: Any = _MISSING
        self._iter = iter(iterable)

    def put_back(self, value: Any) -> Any:
        """Place ``value`` in front; return the value it displaced, or ``None``."""
        previous, self._top = self._top, value
        return None if previous is _MISSING else previous

    def with_value(self, value: Any) -> "PutBack":
        """Put back ``value`` and return this iterator."""
        self.put_back(value)
        return self

    def into_parts(self) -> tuple[Any, Iterator[Any]]:
        """The put-back value (or ``None``) and the underlying iterator."""
        top = None if self._top is _MISSING else self._top
        return top, self._iter

    def __iter__(self) -> "PutBack":
        return self

    def __next__(self) -> Any:
        if self._top is not _MISSING:
            value, self._top = self._top, _MISSING
            return value
        return next(self._iter)


def put_back(iterable: Iterable[Any]) -> PutBack:
    """Wrap ``iterable`` in a :class:`PutBack`."""
    return PutBack(iterable)


def interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate items from both iterables until both run out."""
    iterators = [iter(first), iter(second)]
    while iterators:
        for iterator in list(iterators):
            value = next(iterator, _MISSING)
            if value is _MISSING:
                iterators.remove(iterator)
            else:
                yield value


def interleave_shortest(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate items from both iterables until the one due next runs out."""
    first_iter, second_iter = iter(first), iter(second)
    while True:
        for iterator in (first_iter, second_iter):
            value = next(iterator, _MISSING)
            if value is _MISSING:
                return
            yield value


def cartesian_product(first: Iterable[Any], second: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Every pair ``(a, b)`` with ``a`` from ``first`` and ``b`` from ``second``.

    ``second`` is read once and replayed; when it is empty ``first`` is not touched.
    """
    pool = tuple(second)
    if not pool:
        return
    for a in first:
        for b in pool:
            yield a, b


def batching(
    iterable: Iterable[Any], func: Callable[[Iterator[Any]], Any]
) -> Iterator[Any]:
    """Yield ``func(iterator)`` repeatedly until it returns ``None``."""
    iterator = iter(iterable)
    while (value := func(iterator)) is not None:
        yield value


def take_while_ref(iterator: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Take items from ``iterator`` while ``predicate`` holds.

    The first item that fails is put back, so ``iterator`` still yields it.
    """
    if not isinstance(iterator, PutBack):
        raise TypeError("take_while_ref needs a PutBack iterator")

    def taking() -> Iterator[Any]:
        for item in iterator:
            if not predicate(item):
                iterator.put_back(item)
                return
            yield item

    return taking()


def while_some(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield items until the first ``None``."""
    for item in iterable:
        if item is None:
            return
        yield item


def positions(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Iterator[int]:
    """Indices of the items that satisfy ``predicate``."""
    return (index for index, item in enumerate(iterable) if predicate(item))


def update(iterable: Iterable[Any], func: Callable[[Any], Any]) -> Iterator[Any]:
    """Call ``func`` on each item (to change it in place) before yielding it."""
    for item in iterable:
        func(item)
        yield item