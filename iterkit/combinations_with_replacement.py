"""Lazy ``k``-length combinations with replacement, yielded as lists."""

from __future__ import annotations

from typing import Any, Iterable

from iterkit.combinations import _LazyPool
from iterkit.tuple_combinations import checked_binomial


def _count_with_replacement(n: int, k: int) -> int:
    # Stars and bars: k stars and n - 1 bars over k + n - 1 positions.
    positions = max(k - 1, 0) if n == 0 else n - 1 + k
    return checked_binomial(positions, k)


class CombinationsWithReplacement:
    """Every ``k``-length combination of an iterable in which items may repeat.

    The source is read lazily, so an endless source yields combinations
    for ever.
    """

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError(f"combination length must be non-negative, got {k}")
        self._indices = [0] * k
        self._pool = _LazyPool(iterable)
        self._first = True

    def __iter__(self) -> "CombinationsWithReplacement":
        return self

    def _current(self) -> list[Any]:
        return [self._pool[index] for index in self._indices]

    def __next__(self) -> list[Any]:
        indices, pool = self._indices, self._pool
        if self._first:
            if indices and not pool.get_next():
                raise StopIteration
            self._first = False
            return self._current()

        pool.get_next()
        last_index = len(pool) - 1
        for position in reversed(range(len(indices))):
            if indices[position] < last_index:
                value = indices[position] + 1
                indices[position:] = [value] * (len(indices) - position)
                return self._current()
        raise StopIteration

    def count(self) -> int:
        """How many combinations are still to come.

        The rest of the source is read, but the position is not changed.
        """
        n = self._pool.drain()
        indices = self._indices
        k = len(indices)
        if self._first:
            return _count_with_replacement(n, k)
        return sum(
            _count_with_replacement(n - 1 - index, k - position)
            for position, index in enumerate(indices)
        )


def combinations_with_replacement(
    iterable: Iterable[Any], k: int
) -> CombinationsWithReplacement:
    """Lazy ``k``-length combinations of ``iterable`` with replacement."""
    return CombinationsWithReplacement(iterable, k)