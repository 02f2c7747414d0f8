"""Lazy ``k``-length combinations of an iterable, yielded as lists."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from iterkit.tuple_combinations import checked_binomial


class _LazyPool:
    """Items of an iterator, read only as far as they are needed."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter: Iterator[Any] | None = iter(iterable)
        self.items: list[Any] = []

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def get_next(self) -> bool:
        """Read one more item; False once the source is exhausted."""
        if self._iter is None:
            return False
        try:
            self.items.append(next(self._iter))
        except StopIteration:
            self._iter = None
            return False
        return True

    def prefill(self, size: int) -> None:
        """Read until the pool holds ``size`` items or the source runs out."""
        while len(self.items) < size and self.get_next():
            pass

    def drain(self) -> int:
        """Read the whole source and return the total number of items."""
        while self.get_next():
            pass
        return len(self.items)


class Combinations:
    """Every ``k``-length combination of an iterable, as lists.

    The source is read lazily, so an endless source yields combinations
    for ever.
    """

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError(f"combination length must be non-negative, got {k}")
        self._indices = list(range(k))
        self._pool = _LazyPool(iterable)
        self._first = True

    def __iter__(self) -> "Combinations":
        return self

    def __next__(self) -> list[Any]:
        indices, pool = self._indices, self._pool
        k = len(indices)
        if self._first:
            pool.prefill(k)
            if k > len(pool):
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            i = k - 1
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - k:
                if i == 0:
                    raise StopIteration
                i -= 1
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
        return [pool[index] for index in indices]

    def reset(self, k: int) -> None:
        """Start over with combinations of length ``k`` from the same source."""
        if k < 0:
            raise ValueError(f"combination length must be non-negative, got {k}")
        self._first = True
        grow = k >= len(self._indices)
        self._indices = list(range(k))
        if grow:
            self._pool.prefill(k)

    def count(self) -> int:
        """How many combinations are still to come.

        The rest of the source is read, but the position is not changed.
        """
        n = self._pool.drain()
        indices = self._indices
        k = len(indices)
        if n < k:
            return 0
        if self._first:
            return checked_binomial(n, k)
        return sum(
            checked_binomial(n - 1 - index, k - position)
            for position, index in enumerate(indices)
        )


def combinations(iterable: Iterable[Any], k: int) -> Combinations:
    """Lazy ``k``-length combinations of ``iterable``."""
    return Combinations(iterable, k)