"""Cartesian product of any number of iterables, yielded as lists."""

from __future__ import annotations

from math import prod
from typing import Any, Iterable


class MultiProduct:
    """Every combination taking one item from each iterable, in odometer order.

    The rightmost iterable varies fastest.  With no iterables at all a single
    empty list is produced.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]]) -> None:
        self._pools = [tuple(iterable) for iterable in iterables]
        self._indices: list[int] | None = None
        self._ended = False

    def __iter__(self) -> "MultiProduct":
        return self

    def _current(self) -> list[Any]:
        assert self._indices is not None
        return [pool[index] for pool, index in zip(self._pools, self._indices)]

    def __next__(self) -> list[Any]:
        if self._ended:
            raise StopIteration
        pools = self._pools
        if self._indices is None:
            if any(not pool for pool in pools):
                self._ended = True
                raise StopIteration
            self._indices = [0] * len(pools)
            if not pools:
                self._ended = True
            return self._current()

        indices = self._indices
        for position in reversed(range(len(pools))):
            indices[position] += 1
            if indices[position] < len(pools[position]):
                return self._current()
            indices[position] = 0
        self._ended = True
        raise StopIteration

    def count(self) -> int:
        """How many products are still to come, without advancing."""
        if self._ended:
            return 0
        if self._indices is None:
            return prod(len(pool) for pool in self._pools)
        remaining = 0
        for pool, index in zip(self._pools, self._indices):
            if remaining:
                remaining *= len(pool)
            remaining += len(pool) - index - 1
        return remaining

    def last(self) -> list[Any] | None:
        """The final product still to come, or ``None``; does not advance."""
        if self._ended:
            return None
        if self._indices is None:
            if any(not pool for pool in self._pools):
                return None
            return [pool[-1] for pool in self._pools]
        if all(
            index == len(pool) - 1 for pool, index in zip(self._pools, self._indices)
        ):
            return None
        return [pool[-1] for pool in self._pools]


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> MultiProduct:
    """The cartesian product of all ``iterables``."""
    return MultiProduct(iterables)