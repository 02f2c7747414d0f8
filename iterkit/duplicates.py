"""Adaptors that yield the items seen more than once."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator


def duplicates_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> Iterator[Any]:
    """Yield each item whose key was seen exactly once before.

    Every repeated key is reported once, by the item that repeats it first.
    """
    reported: dict[Hashable, bool] = {}
    for item in iterable:
        item_key = key(item)
        state = reported.get(item_key)
        if state is None:
            reported[item_key] = False
        elif not state:
            reported[item_key] = True
            yield item


def duplicates(iterable: Iterable[Hashable]) -> Iterator[Hashable]:
    """Yield each item the second time it is seen."""
    return duplicates_by(iterable, lambda item: item)