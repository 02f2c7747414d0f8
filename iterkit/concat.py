"""Joining collections together and flattening nested tuples."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator


def concat(iterable: Iterable[Any]) -> Any:
    """Join all collections of ``iterable`` into a copy of the first.

    Collections with ``extend`` or ``update`` are extended with the rest;
    others (strings, tuples) are added with ``+``. An empty iterable gives
    an empty list. The first collection itself is left unchanged.
    """
    iterator = iter(iterable)
    try:
        result = copy.copy(next(iterator))
    except StopIteration:
        return []
    for item in iterator:
        if hasattr(result, "extend"):
            result.extend(item)
        elif hasattr(result, "update"):
            result.update(item)
        else:
            result = result + item
    return result


def cons_tuples(iterable: Iterable[tuple[tuple[Any, ...], Any]]) -> Iterator[tuple[Any, ...]]:
    """Turn items shaped ``((a, b, ...), x)`` into flat tuples ``(a, b, ..., x)``."""
    for head, last in iterable:
        yield (*head, last)