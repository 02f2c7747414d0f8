"""Lock-step comparison of two iterables that stops at the first difference."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from iterkit.adaptors import PutBack

_MISSING = object()


@dataclass
class FirstMismatch:
    """The items at ``index`` differ; both remainders start with those items."""

    index: int
    first: PutBack
    second: PutBack


@dataclass
class Shorter:
    """The second iterable held ``index`` items; ``rest`` is what is left of the first."""

    index: int
    rest: PutBack


@dataclass
class Longer:
    """The first iterable held ``index`` items; ``rest`` is what is left of the second."""

    index: int
    rest: PutBack


Diff = FirstMismatch | Shorter | Longer


def diff_with(
    first: Iterable[Any],
    second: Iterable[Any],
    is_equal: Callable[[Any, Any], bool] = operator.eq,
) -> Diff | None:
    """Compare ``first`` and ``second`` item by item with ``is_equal``.

    Returns ``None`` when both hold equal items and end together; otherwise a
    :class:`FirstMismatch`, :class:`Shorter` or :class:`Longer` describing how
    ``second`` differs from ``first``.
    """
    first_iter = iter(first)
    second_iter = iter(second)
    count = 0
    for item in first_iter:
        other = next(second_iter, _MISSING)
        if other is _MISSING:
            return Shorter(count, PutBack(first_iter).with_value(item))
        if not is_equal(item, other):
            return FirstMismatch(
                count,
                PutBack(first_iter).with_value(item),
                PutBack(second_iter).with_value(other),
            )
        count += 1
    other = next(second_iter, _MISSING)
    if other is _MISSING:
        return None
    return Longer(count, PutBack(second_iter).with_value(other))