"""Fixed-size combinations yielded as tuples, and a binomial helper."""

from __future__ import annotations

import itertools
import math
from typing import Any, Iterable, Iterator


def checked_binomial(n: int, k: int) -> int:
    """The binomial coefficient ``n`` choose ``k``; zero when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError(f"binomial arguments must be non-negative, got n={n}, k={k}")
    if n < k:
        return 0
    return math.comb(n, k)


def tuple_combinations(iterable: Iterable[Any], k: int) -> Iterator[tuple[Any, ...]]:
    """Every ``k``-element combination of ``iterable`` as a tuple.

    Combinations come in lexicographic order of the items' positions:
    all those starting with the first item, then with the second, and so on.
    """
    if k < 1:
        raise ValueError(f"tuple combinations need a length of at least 1, got {k}")
    return itertools.combinations(iterable, k)