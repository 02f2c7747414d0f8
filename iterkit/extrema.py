"""All minimal or all maximal elements of an iterable."""

from __future__ import annotations

from typing import Any, Callable, Iterable

_Compare4 = Callable[[Any, Any, Any, Any], int]


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _min_set(
    iterable: Iterable[Any],
    key: Callable[[Any], Any],
    compare: _Compare4,
) -> list[Any]:
    iterator = iter(iterable)
    try:
        first = next(iterator)
    except StopIteration:
        return []
    current_key = key(first)
    result = [first]
    for element in iterator:
        element_key = key(element)
        order = compare(element, result[0], element_key, current_key)
        if order < 0:
            result = [element]
            current_key = element_key
        elif order == 0:
            result.append(element)
    return result


def _max_set(
    iterable: Iterable[Any],
    key: Callable[[Any], Any],
    compare: _Compare4,
) -> list[Any]:
    return _min_set(
        iterable, key, lambda a, b, key_a, key_b: compare(b, a, key_b, key_a)
    )


def _identity(value: Any) -> Any:
    return value


def min_set(
    iterable: Iterable[Any], key: Callable[[Any], Any] | None = None
) -> list[Any]:
    """Every element whose key is minimal, in the order they occur."""
    return _min_set(
        iterable, key or _identity, lambda _a, _b, ka, kb: _three_way(ka, kb)
    )


def max_set(
    iterable: Iterable[Any], key: Callable[[Any], Any] | None = None
) -> list[Any]:
    """Every element whose key is maximal, in the order they occur."""
    return _max_set(
        iterable, key or _identity, lambda _a, _b, ka, kb: _three_way(ka, kb)
    )


def min_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """Every minimal element under ``compare`` (negative, zero or positive)."""
    return _min_set(iterable, _identity, lambda a, b, _ka, _kb: compare(a, b))


def max_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """Every maximal element under ``compare`` (negative, zero or positive)."""
    return _max_set(iterable, _identity, lambda a, b, _ka, _kb: compare(a, b))