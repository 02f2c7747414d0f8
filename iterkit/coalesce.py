"""Adaptors that merge or drop runs of neighbouring items."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from iterkit.results import Err, Ok


def coalesce(
    iterable: Iterable[Any], func: Callable[[Any, Any], Ok | Err]
) -> Iterator[Any]:
    """Merge neighbouring items with ``func``.

    ``func(previous, item)`` returns ``Ok(joined)`` to merge the two items
    into ``joined``, or ``Err((previous, item))`` to emit ``previous`` and
    carry on from ``item``.
    """
    iterator = iter(iterable)
    try:
        last = next(iterator)
    except StopIteration:
        return
    for item in iterator:
        match func(last, item):
            case Ok(joined):
                last = joined
            case Err((emitted, following)):
                yield emitted
                last = following
            case other:
                raise TypeError(
                    f"coalesce function must return Ok(value) or Err((a, b)), got {other!r}"
                )
    yield last


def dedup_by(iterable: Iterable[Any], same: Callable[[Any, Any], bool]) -> Iterator[Any]:
    """Drop every item for which ``same(kept, item)`` holds, ``kept`` being the last item kept."""
    return coalesce(
        iterable,
        lambda kept, item: Ok(kept) if same(kept, item) else Err((kept, item)),
    )


def dedup(iterable: Iterable[Any]) -> Iterator[Any]:
    """Drop items equal to the item just before them."""
    return dedup_by(iterable, lambda a, b: a == b)


def dedup_by_with_count(
    iterable: Iterable[Any], same: Callable[[Any, Any], bool]
) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup_by`, yielding ``(count, item)`` pairs for each run."""

    def merge(
        run: tuple[int, Any], following: tuple[int, Any]
    ) -> Ok | Err:
        count, kept = run
        if same(kept, following[1]):
            return Ok((count + 1, kept))
        return Err((run, following))

    return coalesce(((1, item) for item in iterable), merge)


def dedup_with_count(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup`, yielding ``(count, item)`` pairs for each run."""
    return dedup_by_with_count(iterable, lambda a, b: a == b)