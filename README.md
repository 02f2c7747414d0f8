# iterkit

Extra iterator adaptors and helpers that go beyond the standard `itertools`
module. They work on ordinary Python iterables and need nothing outside the
standard library.

## Installation

```
pip install iterkit
```

## What is inside

| Module | Highlights |
| --- | --- |
| `iterkit.adaptors` | `interleave`, `interleave_shortest`, `cartesian_product`, `batching`, `take_while_ref`, `while_some`, `positions`, `update`, `PutBack` / `put_back` |
| `iterkit.coalesce` | `coalesce`, `dedup`, `dedup_by`, `dedup_with_count`, `dedup_by_with_count` |
| `iterkit.combinations` | `combinations`, `Combinations` (reads its source lazily; `count()` and `reset(k)`) |
| `iterkit.combinations_with_replacement` | `combinations_with_replacement`, `CombinationsWithReplacement` |
| `iterkit.tuple_combinations` | `tuple_combinations`, `checked_binomial` |
| `iterkit.multi_product` | `multi_cartesian_product`, `MultiProduct` (with `count()` and `last()`) |
| `iterkit.duplicates` | `duplicates`, `duplicates_by` |
| `iterkit.results` | `Ok`, `Err`, `map_ok`, `filter_ok`, `filter_map_ok`, `flatten_ok`, `map_into` |
| `iterkit.extrema` | `min_set`, `max_set`, `min_set_by`, `max_set_by` |
| `iterkit.diff` | `diff_with` returning `FirstMismatch`, `Shorter`, `Longer` or `None` |
| `iterkit.exactly_one` | `exactly_one`, `at_most_one`, `ExactlyOneError` |
| `iterkit.concat` | `concat`, `cons_tuples` |

## Examples

```python
from iterkit.adaptors import interleave
from iterkit.coalesce import dedup, dedup_with_count
from iterkit.combinations import combinations
from iterkit.extrema import min_set

list(interleave([7, 9, 8, 10], [2, 77]))   # [7, 2, 9, 77, 8, 10]
list(dedup([1, 1, 2, 3, 3, 3, 1]))         # [1, 2, 3, 1]
list(dedup_with_count("aab"))              # [(2, 'a'), (1, 'b')]
list(combinations("abc", 2))               # [['a', 'b'], ['a', 'c'], ['b', 'c']]
min_set([3, 1, 2, 1])                      # [1, 1]
```

Adaptors in `iterkit.results` work on items wrapped in `Ok` or `Err`:

```python
from iterkit.results import Ok, Err, map_ok

list(map_ok([Ok(1), Err("bad"), Ok(3)], lambda x: x * 10))
# [Ok(value=10), Err(error='bad'), Ok(value=30)]
```

Functions that expect exactly one element raise an error instead of
returning a status:

```python
from iterkit.exactly_one import exactly_one, ExactlyOneError

exactly_one(x for x in range(10) if x == 2)   # 2

try:
    exactly_one(range(2, 4))
except ExactlyOneError as err:
    print(err)          # got at least 2 elements when exactly one was expected
    print(list(err))    # the elements are still there: [2, 3]
```

## What it does not do

iterkit is a library only: it installs no command-line program. It has no
lazy string-formatting helpers and no type for values that may hold a left
item, a right item or both; use `str.join` and tuples for those.

## Running the tests

```
pip install -e ".[test]"
pytest
```