# iterkit

A collection of iterator adaptors and helper functions that complement the
standard `itertools` module. The adaptors work lazily where they can and
accept any Python iterable.

## Installation

```
pip install iterkit
```

For running the test suite:

```
pip install "iterkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `iterkit.adaptors` | `interleave`, `interleave_shortest`, `put_back`, `PutBack`, `cartesian_product`, `batching`, `step`, `take_while_ref`, `while_some`, `tuple_combinations`, `positions`, `update` |
| `iterkit.multi_product` | `multi_cartesian_product` |
| `iterkit.coalesce` | `coalesce`, `dedup`, `dedup_by`, `dedup_with_count`, `dedup_by_with_count` |
| `iterkit.duplicates` | `duplicates`, `duplicates_by` |
| `iterkit.extrema` | `min_set`, `max_set`, `min_set_by`, `max_set_by` |
| `iterkit.concat` | `concat` |
| `iterkit.diff` | `diff_with` with the outcomes `FirstMismatch`, `Shorter`, `Longer` |
| `iterkit.results` | `Ok`, `Err`, `filter_ok`, `filter_map_ok`, `map_ok`, `map_into` |
| `iterkit.flatten` | `flatten_ok` |
| `iterkit.exactly_one` | `exactly_one`, `ExactlyOneError` |
| `iterkit.either_or_both` | `EitherOrBoth` |

## Examples

Collapsing runs of equal elements:

```python
from iterkit.coalesce import dedup, dedup_with_count

list(dedup([0, 1, 1, 1, 2, 1, 3, 3]))
# [0, 1, 2, 1, 3]

list(dedup_with_count([0, 1, 1, 1, 2, 1, 3, 3]))
# [(1, 0), (3, 1), (1, 2), (1, 1), (2, 3)]
```

Merging adjacent elements: the function returns `Ok(merged)` to join two
elements, or `Err((previous, current))` to keep them apart:

```python
from iterkit.coalesce import coalesce
from iterkit.results import Ok, Err

def same_sign(x, y):
    return Ok(x + y) if (x >= 0) == (y >= 0) else Err((x, y))

list(coalesce([-1, -2, -3, 3, 1, 0, -1], same_sign))
# [-6, 4, -1]
```

Reporting elements that occur more than once, each only the first time it
repeats:

```python
from iterkit.duplicates import duplicates

list(duplicates([0, 1, 2, 3, 2, 1, 3]))
# [2, 1, 3]
```

Alternating two sources:

```python
from iterkit.adaptors import interleave_shortest

list(interleave_shortest([0, 2, 4], [1, 3, 5, 7]))
# [0, 1, 2, 3, 4, 5]
```

Products over any number of iterables, the last varying fastest:

```python
from iterkit.multi_product import multi_cartesian_product

list(multi_cartesian_product([[1, 2], "ab"]))
# [[1, 'a'], [1, 'b'], [2, 'a'], [2, 'b']]
```

Finding every minimal element rather than just one:

```python
from iterkit.extrema import min_set

min_set([(0, 1), (2, 0), (0, 2)], key=lambda pair: pair[0])
# [(0, 1), (0, 2)]
```

Seeing where two sequences part ways:

```python
from iterkit.diff import diff_with, FirstMismatch

result = diff_with([1, 2, 3, 4], [1, 5, 3, 4])
isinstance(result, FirstMismatch), result.index, list(result.second_remaining)
# (True, 1, [5, 3, 4])
```

Working inside `Ok` values while passing `Err` values through:

```python
from iterkit.results import Ok, Err, map_ok

list(map_ok([Ok(1), Err("bad")], lambda v: v + 1))
# [Ok(value=2), Err(error='bad')]
```

Demanding exactly one element; otherwise an `ExactlyOneError` is raised that
can still be iterated to recover every element that was read:

```python
from iterkit.exactly_one import exactly_one, ExactlyOneError

exactly_one([42])
# 42

try:
    exactly_one([1, 2, 3])
except ExactlyOneError as error:
    list(error)
    # [1, 2, 3]
```

A value with a left side, a right side, or both:

```python
from iterkit.either_or_both import EitherOrBoth

EitherOrBoth.of_left("tree").or_("stone", 5)
# ('tree', 5)
```

## What it does not do

- There is no command-line program; the package is a library only.
- There are no lazy string-formatting helpers for joining elements with a
  separator; use `str.join` or `format` directly.
- Combinations are offered only as fixed-size tuples through
  `iterkit.adaptors.tuple_combinations`; there is no separate
  combinations-with-replacement adaptor or binomial-count helper.