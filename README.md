# iteradapt

Lazy iterator adaptors for Python, with no runtime dependencies.

Each adaptor takes any iterable and produces items only when they are asked
for. Where an adaptor needs to look ahead, it reads no more of the source than
the look-ahead requires.

## Installation

```
pip install iteradapt
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Names |
| --- | --- |
| `iteradapt.merge_join` | `merge`, `merge_by`, `merge_join_by` |
| `iteradapt.either` | `Left`, `Right`, `Both` |
| `iteradapt.zip_longest` | `zip_longest` |
| `iteradapt.zip_eq` | `zip_eq` |
| `iteradapt.ziptuple` | `multizip`, `Zip` |
| `iteradapt.unziptuple` | `multiunzip` |
| `iteradapt.minmax` | `minmax`, `minmax_impl`, `NoElements`, `OneElement`, `MinMax` |
| `iteradapt.multipeek` | `multipeek`, `MultiPeek` |
| `iteradapt.peek_nth` | `peek_nth`, `PeekNth` |
| `iteradapt.peeking` | `Peekable`, `peeking_take_while`, `PeekingTakeWhile` |
| `iteradapt.put_back_n` | `put_back_n`, `PutBackN` |
| `iteradapt.pad_tail` | `pad_using` |
| `iteradapt.with_position` | `with_position`, `Position` |
| `iteradapt.permutations` | `permutations` |
| `iteradapt.powerset` | `powerset` |
| `iteradapt.tuples` | `tuples`, `tuple_windows`, `circular_tuple_windows`, `Tuples` |
| `iteradapt.unique` | `unique`, `unique_by` |
| `iteradapt.tee` | `tee`, `Tee` |
| `iteradapt.rciter` | `rciter`, `RcIter` |
| `iteradapt.repeatn` | `repeat_n`, `RepeatN` |
| `iteradapt.sources` | `iterate`, `unfold`, `Iterate`, `Unfold` |
| `iteradapt.take_while_inclusive` | `take_while_inclusive` |
| `iteradapt.process_results` | `process_results`, `ProcessResults` |
| `iteradapt.size_hint` | `add`, `add_scalar`, `sub_scalar`, `mul`, `mul_scalar`, `maximum`, `minimum` |

## Examples

Merge two sorted sequences, and join them on equal keys:

```python
from iteradapt.merge_join import merge, merge_join_by
from iteradapt.either import Left, Right, Both

list(merge([1, 3, 5], [2, 3, 4]))          # [1, 2, 3, 3, 4, 5]

def compare(left, right):
    return (left > right) - (left < right)

result = list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], compare))
assert result == [Left(1), Right(2), Both(3, 3), Both(4, 4), Right(5), Left(6)]
```

`merge_join_by` also accepts a comparison that returns a bool (true when the
left item comes first); it then yields only `Left` and `Right`.

Look ahead without consuming anything:

```python
from iteradapt.peek_nth import peek_nth

it = peek_nth([1, 2, 3])
it.peek_nth(0)   # 1
next(it)         # 1
it.peek_nth(1)   # 3
next(it)         # 2
```

`MultiPeek` instead moves a cursor forward with each `peek()`, reset by
`next()` or `reset_peek()`.

Take items while a predicate holds, leaving the first rejected item in place:

```python
from iteradapt.peeking import Peekable, peeking_take_while

source = Peekable(range(10))
list(peeking_take_while(source, lambda x: x <= 3))   # [0, 1, 2, 3]
next(source)                                         # 4
```

Any object with a `peeking_next(accept)` method works as the source:
`Peekable`, `PeekNth`, `MultiPeek`, `PutBackN`, `RepeatN` and
`PeekingTakeWhile` itself. Other objects raise `TypeError`.

Group items into fixed-size tuples and windows:

```python
from iteradapt.tuples import tuples, tuple_windows, circular_tuple_windows

it = tuples(range(5), 3)
list(it)                                   # [(0, 1, 2)]
list(it.into_buffer())                     # [3, 4]
list(tuple_windows([1, 2, 3, 4], 2))       # [(1, 2), (2, 3), (3, 4)]
list(circular_tuple_windows([1, 2, 3], 2)) # [(1, 2), (2, 3), (3, 1)]
```

Mark the first, middle and last items:

```python
from iteradapt.with_position import with_position, Position

assert list(with_position("ab")) == [(Position.FIRST, "a"), (Position.LAST, "b")]
```

Find the smallest and largest item in a single pass:

```python
from iteradapt.minmax import minmax

minmax([3, 1, 4, 1, 5]).into_option()   # (1, 5)
minmax([]).into_option()                # None
```

Permutations come out in lexicographic order of their positions, and the
source is read only as far as each step needs:

```python
from iteradapt.permutations import permutations

list(permutations(range(3), 2))
# [[0, 1], [0, 2], [1, 0], [1, 2], [2, 0], [2, 1]]
```

Zipping with `zip_eq` raises `ValueError` when the lengths differ:

```python
from iteradapt.zip_eq import zip_eq

list(zip_eq([1, 2], [3, 4]))   # [(1, 3), (2, 4)]
list(zip_eq([1, 2], [3]))      # ValueError
```

Several iterables at once, and back again:

```python
from iteradapt.ziptuple import multizip
from iteradapt.unziptuple import multiunzip

list(multizip(([1, 2], "ab", (True, False))))   # [(1, 'a', True), (2, 'b', False)]
multiunzip([(1, 2, 3), (4, 5, 6)], 3)          # ([1, 4], [2, 5], [3, 6])
```

Treat exception instances in a stream as failures:

```python
from iteradapt.process_results import process_results

process_results([1, 2, 3], sum)                      # 6
process_results([1, ValueError("bad"), 3], sum)      # raises ValueError("bad")
```

Build iterators from a state:

```python
from itertools import islice
from iteradapt.sources import iterate, unfold

list(islice(iterate(1, lambda i: i % 3 + 1), 5))     # [1, 2, 3, 1, 2]
list(unfold(3, lambda n: (n, n - 1) if n else None)) # [3, 2, 1]
```

## What is not included

This package has no combinations, cartesian products, grouping or chunking,
interleaving or k-way merging adaptors. The standard library's `itertools`
covers combinations, products and grouping of consecutive items.