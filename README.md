# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. The `pushswap` command prints the operations it
performs, one per line, so that applying them in order leaves stack `a`
sorted in ascending order from top to bottom and stack `b` empty.

## Installation

```
pip install .
```

## Usage

Give the numbers either as separate arguments or as one space-separated
string. The first number is the top of stack `a`.

```
pushswap 3 2 1
pushswap "5 1 4 2 3"
```

The same entry point can be run as `python -m pushswap.cli 3 2 1`.

Each line of output is one operation:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom element goes to the top |

A swap on a stack with fewer than two elements does nothing and is not
printed.

### Errors

`Error` is printed on standard error, with exit status 1, when an
argument is empty or only spaces, is not a whole number (an optional
sign followed by digits), lies outside the 32-bit signed integer range,
or when a number appears twice.

If no numbers are given, or the input is already sorted (a single number
counts as sorted), nothing is printed and the exit status is 1.
Otherwise the exit status is 0.

### Strategy

Two or three numbers are sorted directly. Four or five are sorted by
moving the smallest values to `b`, sorting the remaining three and
pushing back. Larger inputs are split into ten value ranges ("buckets")
that are pushed to `b` lowest range first, then brought back to `a`
largest value first.

The program does not check or apply a list of operations given to it; it
only produces one.

## Using it from Python

```python
from pushswap.parsing import parse_arguments
from pushswap.stacks import Stacks
from pushswap.sorting import sort

ops = []
stacks = Stacks(parse_arguments(["4", "1", "3", "2"]), ops.append)
sort(stacks)
print(ops)        # the operations, in order
print(stacks.a)   # stack a, bottom first: [4, 3, 2, 1]
```

- `pushswap.parsing.parse_arguments(args)` returns the integers named by
  the arguments and raises `pushswap.parsing.InputError` (a `ValueError`)
  for invalid input.
- `pushswap.stacks.Stacks(values, emit=None)` holds stacks `a` and `b` as
  lists with the top last, offers one method per operation (`sa`, `pb`,
  `rra`, ...), records every performed operation in `log`, and passes
  each one to `emit` when given.
- `pushswap.sorting.sort(stacks)` sorts stack `a`; `is_sorted(stacks)`
  tells whether it already is.

## Running the tests

```
pip install ".[test]"
pytest
```