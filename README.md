# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and prints
the sequence of stack operations that does it.

The numbers start on stack `a`, first number on top, and `b` starts empty.
When the listed operations are applied in order, `a` holds the numbers in
ascending order from top to bottom and `b` is empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: its top element becomes the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: its bottom element becomes the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An operation on a stack with too few elements leaves that stack unchanged.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
push_swap 5 "1 -7" 9
```

Numbers can be given as separate arguments, as one quoted argument, or as a
mix of both; each argument is split on spaces. Each operation goes to
standard output on its own line. Input that is already sorted prints
nothing. If no arguments are given, the command prints nothing and exits
with status 0.

If the input is invalid, the command writes `Error` to standard error and
exits with status 1. Input is invalid when any of these is true:

- an argument is empty or holds only spaces;
- a token is not an optional sign followed by digits;
- a value appears more than once;
- a value is outside the 32-bit signed integer range.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks
from pushswap.parsing import index_values

ops = solve([3, 2, 1])          # list of operation names

values = [3, 2, 1]
stacks = Stacks(values, index_values(values))
for op in ops:
    stacks.apply(op)
assert stacks.values_a() == [1, 2, 3]
assert stacks.values_b() == []
```

`Stacks` holds the two stacks as deques of `Element` objects and records the
name of every operation performed in its `operations` list. Each operation is
a method of the same name (`stacks.ra()`, `stacks.pb()`, ...); `apply` takes
the name as a string and raises `ValueError` for an unknown name.

Invalid input raises `pushswap.parsing.ParseError`, a subclass of
`ValueError`:

```python
from pushswap.parsing import parse_args

parse_args(["1", "2", "3"])     # [1, 2, 3]
parse_args(["1", "1"])          # raises ParseError
```

`pushswap.cli.run` takes the argument strings and returns the operations for
them. `pushswap.cli.main` is the function behind the `push_swap` command.

## What it does not do

The package only produces operation lists. There is no command that reads
operations from standard input and checks whether they sort a given list;
`Stacks.apply` can be used for that from Python, as in the example above.