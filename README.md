# pushswap

This package solves the two-stack sorting puzzle. The integers start on stack
`a`, and stack `b` starts empty. The goal is to sort `a` in ascending order from
the top, using only these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` / `b` |
| `pa`, `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb` | rotate `a` / `b` up: the first element becomes the last |
| `rra`, `rrb` | rotate `a` / `b` down: the last element becomes the first |

The solver first replaces each value with its rank. It then picks a strategy
by input size:

- Two values: a single swap.
- Three values: at most one rotation and one swap.
- Four or five values: the two smallest go to `b`, the rest are sorted, and
  then they are pushed back.
- Larger inputs: a binary radix sort over the ranks.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

You can give the numbers as separate arguments or as space-separated values
inside one argument. The command prints one operation per line on standard
output and behaves like this:

- With no arguments, it prints nothing and exits with status 1.
- It prints `Error` on standard error and exits with status 1 when:
  - an argument is empty or starts with a space,
  - an argument holds anything other than digits, spaces and signs,
  - a sign is not followed by a digit,
  - a value is outside the 32-bit signed range,
  - a value appears twice.
- If the input is already sorted, it prints nothing and exits with status 0.

To count the operations:

```
push-swap 5 1 4 2 3 | wc -l
```

## Library use

```python
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve

values = parse_arguments(["3 1 2"])
operations = solve(values)   # ['rra', 'sa'] style list of operation names
```

### `pushswap.parsing`

- `parse_arguments(args)` validates the arguments and returns the integers.
- `validate_arguments(args)` only validates them.
- `parse_number(text)` reads one signed 32-bit integer.
- `has_duplicates(values)` reports whether any value repeats.
- `index_values(values)` replaces each value with the count of values smaller
  than it.

Bad input raises `InputError`, a subclass of `ValueError`.

### `pushswap.stacks`

`Stacks(values, out=None)` holds stack `a` (the given values) and stack `b`.
It has three operation methods:

- `swap("sa" | "sb")`
- `push("pa" | "pb")`
- `rotate("a" | "b", Direction.UP | Direction.DOWN)`

Each operation that takes effect is appended to `operations`. When an output
stream is given, the operation is also written to it as one line.
`is_sorted()` checks stack `a`.

### `pushswap.sorting`

- `solve(values)` returns the list of operations. It raises `InputError` for
  duplicated values.
- `sort_three`, `sort_four_to_five` and `radix_sort` apply one strategy to a
  `Stacks` object.

### `pushswap.cli`

`main(argv=None)` runs the command and returns its exit status.

### String and formatting helpers

The package also has small helper modules:

- `pushswap.chars`: ASCII classification, case conversion, `atoi`, `itoa`.
- `pushswap.textops`: `split`, `count_tokens`, `strtrim`, `substr`, `strjoin`,
  `strnstr`, `strncmp`.
- `pushswap.cstrings`: `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strmapi`,
  `memchr`, `memcmp`.
- `pushswap.cformat`: `cformat(fmt, *args)` returns the formatted text, and
  `printf(fmt, *args)` writes it to standard output. Both support
  `%c %s %p %d %i %u %x %X %%`. `format_hex` is also available.

## What it does not do

There is no checker command that reads a list of operations and verifies that
they sort a given input. You can replay operations yourself with the methods of
`Stacks`.

## Tests

```
pip install .[test]
pytest
```