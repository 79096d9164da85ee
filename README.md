# pushswap

pushswap takes a list of distinct integers and sorts them on two stacks, `a` and `b`. It prints every operation it uses, one per line. These are the only operations allowed:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top element of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upwards: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downwards: the bottom element goes to the top |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push_swap 3 2 1
```

or as a single argument, separated by spaces:

```
push_swap "3 2 1"
```

The same entry point can also be started with `python -m pushswap.cli`.

The first number is the top of stack `a`. The program prints operations that aim to leave `a` in ascending order from top to bottom.

- With no arguments, nothing is printed and the exit status is 0.
- If the input is already sorted, nothing is printed.
- `Error` goes to standard error and the exit status is 1 in these cases:
  - a token is not an integer, meaning an optional `+` or `-` followed by ASCII digits;
  - the single argument holds no numbers at all;
  - a value does not fit in a signed 32-bit integer;
  - a value appears more than once;
  - the large-input strategy cannot finish (see below).

A single argument is split on spaces only. When several arguments are given, each one has to be exactly one number.

## Sorting strategy

- Two to five numbers are handled by fixed small sorts (`sort2` through `sort5`). Each small sort moves the minimum to `b`, sorts the rest, and brings the minimum back.
- More than five numbers are handled by `sort_big`, which works in three steps:
  1. It rotates `a` and pushes to `b` only the values that are no greater than half the count of numbers, until three values remain on `a`.
  2. It sorts those three values.
  3. It repeatedly brings the largest value on `b` to the top of `b` and pushes it back to `a`.

### Limits

`sort_big` is not a general sort:

- It needs at least `count - 3` values that are no greater than `count // 2`. If it runs out of such values, it raises `RuntimeError` and the command prints `Error`.
  - For example, `1 2 3 4 5 6` works.
  - Seven or more consecutive positive numbers starting at 1 fail.
- The final stack is in order only when the three values left on `a` are all larger than the values moved to `b`.

The package has no checker that replays operations against an input and verifies that the result is sorted.

## Library use

- `pushswap.cli.solve(args)` runs the whole program on a list of argument strings and returns the list of operation names. Bad input raises `pushswap.parsing.InputError`. `pushswap.cli.choose_sort(machine)` picks a strategy by the size of `a`.
- `pushswap.stack.Stack` is a stack of integers; iterating over it goes from top to bottom. It has these methods:
  - `push`
  - `pop`
  - `top`
  - `swap`
  - `rotate`
  - `reverse_rotate`
  - `is_sorted`
- `pushswap.stack.Machine(a, b, emit)` holds the two stacks and performs the named operations (`pa`, `pb`, `sa`, `sb`, `ss`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`). It passes each operation name to `emit`, which prints it by default. `pa` and `pb` on an empty source stack do nothing and emit nothing.
- `pushswap.sorting` contains:
  - `find_min_pos` and `find_max_pos`;
  - `sort2`, `sort3`, `sort4` and `sort5`;
  - `sort_big`.
- `pushswap.parsing` contains:
  - `parse_input`, `validate_input`, `is_valid_number`, `atoi_safe`, `build_stack` and `has_duplicates`;
  - `split_words`;
  - `atoi`, a lenient leading-integer reader that wraps to 32 bits.

```python
from pushswap.cli import solve

solve(["3", "2", "1"])   # ['sa', 'rra']
```

### Helper modules

The package also contains small helper modules:

- `pushswap.strings` — C-style string routines such as `strchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strtrim` and `itoa`.
  - Searches return an index or `None`.
  - `strlcpy` and `strlcat` return a `(text, length)` pair.
- `pushswap.memory` — byte-buffer routines on `bytearray`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`. A length past the end of a buffer raises `ValueError`.
- `pushswap.charclass` — ASCII tests on character codes: `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint`, plus `tolower` and `toupper`.
- `pushswap.output` — functions that write to a text stream: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
- `pushswap.formatting` — a small printf supporting `%c %s %d %i %x %X %u %p`. It provides:
  - `sprintf`, which returns the text;
  - `printf`, which writes to `stream` (standard output by default) and returns the length written;
  - `format_spec`, `format_digit` and `format_unsigned`.

## Running the tests

```
pip install .[test]
pytest
```