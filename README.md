# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small set
of stack operations. The `push_swap` command prints the sequence of operations
that sorts stack `a` in ascending order, one per line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (top goes to the bottom)          |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (bottom comes to the top)       |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation on a stack with too few elements does nothing.

## Installation

```
pip install .
```

## Command line

Numbers can be given as separate arguments or as one space-separated string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Each token must be an optional `+` or `-` followed by ASCII digits only.

- Sorted input prints nothing and exits with status 0.
- Invalid input (a malformed token, a value outside the 32-bit signed range,
  or a duplicate) prints `Error` to standard output and exits with status 1.
- No arguments, a single empty argument, or a single argument made only of
  spaces exits with status 1 without printing anything.

The same entry point is `pushswap.cli.main(argv=None)`, which returns the exit
status instead of exiting.

## Library use

```python
from pushswap.sort import solve
from pushswap.stack import Operation, Stacks, is_sorted

moves = solve([3, 2, 1])          # list of Operation members
print([move.value for move in moves])

stacks = Stacks([3, 2, 1], quiet=True)
for move in moves:
    stacks.apply(move)            # an Operation or its name, e.g. "ra"
assert is_sorted(stacks.a)
```

- `pushswap.stack`: `Operation` (an enum of the ten operations), `Stacks`
  (stacks `a` and `b` as deques, top first, an `operations` log, one method per
  operation plus `apply`; unless `quiet=True`, each operation is also written
  to standard output), and `is_sorted`.
- `pushswap.sort`: `solve(numbers)` returns the operations; `sort_three` and
  `sort_stacks` work on a `Stacks` in place. Two values are sorted with `sa`,
  three with at most two operations, more with a cost-driven strategy that
  moves values to `b` and back.
- `pushswap.parse`: `check_syntax`, `split_words` and `parse_numbers`, which
  raises `InputError` (a `ValueError`) on bad input.

## Helper modules

The package also carries small helper modules:

- `pushswap.chars`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`) for char
  codes or one-character strings.
- `pushswap.memory`: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- `pushswap.text`: string helpers (`strlen`, `strchr`, `strrchr`, `strncmp`,
  `strlcpy`, `strlcat`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi`, `striteri`); searches return indexes or `None`.
- `pushswap.convert`: `atoi` (wraps like a 32-bit int) and `itoa`.
- `pushswap.linkedlist`: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `remove`, `clear`, `iterate` and `map`.
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  writing to a text stream or an integer file descriptor.
- `pushswap.printf`: `render(fmt, *args)` and `printf(fmt, *args, stream=None)`
  for the `%c %s %p %d %i %u %x %X %%` conversions, plus the `format_*`
  helpers.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input; to verify a solution, replay it with `Stacks.apply` and
`is_sorted` as shown above.

## Tests

```
pip install ".[test]"
pytest
```