# pushswap

Work on a list of integers using two stacks, `a` and `b`, and a fixed set of
operations. Every operation performed is printed, one per line.

## Operations

`pushswap.stacks.Stacks` holds both stacks (top first) and has one method per
operation. Each method appends its name to `Stacks.ops`, writes it followed by
a newline to `Stacks.out` when that is set, and returns the stacks.

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

`pa` on an empty `b` and `pb` on an empty `a` do nothing and are not logged.
`Stacks.render()` returns both stacks side by side as text.

## Usage

Install the package, then pass the numbers as separate arguments or as a
single space-separated string. The first number is the top of stack `a`.

```
push_swap 3 1 2
push_swap "2 6 8 9 0"
```

Input must consist of integers that fit in 32 bits, with an optional leading
`+` or `-`, and no duplicates. Invalid input prints `Error` on standard output
and exits with status 1. No arguments, or an empty first argument, exits with
status 0 and prints nothing. Input that is already sorted produces no
operations.

## From Python

```python
from pushswap.stacks import Stacks
from pushswap.sort import sort

stacks = Stacks([3, 1, 2])
sort(stacks)
print(stacks.ops)        # ['ra']
print(list(stacks.a))    # [1, 2, 3]
```

`pushswap.cli.main(argv)` runs the whole program on a list of arguments and
returns the exit status. Validation lives in `pushswap.parse`
(`read_tokens`, `check_valid`, which raises `InputError`).

Sorting building blocks:

- `pushswap.sort`: `is_sorted`, `sort_2`, `sort_5`, `sort_one_back`, `sort`.
- `pushswap.small`: `get_position` and `sort_3` (fixed moves for three numbers).
- `pushswap.bigger`: cost calculation for pushing an element of `a` into its
  place in a descending `b` (`Move`, `move_cost`, `cheapest_move`, `do_push`,
  `do_bigger_sort`) and `get_pos_in_a` / `push_back`, which report where the
  top of `b` belongs in `a`.

The package also carries small helper modules: `pushswap.chars` (character
classes, `atoi`, `itoa`), `pushswap.strings` (C-string style search, copy,
`split`, `strtrim` and so on), `pushswap.memory` (byte-buffer operations on
bytearrays), `pushswap.lists` (a singly linked `Node` list) and
`pushswap.printf` (`printf_format` / `printf` with `%c %s %p %d %i %u %x %X %%`).

## What it does not do

Only two and three numbers are sorted completely. For four or more, `sort`
pushes two numbers to `b`, then keeps pushing the cheapest number of `a` into
its place in `b` until three remain in `a`, and orders those three. The
numbers are never moved back from `b` to `a`: `push_back` only computes the
position in `a` where the top of `b` would go and leaves the stacks as they
are. The printed operations therefore do not sort such input. `sort_5` is
available from Python but `sort` and the command do not use it.

## Tests

```
pip install -e ".[test]"
pytest
```