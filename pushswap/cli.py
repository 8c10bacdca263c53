"""Command line: read numbers, validate them, and print the operations that sort them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from pushswap.chars import atoi
from pushswap.parse import InputError, check_valid, read_tokens
from pushswap.sort import sort
from pushswap.stacks import Stacks


def to_ints(tokens: Iterable[str]) -> list[int]:
    """Convert validated tokens to integers."""
    return [atoi(token) for token in tokens]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on the arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "":
        return 0
    tokens = read_tokens(args)
    try:
        check_valid(tokens)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    if not tokens:
        return 0
    stacks = Stacks(a=to_ints(tokens), out=sys.stdout)
    sort(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())