"""Positions in a stack and the fixed moves for three elements."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stacks import Stacks, get_max, get_min


def get_position(values: Iterable[int], value: int) -> int:
    """1-based position of the first ``value``; one past the end if it is absent."""
    count = 0
    for count, item in enumerate(values, start=1):
        if item == value:
            return count
    return count + 1


def sort_3(stacks: Stacks) -> Stacks:
    """Order stack a of three elements with the fixed moves for its min and max positions."""
    a = list(stacks.a)
    min_pos = get_position(a, get_min(a))
    max_pos = get_position(a, get_max(a))
    if min_pos == 1:
        stacks.rra()
        stacks.sa()
    elif min_pos == 2:
        if max_pos == 1:
            stacks.ra()
        elif max_pos == 3:
            stacks.sa()
    elif min_pos == 3:
        if max_pos == 1:
            stacks.ra()
            stacks.ra()
        elif max_pos == 2:
            stacks.rra()
    return stacks