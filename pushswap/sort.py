"""Choosing and running the sorting strategy for stack a."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.bigger import do_bigger_sort, push_back
from pushswap.small import sort_3
from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True if ``values`` is non-empty and strictly ascending."""
    items = list(values)
    if not items:
        return False
    return all(left < right for left, right in zip(items, items[1:]))


def sort_2(stacks: Stacks) -> Stacks:
    """Order stack a of two elements."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()
    return stacks


def _rotate_into_order(stacks: Stacks) -> Stacks:
    for _ in range(len(stacks.a)):
        if is_sorted(stacks.a):
            return stacks
        stacks.rra()
    if is_sorted(stacks.a):
        return stacks
    raise ValueError("stack a cannot be rotated into order")


def sort_one_back(stacks: Stacks) -> Stacks:
    """Work the element just pushed on top of a into an otherwise ordered a."""
    a = stacks.a
    if a[0] < a[1]:
        return stacks
    if a[0] > a[-1]:
        return stacks.ra()
    moved = True
    while moved and not is_sorted(a):
        moved = False
        if a[0] > a[1]:
            stacks.sa()
            moved = True
        if is_sorted(a):
            return stacks
        if a[1] > a[2]:
            stacks.ra()
            moved = True
        if is_sorted(a):
            return stacks
    return _rotate_into_order(stacks)


def sort_5(stacks: Stacks) -> Stacks:
    """Sort five elements: park two in b, order three, then bring the two back."""
    stacks.pb()
    stacks.pb()
    sort_3(stacks)
    stacks.pa()
    sort_one_back(stacks)
    stacks.pa()
    sort_one_back(stacks)
    return stacks


def sort(stacks: Stacks) -> Stacks:
    """Sort stack a, choosing the strategy by its size; sorted input is left alone."""
    size = len(stacks.a)
    if is_sorted(stacks.a):
        return stacks
    if size == 2:
        return sort_2(stacks)
    if size == 3:
        return sort_3(stacks)
    stacks.pb()
    stacks.pb()
    while len(stacks.a) > 3:
        do_bigger_sort(stacks)
    sort_3(stacks)
    push_back(stacks)
    return stacks