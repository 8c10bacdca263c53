"""Cost-driven pushing from a to b for larger inputs, and the place to push back into a."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from pushswap.small import get_position
from pushswap.stacks import Stacks, get_max, get_min

UP = "up"
DOWN = "down"


@dataclass
class Move:
    """Rotations needed to bring one element of a to the top and push it to b.

    ``rot_a``/``rot_b`` are ``"up"`` (ra/rb), ``"down"`` (rra/rrb) or None.
    ``rr`` and ``rrr`` count the rotations shared by both stacks; the
    remaining single-stack rotations are in ``steps_a`` and ``steps_b``.
    """

    pos_a: int
    steps_a: int = 0
    rot_a: Optional[str] = None
    steps_b: int = 0
    rot_b: Optional[str] = None
    rr: int = 0
    rrr: int = 0

    @property
    def total(self) -> int:
        """All operations of the move, the final pb included."""
        return 1 + self.steps_a + self.steps_b + self.rr + self.rrr


def _middle(size: int) -> int:
    return 1 if size <= 3 else size // 2


def calc_steps(size: int, pos: int) -> tuple[int, str]:
    """Rotations that bring position ``pos`` to the top, and their direction."""
    if pos <= _middle(size):
        return max(pos - 1, 0), UP
    return max(size + 1 - pos, 0), DOWN


def calc_steps_last(size: int, pos: int) -> tuple[int, str]:
    """Rotations that bring position ``pos`` to the bottom, and their direction."""
    if pos <= _middle(size):
        return max(pos, 0), UP
    return max(size - pos, 0), DOWN


def rotation_a(pos_a: int, size_a: int) -> tuple[int, str]:
    """Rotations of a that bring ``pos_a`` to the top, and their direction."""
    if pos_a <= size_a // 2:
        return max(pos_a - 1, 0), UP
    return max(size_a + 1 - pos_a, 0), DOWN


def get_pos_in_b(value: int, b: Sequence[int], max_value: int) -> int:
    """Position in b, a circularly descending stack, of the first element below ``value``.

    The walk starts at ``max_value`` and looks for a neighbour pair with
    ``value`` strictly between them.
    """
    items = list(b)
    size = len(items)
    start = items.index(max_value)
    for offset in range(size):
        here = (start + offset) % size
        after = (here + 1) % size
        if items[here] > value > items[after]:
            return after + 1
    raise ValueError(f"no place for {value} between the elements of b")


def rotation_b(value: int, b: Sequence[int]) -> tuple[int, Optional[str]]:
    """Rotations of b that prepare it to receive ``value`` on top, and their direction."""
    items = list(b)
    highest = get_max(items)
    lowest = get_min(items)
    if value > highest or value < lowest:
        pos = get_position(items, highest)
    else:
        pos = get_pos_in_b(value, items, highest)
    if pos == 1:
        return 0, None
    return calc_steps(len(items), pos)


def move_cost(stacks: Stacks, pos_a: int) -> Move:
    """The move that pushes the element at ``pos_a`` of a into its place in b."""
    a = list(stacks.a)
    if not 1 <= pos_a <= len(a):
        raise IndexError(f"position {pos_a} outside stack a of {len(a)} elements")
    steps_a, rot_a = rotation_a(pos_a, len(a))
    steps_b, rot_b = rotation_b(a[pos_a - 1], stacks.b)
    move = Move(pos_a, steps_a, rot_a, steps_b, rot_b)
    if rot_a == rot_b and steps_a > 0 and steps_b > 0:
        shared = min(steps_a, steps_b)
        if rot_a == UP:
            move.rr = shared
        else:
            move.rrr = shared
        move.steps_a -= shared
        move.steps_b -= shared
    return move


def cheapest_move(stacks: Stacks) -> Move:
    """The move with the fewest operations; the earliest position wins ties."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    best: Optional[Move] = None
    for pos_a in range(1, len(stacks.a) + 1):
        move = move_cost(stacks, pos_a)
        if best is None or move.total < best.total:
            best = move
    return best


def do_push(stacks: Stacks, move: Move) -> Stacks:
    """Carry out ``move``: shared rotations, single rotations, then pb."""
    for _ in range(move.rr):
        stacks.rr()
    for _ in range(move.rrr):
        stacks.rrr()
    for _ in range(move.steps_a):
        if move.rot_a == UP:
            stacks.ra()
        elif move.rot_a == DOWN:
            stacks.rra()
    for _ in range(move.steps_b):
        if move.rot_b == UP:
            stacks.rb()
        elif move.rot_b == DOWN:
            stacks.rrb()
    return stacks.pb()


def do_bigger_sort(stacks: Stacks) -> Stacks:
    """Push the cheapest element of a into its place in b."""
    return do_push(stacks, cheapest_move(stacks))


def get_pos_in_a(value: int, a: Sequence[int]) -> int:
    """Position in a whose element is above ``value`` while the one before it is below.

    The element before the first is the last. Without such a place the
    result is one past the end.
    """
    items = list(a)
    if not items:
        raise ValueError("stack a is empty")
    befores = items[-1:] + items[:-1]
    return next(
        (pos for pos, (before, current) in enumerate(zip(befores, items), start=1)
         if before < value < current),
        len(items) + 1,
    )


def push_back(stacks: Stacks) -> int:
    """Position in a where the top of b belongs; the stacks are not changed."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    return get_pos_in_a(stacks.b[0], stacks.a)