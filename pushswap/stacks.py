"""The two push_swap stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, TextIO


def _swap_top(stack: deque) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque, steps: int) -> None:
    if len(stack) > 1:
        stack.rotate(steps)


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations applied.

    Every operation name is appended to ``ops`` and, when ``out`` is set,
    written to it followed by a newline. Operations return the stacks so
    calls can be chained.
    """

    a: deque = field(default_factory=deque)
    b: deque = field(default_factory=deque)
    out: Optional[TextIO] = None
    ops: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)

    def _emit(self, name: str) -> Stacks:
        self.ops.append(name)
        if self.out is not None:
            self.out.write(f"{name}\n")
        return self

    def sa(self) -> Stacks:
        """Swap the two top elements of a; nothing happens with fewer than two."""
        _swap_top(self.a)
        return self._emit("sa")

    def sb(self) -> Stacks:
        """Swap the two top elements of b; nothing happens with fewer than two."""
        _swap_top(self.b)
        return self._emit("sb")

    def ss(self) -> Stacks:
        """sa and sb at once."""
        _swap_top(self.a)
        _swap_top(self.b)
        return self._emit("ss")

    def pa(self) -> Stacks:
        """Move the top of b onto a; an empty b is left alone and nothing is logged."""
        if not self.b:
            return self
        self.a.appendleft(self.b.popleft())
        return self._emit("pa")

    def pb(self) -> Stacks:
        """Move the top of a onto b; an empty a is left alone and nothing is logged."""
        if not self.a:
            return self
        self.b.appendleft(self.a.popleft())
        return self._emit("pb")

    def ra(self) -> Stacks:
        """Shift a up by one: the first element becomes the last."""
        _rotate(self.a, -1)
        return self._emit("ra")

    def rb(self) -> Stacks:
        """Shift b up by one: the first element becomes the last."""
        _rotate(self.b, -1)
        return self._emit("rb")

    def rr(self) -> Stacks:
        """ra and rb at once."""
        _rotate(self.a, -1)
        _rotate(self.b, -1)
        return self._emit("rr")

    def rra(self) -> Stacks:
        """Shift a down by one: the last element becomes the first."""
        _rotate(self.a, 1)
        return self._emit("rra")

    def rrb(self) -> Stacks:
        """Shift b down by one: the last element becomes the first."""
        _rotate(self.b, 1)
        return self._emit("rrb")

    def rrr(self) -> Stacks:
        """rra and rrb at once."""
        _rotate(self.a, 1)
        _rotate(self.b, 1)
        return self._emit("rrr")

    def render(self) -> str:
        """Both stacks side by side, one row per level, followed by a blank line."""
        rows = []
        depth = max(len(self.a), len(self.b))
        for level in range(depth):
            left = f"stack a: {self.a[level]}" if level < len(self.a) else " " * 10
            right = f"stack b: {self.b[level]}" if level < len(self.b) else ""
            rows.append(f"{left}|\t{right}\n")
        return "".join(rows) + "\n"


def get_min(values: Iterable[int]) -> int:
    """Smallest value of a non-empty stack."""
    items = list(values)
    if not items:
        raise ValueError("empty stack has no minimum")
    return min(items)


def get_max(values: Iterable[int]) -> int:
    """Largest value of a non-empty stack."""
    items = list(values)
    if not items:
        raise ValueError("empty stack has no maximum")
    return max(items)