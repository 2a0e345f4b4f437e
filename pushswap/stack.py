"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

import sys
from collections import deque
from enum import Enum
from typing import Callable, Iterable, Sequence


class Operation(Enum):
    """An instruction on stacks a and b."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values are in non-decreasing order."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dst: deque, src: deque) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    stack.rotate(1)


_EFFECTS: dict[Operation, Callable[["Stacks"], None]] = {
    Operation.SA: lambda s: _swap(s.a),
    Operation.SB: lambda s: _swap(s.b),
    Operation.PA: lambda s: _push(s.a, s.b),
    Operation.PB: lambda s: _push(s.b, s.a),
    Operation.RA: lambda s: _rotate(s.a),
    Operation.RB: lambda s: _rotate(s.b),
    Operation.RR: lambda s: (_rotate(s.a), _rotate(s.b)),
    Operation.RRA: lambda s: _reverse_rotate(s.a),
    Operation.RRB: lambda s: _reverse_rotate(s.b),
    Operation.RRR: lambda s: (_reverse_rotate(s.a), _reverse_rotate(s.b)),
}


class Stacks:
    """Stacks a and b, top first, with a log of the operations applied.

    Unless ``quiet`` is set, each operation is also written to standard
    output as its name followed by a newline.
    """

    def __init__(self, numbers: Sequence[int] = (), quiet: bool = False) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.quiet = quiet
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, op: Operation | str) -> None:
        """Perform one operation, given as an Operation or its name."""
        op = Operation(op)
        _EFFECTS[op](self)
        self.operations.append(op)
        if not self.quiet:
            sys.stdout.write(f"{op.value}\n")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self.apply(Operation.SB)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self.apply(Operation.PB)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self.apply(Operation.RB)

    def rr(self) -> None:
        """Rotate a and b together."""
        self.apply(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate a and b together."""
        self.apply(Operation.RRR)