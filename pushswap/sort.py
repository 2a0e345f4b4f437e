"""The sorting strategy: cost-driven moves from a to b and back."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from pushswap.stack import Operation, Stacks, is_sorted


def _above_median(stack: deque, value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _moves_to_top(stack: deque, value: int) -> int:
    index = stack.index(value)
    return index if index <= len(stack) // 2 else len(stack) - index


def _target_in_b(value: int, b: deque) -> int:
    """The largest value of b below ``value``, or the maximum of b."""
    smaller = [candidate for candidate in b if candidate < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: deque) -> int:
    """The smallest value of a above ``value``, or the minimum of a."""
    larger = [candidate for candidate in a if candidate > value]
    return min(larger) if larger else min(a)


def _bring_to_top(stacks: Stacks, name: str, value: int) -> None:
    stack = stacks.a if name == "a" else stacks.b
    if _above_median(stack, value):
        step = stacks.ra if name == "a" else stacks.rb
    else:
        step = stacks.rra if name == "a" else stacks.rrb
    while stack[0] != value:
        step()


def _move_a_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    targets = {value: _target_in_b(value, b) for value in a}
    cheapest = min(
        a, key=lambda value: _moves_to_top(a, value) + _moves_to_top(b, targets[value])
    )
    target = targets[cheapest]
    node_above = _above_median(a, cheapest)
    target_above = _above_median(b, target)
    if node_above == target_above:
        both = stacks.rr if node_above else stacks.rrr
        while b[0] != target and a[0] != cheapest:
            both()
    _bring_to_top(stacks, "a", cheapest)
    _bring_to_top(stacks, "b", target)
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    _bring_to_top(stacks, "a", _target_in_a(stacks.b[0], stacks.a))
    stacks.pa()


def _min_on_top(stacks: Stacks) -> None:
    smallest = min(stacks.a)
    step = stacks.ra if _above_median(stacks.a, smallest) else stacks.rra
    while stacks.a[0] != smallest:
        step()


def sort_three(stacks: Stacks) -> None:
    """Order the three values of stack a with at most two operations."""
    a = stacks.a
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a, using b, when a holds more than three values."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_b_to_a(stacks)
    _min_on_top(stacks)


def solve(numbers: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``numbers`` on stack a."""
    stacks = Stacks(numbers, quiet=True)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return list(stacks.operations)