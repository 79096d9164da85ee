"""Sorting strategies that drive a Machine with the puzzle's instructions."""

from __future__ import annotations

from itertools import islice
from typing import Iterable

from pushswap.stack import Machine

__all__ = [
    "find_min_pos",
    "find_max_pos",
    "sort2",
    "sort3",
    "sort4",
    "sort5",
    "sort_big",
]


def find_min_pos(stack: Iterable[int]) -> int:
    """Return the position from the top of the first smallest value, 0 if empty."""
    values = list(stack)
    if not values:
        return 0
    return values.index(min(values))


def find_max_pos(stack: Iterable[int]) -> int:
    """Return the position from the top of the first largest value, 0 if empty."""
    values = list(stack)
    if not values:
        return 0
    return values.index(max(values))


def sort2(machine: Machine) -> None:
    """Order the top two values of a."""
    if len(machine.a) < 2:
        return
    first, second = islice(machine.a, 2)
    if first > second:
        machine.sa()


def sort3(machine: Machine) -> None:
    """Order the top three values of a in at most two instructions."""
    if len(machine.a) < 3:
        return
    a, b, c = islice(machine.a, 3)
    if a < b < c:
        return
    if a > b and b < c and a < c:
        machine.sa()
    elif a > b and b < c and a > c:
        machine.ra()
    elif a < b and b > c and a < c:
        machine.sa()
        machine.ra()
    elif a < b and b > c and a > c:
        machine.rra()
    elif a > b and b > c:
        machine.sa()
        machine.rra()


def sort4(machine: Machine) -> None:
    """Sort four values: park the minimum on b, sort three, bring it back."""
    if len(machine.a) < 4:
        return
    position = find_min_pos(machine.a)
    if position == 1:
        machine.sa()
    elif position == 2:
        machine.ra()
        machine.ra()
    elif position == 3:
        machine.rra()
    machine.pb()
    sort3(machine)
    machine.pa()


def sort5(machine: Machine) -> None:
    """Sort five values: park the minimum on b, sort four, bring it back."""
    if len(machine.a) < 5:
        return
    position = find_min_pos(machine.a)
    if position == 1:
        machine.sa()
    elif position == 2:
        machine.ra()
        machine.ra()
    elif position == 3:
        machine.rra()
        machine.rra()
    elif position == 4:
        machine.rra()
    machine.pb()
    sort4(machine)
    machine.pa()


def sort_big(machine: Machine) -> None:
    """Push values not above half the count to b, sort the rest, return b largest first.

    Only values no greater than half the stack size are moved to b. If too few
    values qualify, rotating a can never finish; RuntimeError is raised instead.
    """
    a = machine.a
    total = len(a)
    if total <= 5:
        return
    threshold = total // 2
    pushed = 0
    while len(a) > 3 and pushed < total - 3:
        if a.top() <= threshold:
            machine.pb()
            pushed += 1
        elif any(value <= threshold for value in a):
            machine.ra()
        else:
            raise RuntimeError("no value left in a can be pushed; sorting cannot finish")
    sort3(machine)
    while machine.b:
        for _ in range(find_max_pos(machine.b)):
            machine.rb()
        machine.pa()