"""The two stacks of the puzzle and the instruction set that acts on them."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator, Optional

__all__ = ["Stack", "Machine"]


class Stack:
    """A stack of integers; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def push(self, value: int) -> None:
        """Place ``value`` on top."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.popleft()

    def top(self) -> int:
        """Return the top value without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[0]

    def swap(self) -> None:
        """Exchange the first two values; no effect with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom; no effect with fewer than two."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top; no effect with fewer than two."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)

    def is_sorted(self) -> bool:
        """Return True if values never decrease from top to bottom."""
        items = list(self._items)
        return all(a <= b for a, b in zip(items, items[1:]))


def _print_instruction(name: str) -> None:
    print(name)


class Machine:
    """Stacks ``a`` and ``b`` with the named instructions; each reports itself to ``emit``."""

    def __init__(
        self,
        a: Optional[Stack] = None,
        b: Optional[Stack] = None,
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.emit = emit if emit is not None else _print_instruction

    def pa(self) -> None:
        """Move the top of b onto a; does nothing and emits nothing if b is empty."""
        if not self.b:
            return
        self.a.push(self.b.pop())
        self.emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; does nothing and emits nothing if a is empty."""
        if not self.a:
            return
        self.b.push(self.a.pop())
        self.emit("pb")

    def sa(self) -> None:
        self.a.swap()
        self.emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self.emit("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self.emit("ss")

    def ra(self) -> None:
        self.a.rotate()
        self.emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self.emit("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self.emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self.emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self.emit("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self.emit("rrr")