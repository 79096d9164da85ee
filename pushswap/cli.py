"""Command line: print the instructions that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import (
    InputError,
    build_stack,
    has_duplicates,
    parse_input,
    validate_input,
)
from pushswap.sorting import sort2, sort3, sort4, sort5, sort_big
from pushswap.stack import Machine, Stack

__all__ = ["choose_sort", "solve", "main"]


def choose_sort(machine: Machine) -> None:
    """Run the strategy that fits the size of stack a."""
    size = len(machine.a)
    if size <= 1:
        return
    if size == 2:
        sort2(machine)
    elif size == 3:
        sort3(machine)
    elif size == 4:
        sort4(machine)
    elif size == 5:
        sort5(machine)
    else:
        sort_big(machine)


def solve(args: Sequence[str]) -> list[str]:
    """Return the instructions for the given arguments; raise InputError on bad input."""
    tokens = parse_input(args)
    if tokens is None:
        return []
    if not validate_input(tokens):
        raise InputError("invalid input")
    stack = build_stack(tokens)
    if has_duplicates(stack):
        raise InputError("duplicate values")
    if stack.is_sorted():
        return []
    instructions: list[str] = []
    choose_sort(Machine(stack, Stack(), emit=instructions.append))
    return instructions


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one instruction per line; on bad input print Error to standard error."""
    args = sys.argv[1:] if argv is None else argv
    try:
        instructions = solve(args)
    except (InputError, RuntimeError):
        print("Error", file=sys.stderr)
        return 1
    for name in instructions:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())