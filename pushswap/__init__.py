"""Sort integers on two stacks with a fixed set of operations, plus small string, memory and output helpers."""

__version__ = "0.1.0"