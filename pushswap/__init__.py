"""Two-stack integer sorting with a limited set of stack operations, plus small text, memory and list helpers."""

__version__ = "1.0.0"