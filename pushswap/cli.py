"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parse import InputError, parse_numbers, split_words
from pushswap.sort import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver on ``argv`` (the process arguments by default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        tokens = split_words(args[0], " ")
        if not tokens:
            return 1
    else:
        tokens = args
    try:
        numbers = parse_numbers(tokens)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op.value}\n" for op in solve(numbers)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())