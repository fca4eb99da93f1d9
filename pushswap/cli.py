"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_args
from pushswap.sorting import solve


def run(args: Sequence[str]) -> list[str]:
    """Parse the arguments and return the operations that sort them.

    Raises ParseError when the arguments are not a valid list of integers.
    """
    if not args:
        return []
    return solve(parse_args(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = run(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for operation in operations:
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())