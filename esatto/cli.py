"""Command-line entry point: solve a DIMACS CNF file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from esatto.parser import ParseError, parse_dimacs
from esatto.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the file named on the command line, solve it and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: esatto <filename>", file=sys.stderr)
        return 1

    try:
        formula = parse_dimacs(args[0])
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(formula)
    assignment = solve(formula)
    if assignment is None:
        print("UNSAT")
        return 0

    print("SAT")
    for var, value in sorted(assignment.items()):
        print(f"x{var}: {str(value).lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())