"""Solve a small 4x4 sudoku by encoding it as a satisfiability problem.

The puzzle::

    +---+---+---+---+
    | _ | _ | 3 | _ |
    +---+---+---+---+
    | _ | _ | 1 | _ |
    +---+---+---+---+
    | _ | _ | _ | 1 |
    +---+---+---+---+
    | 3 | _ | 2 | _ |
    +---+---+---+---+

Every row and every column must hold every number, and no cell holds more
than one number. Rows, columns and values run from 0 to 3 so each fits in two
bits; the variable for "cell (i, j) holds n" is ``(i << 4) | (j << 2) | n``.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from itertools import permutations

from esatto.clause import Clause
from esatto.formula import Formula
from esatto.lit import Lit
from esatto.solver import solve

SIZE = 4
_BORDER = "+---+---+---+---+"
_GIVENS = ((0, 2, 2), (1, 2, 0), (2, 3, 0), (3, 0, 2), (3, 2, 1))


def encode(i: int, j: int, n: int) -> int:
    """Variable meaning that the cell in row ``i``, column ``j`` holds ``n``."""
    return (i << 4) | (j << 2) | n


def build_formula() -> Formula:
    """The CNF formula describing the puzzle and its rules."""
    formula = Formula()

    for i, j, n in _GIVENS:
        formula.add_clause(Clause([Lit(encode(i, j, n), True)]))

    cells = range(SIZE)
    for i in cells:
        for n in cells:
            formula.add_clause(Clause([Lit(encode(i, j, n), True) for j in cells]))

    for j in cells:
        for n in cells:
            formula.add_clause(Clause([Lit(encode(i, j, n), True) for i in cells]))

    for i in cells:
        for j in cells:
            for a, b in permutations(cells, 2):
                formula.add_clause(
                    Clause([Lit(encode(i, j, a), False), Lit(encode(i, j, b), False)])
                )

    return formula


def _cell_text(assignment: Mapping[int, bool], i: int, j: int) -> str:
    for n in range(SIZE):
        if assignment.get(encode(i, j, n)):
            return f"| {n + 1} "
    return "| "


def render(assignment: Mapping[int, bool]) -> str:
    """Draw the grid described by ``assignment``."""
    lines = []
    for i in range(SIZE):
        lines.append(_BORDER)
        lines.append("".join(_cell_text(assignment, i, j) for j in range(SIZE)) + "|")
    lines.append(_BORDER)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle and print the filled grid."""
    assignment = solve(build_formula())
    if assignment is None:
        print("The sudoku has no solution")
    else:
        print(render(assignment))
    return 0


if __name__ == "__main__":
    sys.exit(main())