"""A DPLL satisfiability solver for formulas in conjunctive normal form."""

from __future__ import annotations

from collections.abc import Mapping

from esatto.formula import Formula
from esatto.lit import Lit


def _unit_lit(formula: Formula, assignment: Mapping[int, bool]) -> Lit | None:
    """The sole unassigned literal of the first undecided unit clause, if any."""
    for clause in formula.clauses:
        if clause.eval(assignment) is True:
            continue
        unassigned = [lit for lit in clause.lits if lit.var not in assignment]
        if len(unassigned) == 1:
            return unassigned[0]
    return None


def _propagate(formula: Formula, assignment: dict[int, bool]) -> None:
    while (lit := _unit_lit(formula, assignment)) is not None:
        assignment[lit.var] = lit.sign


def _unassigned_var(formula: Formula, assignment: Mapping[int, bool]) -> int | None:
    return next(
        (
            lit.var
            for clause in formula.clauses
            for lit in clause.lits
            if lit.var not in assignment
        ),
        None,
    )


def solve(formula: Formula) -> dict[int, bool] | None:
    """Find a satisfying assignment for ``formula``.

    Returns a mapping from variable to value, or None if the formula is
    unsatisfiable. Branches try True before False.
    """
    pending: list[dict[int, bool]] = [{}]
    while pending:
        assignment = pending.pop()
        _propagate(formula, assignment)
        result = formula.eval(assignment)
        if result is True:
            return assignment
        if result is False:
            continue
        var = _unassigned_var(formula, assignment)
        if var is None:
            continue
        pending.append({**assignment, var: False})
        pending.append({**assignment, var: True})
    return None