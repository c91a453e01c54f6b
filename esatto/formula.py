"""Formulas in conjunctive normal form."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from esatto.clause import Clause


@dataclass
class Formula:
    """A conjunction of clauses."""

    clauses: list[Clause] = field(default_factory=list)

    @classmethod
    def from_clauses(cls, clauses: Iterable[Clause]) -> Formula:
        return cls(list(clauses))

    def add_clause(self, clause: Clause) -> None:
        self.clauses.append(clause)

    def eval(self, assignment: Mapping[int, bool]) -> bool | None:
        """False if any clause fails, None if undecided, True otherwise."""
        values = [clause.eval(assignment) for clause in self.clauses]
        if any(value is False for value in values):
            return False
        if any(value is None for value in values):
            return None
        return True

    def __str__(self) -> str:
        return " ∧ ".join(str(clause) for clause in self.clauses)