"""Disjunctive clauses of literals."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from esatto.lit import Lit


def _as_lit(item: Lit | int) -> Lit:
    if isinstance(item, Lit):
        return item
    if isinstance(item, int) and not isinstance(item, bool):
        return Lit.from_int(item)
    raise TypeError(f"cannot make a literal from {item!r}")


@dataclass
class Clause:
    """A disjunction of literals."""

    lits: list[Lit] = field(default_factory=list)

    @classmethod
    def from_lits(cls, lits: Iterable[Lit | int]) -> Clause:
        """Build a clause from literals or signed DIMACS-style integers."""
        return cls([_as_lit(item) for item in lits])

    def add_literal(self, lit: Lit) -> None:
        self.lits.append(lit)

    def eval(self, assignment: Mapping[int, bool]) -> bool | None:
        """True if any literal holds, None if undecided, False otherwise."""
        values = [lit.eval(assignment) for lit in self.lits]
        if any(value is True for value in values):
            return True
        if any(value is None for value in values):
            return None
        return False

    def __str__(self) -> str:
        return "(" + " ∨ ".join(str(lit) for lit in self.lits) + ")"