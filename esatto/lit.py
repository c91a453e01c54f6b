"""Boolean literals: a variable index paired with a polarity."""

from __future__ import annotations

from collections.abc import Mapping

_U32_MAX = 2**32 - 1


class Lit:
    """A literal over variable ``var``; ``sign`` is True for the positive form."""

    __slots__ = ("_code",)

    def __init__(self, var: int, sign: bool) -> None:
        if var < 0 or var > _U32_MAX:
            raise ValueError(f"variable index out of range: {var}")
        self._code = (var << 1) | int(bool(sign))

    @classmethod
    def from_int(cls, value: int) -> Lit:
        """Build a literal from a signed integer, as in DIMACS (``-3`` is ``¬x3``)."""
        return cls(abs(value), value > 0)

    @property
    def var(self) -> int:
        return self._code >> 1

    @property
    def sign(self) -> bool:
        return self._code & 1 == 1

    def eval(self, assignment: Mapping[int, bool]) -> bool | None:
        """Truth value under ``assignment``, or None if the variable is unassigned."""
        value = assignment.get(self.var)
        if value is None:
            return None
        return value == self.sign

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lit):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __repr__(self) -> str:
        return f"Lit(var={self.var}, sign={self.sign})"

    def __str__(self) -> str:
        return f"x{self.var}" if self.sign else f"¬x{self.var}"