"""Reading formulas in the DIMACS CNF format."""

from __future__ import annotations

import os
import re

from esatto.clause import Clause
from esatto.formula import Formula
from esatto.lit import Lit

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_SIGNED = re.compile(r"[+-]?[0-9]+", re.ASCII)
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ParseError(Exception):
    """Raised when a DIMACS file cannot be read or parsed."""


class InvalidLineError(ParseError):
    def __init__(self) -> None:
        super().__init__("Invalid line")


class InvalidTokenError(ParseError):
    def __init__(self) -> None:
        super().__init__("Invalid token")


def _parse_u32(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise InvalidTokenError()
    value = int(token)
    if value > _U32_MAX:
        raise InvalidTokenError()
    return value


def _parse_i32(token: str) -> int:
    if not _SIGNED.fullmatch(token):
        raise InvalidTokenError()
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        raise InvalidTokenError()
    return value


def _parse_clause(tokens: list[str]) -> Clause:
    clause = Clause()
    for token in tokens:
        value = _parse_i32(token)
        if value == 0:
            break
        clause.add_literal(Lit.from_int(value))
    return clause


def _parse_line(tokens: list[str], formula: Formula) -> None:
    match tokens:
        case [] | ["c", *_]:
            return
        case ["p", "cnf", num_vars, num_clauses]:
            _parse_u32(num_vars)
            _parse_u32(num_clauses)
        case [*lits, "0"]:
            formula.add_clause(_parse_clause(lits))
        case _:
            raise InvalidLineError()


def parse_dimacs(filename: str | os.PathLike[str]) -> Formula:
    """Parse the DIMACS CNF file at ``filename`` into a formula."""
    formula = Formula()
    try:
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                _parse_line(line.split(), formula)
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"IO error: {exc}") from exc
    return formula