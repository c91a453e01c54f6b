import pytest

from esatto.clause import Clause
from esatto.formula import Formula
from esatto.parser import (
    InvalidLineError,
    InvalidTokenError,
    ParseError,
    parse_dimacs,
)


def _write(tmp_path, text):
    path = tmp_path / "input.cnf"
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_simple(tmp_path):
    path = _write(tmp_path, "c sample\np cnf 2 2\n1 -2 0\n-1 2 0\n")
    expected = Formula.from_clauses(
        [Clause.from_lits([1, -2]), Clause.from_lits([-1, 2])]
    )
    assert parse_dimacs(path) == expected


def test_accepts_string_path(tmp_path):
    path = _write(tmp_path, "3 0\n")
    assert parse_dimacs(str(path)) == Formula.from_clauses([Clause.from_lits([3])])


def test_blank_lines_and_comments_skipped(tmp_path):
    path = _write(tmp_path, "\n   \nc anything here 1 2\nc\n")
    assert parse_dimacs(path).clauses == []


def test_lone_zero_is_empty_clause(tmp_path):
    path = _write(tmp_path, "0\n")
    assert parse_dimacs(path).clauses == [Clause()]


def test_tokens_after_inner_zero_ignored(tmp_path):
    path = _write(tmp_path, "1 0 bogus 0\n")
    assert parse_dimacs(path).clauses == [Clause.from_lits([1])]


def test_crlf_and_extra_whitespace(tmp_path):
    path = tmp_path / "input.cnf"
    path.write_bytes(b"p cnf 2 1\r\n  1\t2   0 \r\n")
    assert parse_dimacs(path).clauses == [Clause.from_lits([1, 2])]


def test_invalid_line(tmp_path):
    path = _write(tmp_path, "1 2\n")
    with pytest.raises(InvalidLineError) as info:
        parse_dimacs(path)
    assert str(info.value) == "Invalid line"


def test_incomplete_header_is_invalid_line(tmp_path):
    path = _write(tmp_path, "p cnf 3\n")
    with pytest.raises(InvalidLineError):
        parse_dimacs(path)


def test_invalid_literal_token(tmp_path):
    path = _write(tmp_path, "1 x 0\n")
    with pytest.raises(InvalidTokenError) as info:
        parse_dimacs(path)
    assert str(info.value) == "Invalid token"


@pytest.mark.parametrize("header", ["p cnf x 2", "p cnf 2 -1", "p cnf 99999999999 1"])
def test_invalid_header_token(tmp_path, header):
    path = _write(tmp_path, header + "\n")
    with pytest.raises(InvalidTokenError):
        parse_dimacs(path)


def test_literal_out_of_range(tmp_path):
    path = _write(tmp_path, "3000000000 0\n")
    with pytest.raises(InvalidTokenError):
        parse_dimacs(path)


def test_errors_are_parse_errors(tmp_path):
    path = _write(tmp_path, "garbage\n")
    with pytest.raises(ParseError):
        parse_dimacs(path)


def test_missing_file(tmp_path):
    with pytest.raises(ParseError) as info:
        parse_dimacs(tmp_path / "missing.cnf")
    assert str(info.value).startswith("IO error: ")


def test_invalid_utf8(tmp_path):
    path = tmp_path / "bad.cnf"
    path.write_bytes(b"\xff\xfe 1 0\n")
    with pytest.raises(ParseError) as info:
        parse_dimacs(path)
    assert str(info.value).startswith("IO error: ")