from esatto.cli import main
from esatto.parser import parse_dimacs


def _write(tmp_path, text):
    path = tmp_path / "input.cnf"
    path.write_text(text, encoding="utf-8")
    return path


def _assignment_lines(lines):
    result = {}
    for line in lines:
        name, value = line.split(": ")
        assert name.startswith("x")
        assert value in ("true", "false")
        result[int(name[1:])] = value == "true"
    return result


def test_sat_output(tmp_path, capsys):
    path = _write(tmp_path, "c sample\np cnf 3 3\n1 -2 0\n-1 2 0\n2 3 0\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    formula = parse_dimacs(path)
    assert lines[0] == str(formula)
    assert lines[1] == "SAT"
    assignment = _assignment_lines(lines[2:])
    assert formula.eval(assignment) is True
    assert list(assignment) == sorted(assignment)


def test_unsat_output(tmp_path, capsys):
    path = _write(tmp_path, "p cnf 1 2\n1 0\n-1 0\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(parse_dimacs(path)), "UNSAT"]


def test_usage_error(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Usage:")


def test_too_many_arguments(capsys):
    assert main(["a.cnf", "b.cnf"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_invalid_line_reported(tmp_path, capsys):
    path = _write(tmp_path, "1 2 3\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Invalid line"


def test_invalid_token_reported(tmp_path, capsys):
    path = _write(tmp_path, "1 x 0\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == "Invalid token"


def test_missing_file_reported(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cnf")]) == 1
    assert capsys.readouterr().err.startswith("IO error:")