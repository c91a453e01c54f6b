# esatto

esatto is a small SAT solver. It reads formulas in conjunctive normal form
(CNF) from DIMACS files and decides whether each formula is satisfiable. The
search uses the DPLL algorithm, which combines unit propagation with
backtracking. Branches try `True` before `False`. For a satisfiable formula,
esatto returns a satisfying assignment.

## Installation

```
pip install .
```

## Command line

```
esatto problem.cnf
```

The command prints the parsed formula first, for example
`(x1 ∨ ¬x2) ∧ (¬x1 ∨ x2)`. It then prints one of two results:

- `SAT`, followed by one `x<var>: true` or `x<var>: false` line for each assigned variable, sorted by variable.
- `UNSAT`.

Parse and I/O errors are printed on standard error, and the command exits
with status 1. If the number of arguments is wrong, it prints a usage message
and also exits with status 1.

Here is an example input file:

```
c a tiny example
p cnf 2 2
1 -2 0
-1 2 0
```

The package also includes a demonstration that solves a fixed 4x4 sudoku
encoded as a SAT problem and prints the filled grid:

```
esatto-sudoku
```

## Library

```python
from esatto.clause import Clause
from esatto.formula import Formula
from esatto.lit import Lit
from esatto.parser import parse_dimacs
from esatto.solver import solve

formula = Formula.from_clauses([
    Clause.from_lits([1, -2]),
    Clause.from_lits([-1, 2]),
])
formula.add_clause(Clause.from_lits([Lit(3, True)]))

print(formula)            # (x1 ∨ ¬x2) ∧ (¬x1 ∨ x2) ∧ (x3)
result = solve(formula)   # a dict {var: bool} when satisfiable, None otherwise

formula = parse_dimacs("problem.cnf")
```

### Literals

- `Clause.from_lits` accepts signed integers in the DIMACS style: `3` is `x3` and `-3` is `¬x3`.
- `Lit.from_int` builds a single literal from a signed integer in the same way.
- `Lit(var, sign)` builds a literal directly. `var` must lie between 0 and 2³²−1, otherwise `ValueError` is raised.
- A literal exposes its variable as `var` and its polarity as `sign`.

### Evaluation

`Lit.eval`, `Clause.eval` and `Formula.eval` evaluate under a partial
assignment, given as a mapping from variable to bool. Each returns `True`,
`False`, or `None` when the value is not yet determined.

### The sudoku encoding

The `esatto.sudoku` module exposes the following:

- `encode(i, j, n)`: the variable for "cell (i, j) holds n".
- `build_formula()`: the complete puzzle formula.
- `render(assignment)`: draws the grid as text.

### Parsing

`parse_dimacs` reads the input file as follows:

- Blank lines and lines starting with `c` are skipped.
- A `p cnf <vars> <clauses>` header must hold two non-negative numbers.
- Every other line must end with `0`. A `0` earlier on a line ends the clause there.

For malformed input it raises a `ParseError` subclass:

- `InvalidLineError` for a line that matches none of the forms above.
- `InvalidTokenError` for a token that is not a valid 32-bit number.
- An I/O or decoding failure, such as a missing file, raises a plain `ParseError` with the message `IO error: ...`.

## Limitations

- The variable and clause counts in the `p cnf` header are checked to be numbers but are not compared with the clauses that follow.
- The solver is a plain DPLL search. It has no clause learning, no decision heuristics and no proof output, so it suits small formulas.
- Results are printed in the format shown above, not in the standard SAT-competition output format.

## Tests

```
pip install .[test]
pytest
```