"""A small DPLL SAT solver with a DIMACS CNF reader and a sudoku demonstration."""

__version__ = "0.1.0"