[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "esatto"
version = "0.1.0"
description = "A small DPLL SAT solver with a DIMACS CNF reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "solver", "dpll", "cnf", "dimacs", "logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
esatto = "esatto.cli:main"
esatto-sudoku = "esatto.sudoku:main"

[tool.hatch.build.targets.wheel]
packages = ["esatto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
