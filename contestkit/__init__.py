"""Plain-Python solvers for competitive-programming problems: modular arithmetic, number theory, graphs, counting, grids and arrays."""

__version__ = "0.1.0"