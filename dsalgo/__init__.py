"""Classic data structures, graph search, sorting routines and tic-tac-toe games."""

__version__ = "0.1.0"