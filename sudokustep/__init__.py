"""Sudoku editor with a visual, step-by-step backtracking solver."""

__version__ = "0.1.0"
__all__ = ["__version__"]