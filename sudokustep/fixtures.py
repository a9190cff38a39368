"""A sample puzzle for trying out the solver."""

from __future__ import annotations

from .board import Board, Tile

_SAMPLE = (
    (4, 3, 0, 0, 0, 0, 0, 7, 0),
    (0, 0, 0, 0, 9, 0, 0, 0, 0),
    (0, 0, 0, 0, 1, 6, 0, 2, 0),
    (5, 7, 0, 0, 0, 0, 0, 0, 4),
    (8, 0, 0, 6, 0, 0, 9, 5, 0),
    (0, 0, 0, 8, 0, 0, 0, 0, 0),
    (1, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 8, 2, 0, 0, 0),
    (0, 0, 3, 9, 0, 0, 4, 6, 5),
)


def test_board() -> Board:
    """A fresh copy of the sample puzzle, with its clues as hard tiles."""
    return Board(
        [Tile.hard(n) if n else Tile.empty() for n in row] for row in _SAMPLE
    )