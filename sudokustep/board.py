"""The Sudoku board model and a step-wise backtracking solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

SIZE = 9
SECTION = 3
CELLS = SIZE * SIZE
LAST_INDEX = CELLS - 1
DIGITS = frozenset(range(1, SIZE + 1))


class TileKind(Enum):
    """What a tile on the board holds."""

    HARD = "hard"
    SOFT = "soft"
    EMPTY = "empty"


@dataclass(frozen=True)
class Tile:
    """A single cell: a given (hard) number, a guessed (soft) number, or nothing."""

    kind: TileKind
    number: int | None = None

    def __post_init__(self) -> None:
        if self.kind is TileKind.EMPTY:
            if self.number is not None:
                raise ValueError("an empty tile holds no number")
        elif self.number not in DIGITS:
            raise ValueError(f"tile number must be 1-9, got {self.number!r}")

    @classmethod
    def hard(cls, number: int) -> Tile:
        return cls(TileKind.HARD, number)

    @classmethod
    def soft(cls, number: int) -> Tile:
        return cls(TileKind.SOFT, number)

    @classmethod
    def empty(cls) -> Tile:
        return cls(TileKind.EMPTY)


class BacktrackError(RuntimeError):
    """Raised when the solver would have to backtrack past the first cell."""


def _check_coordinate(value: int, limit: int, name: str) -> None:
    if not 0 <= value < limit:
        raise IndexError(f"{name} {value} is outside 0..{limit - 1}")


def _distinct(tiles: Iterable[Tile]) -> bool:
    numbers = [tile.number for tile in tiles if tile.number is not None]
    return len(numbers) == len(set(numbers))


class Board:
    """A 9x9 grid of tiles addressed by (x, y) positions."""

    def __init__(self, rows: Iterable[Iterable[Tile]]) -> None:
        grid = [list(row) for row in rows]
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("a board must have 9 rows of 9 tiles")
        if not all(isinstance(tile, Tile) for row in grid for tile in row):
            raise TypeError("every cell of a board must be a Tile")
        self._grid = grid

    @classmethod
    def blank(cls) -> Board:
        return cls([[Tile.empty()] * SIZE for _ in range(SIZE)])

    def __getitem__(self, pos: tuple[int, int]) -> Tile:
        x, y = pos
        _check_coordinate(x, SIZE, "column")
        _check_coordinate(y, SIZE, "row")
        return self._grid[y][x]

    def __setitem__(self, pos: tuple[int, int], tile: Tile) -> None:
        if not isinstance(tile, Tile):
            raise TypeError("only a Tile can be placed on the board")
        x, y = pos
        _check_coordinate(x, SIZE, "column")
        _check_coordinate(y, SIZE, "row")
        self._grid[y][x] = tile

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Board({self._grid!r})"

    def rows(self) -> tuple[tuple[Tile, ...], ...]:
        """The tiles row by row, top to bottom."""
        return tuple(tuple(row) for row in self._grid)

    def copy(self) -> Board:
        return Board(self._grid)

    def _row(self, y: int) -> Iterator[Tile]:
        return iter(self._grid[y])

    def _column(self, x: int) -> Iterator[Tile]:
        return (row[x] for row in self._grid)

    def _section(self, sx: int, sy: int) -> Iterator[Tile]:
        left, top = sx * SECTION, sy * SECTION
        return (
            tile
            for row in self._grid[top : top + SECTION]
            for tile in row[left : left + SECTION]
        )

    def taken_values(self, pos: tuple[int, int]) -> set[int]:
        """Numbers already present in the column, row and section of ``pos``."""
        x, y = pos
        _check_coordinate(x, SIZE, "column")
        _check_coordinate(y, SIZE, "row")
        tiles = [
            *self._column(x),
            *self._row(y),
            *self._section(x // SECTION, y // SECTION),
        ]
        return {tile.number for tile in tiles if tile.number is not None}

    def row_valid(self, y: int) -> bool:
        _check_coordinate(y, SIZE, "row")
        return _distinct(self._row(y))

    def column_valid(self, x: int) -> bool:
        _check_coordinate(x, SIZE, "column")
        return _distinct(self._column(x))

    def section_valid(self, sx: int, sy: int) -> bool:
        _check_coordinate(sx, SECTION, "section column")
        _check_coordinate(sy, SECTION, "section row")
        return _distinct(self._section(sx, sy))

    def is_valid(self) -> bool:
        """True when no section, row or column repeats a number."""
        return (
            all(
                self.section_valid(sx, sy)
                for sy in range(SECTION)
                for sx in range(SECTION)
            )
            and all(self.row_valid(y) for y in range(SIZE))
            and all(self.column_valid(x) for x in range(SIZE))
        )


def position_of(index: int) -> tuple[int, int]:
    """The (x, y) position of a cell numbered row by row from 0 to 80."""
    _check_coordinate(index, CELLS, "cell index")
    return index % SIZE, index // SIZE


def previous_open_index(board: Board, index: int) -> int:
    """The nearest index before ``index`` whose tile is not a given number."""
    for candidate in range(index - 1, -1, -1):
        if board[position_of(candidate)].kind is not TileKind.HARD:
            return candidate
    raise BacktrackError("trying to backtrack off the board")


def solve_step(board: Board, index: int) -> int | None:
    """Advance the solver by one cell.

    Returns the index to continue at, or None once the last cell is a given
    number and nothing is left to do.
    """
    pos = position_of(index)
    tile = board[pos]
    if tile.kind is TileKind.HARD:
        return None if index == LAST_INDEX else index + 1

    previous = tile.number or 0
    candidates = sorted(n for n in DIGITS - board.taken_values(pos) if n > previous)
    if candidates:
        board[pos] = Tile.soft(candidates[0])
        return index + 1

    if index == 0:
        raise BacktrackError("trying to backtrack off the board")
    board[pos] = Tile.empty()
    return previous_open_index(board, index)


def solve(board: Board) -> None:
    """Fill every open cell of ``board`` in place with soft numbers."""
    if not board.is_valid():
        raise ValueError("the board repeats a number and cannot be solved")
    index: int | None = 0
    while index is not None and index < CELLS:
        index = solve_step(board, index)