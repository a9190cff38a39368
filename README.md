# sudokustep

A small sudoku editor with a backtracking solver that works one cell at a time,
so you can watch it fill in, and back out of, the grid.

## Installing

```
pip install .
```

## Running

```
sudokustep
```

This opens a window with an empty 9×9 grid. `sudokustep --help` prints a
summary of the keys.

The window draws its numbers with the font file `assets/minecraft.otf`, looked
up relative to the directory you start the command from. The package does not
ship that file; put a font of your choice at that path before running the
command, or the window will fail to open.

### Keys

| Key            | Effect                                                |
|----------------|-------------------------------------------------------|
| Arrow keys     | Move the cursor (holding a key repeats the move)      |
| `1`–`9`        | Write a fixed clue in the cell under the cursor       |
| Backspace      | Clear the cell under the cursor                       |
| Space          | Start or pause solving (only while the grid is valid) |
| `V`            | Toggle drawing every solver step                      |
| `T`            | Load a built-in sample puzzle                         |
| `P`            | Print the current board to standard error             |

Clues you type are shown on a yellow background. Numbers placed by the solver
have no background. While the grid holds a duplicate in a row, column or 3×3
box, and the solver is not running, the background turns pink.

## Using the solver from Python

```python
from sudokustep.board import Board, Tile, solve
from sudokustep.fixtures import test_board

board = test_board()
solve(board)
assert board.is_valid()
```

- `Board.blank()` gives an empty grid; tiles are read and written with
  `board[x, y]`, and are `Tile.hard(n)` (a clue), `Tile.soft(n)` (a guess) or
  `Tile.empty()`.
- `board.is_valid()` tells whether any row, column or 3×3 box repeats a number;
  `board.taken_values((x, y))` gives the numbers already used around a cell.
- `solve(board)` fills every open cell in place with soft numbers. It raises
  `ValueError` if the board already repeats a number.
- `solve_step(board, index)` advances the solver by a single cell (cells are
  numbered 0–80 row by row) and returns the index to continue from. It returns
  `None` when the last cell is a clue and there is nothing left to do, and
  `81` once a guess has been placed in the last cell. It raises
  `BacktrackError` when it would have to step back before the first cell,
  which is what happens when the puzzle has no solution.

## Tests

```
pip install .[test]
pytest
```