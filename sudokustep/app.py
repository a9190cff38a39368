"""Interactive board editor with a visual, step-by-step solver."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum, auto

import pygame

from .board import CELLS, SECTION, SIZE, Board, Tile, TileKind, solve_step
from .fixtures import test_board

TITLE = "Sudoku Solver"
TILE_SIZE = 30
LOGICAL_WIDTH = TILE_SIZE * SIZE
LOGICAL_HEIGHT = TILE_SIZE * SIZE
SCALE = 3
FONT_PATH = "assets/minecraft.otf"
FONT_SIZE = 20

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
YELLOW = (255, 255, 0)
INVALID_BACKGROUND = (255, 220, 220)
CURSOR_COLOR = (200, 200, 200)
CURSOR_HARD_COLOR = (200, 200, 0)

_KEY_REPEAT_DELAY_MS = 400
_KEY_REPEAT_INTERVAL_MS = 40


class ActionKind(Enum):
    """What a key press asks the editor to do."""

    WRITE = auto()
    REMOVE = auto()
    MOVE = auto()
    SOLVE = auto()
    TOGGLE_VISUAL = auto()
    PRINT_BOARD = auto()
    LOAD_TEST = auto()
    NOTHING = auto()


@dataclass(frozen=True)
class Action:
    """An editor action; ``number`` is used by WRITE and ``delta`` by MOVE."""

    kind: ActionKind
    number: int | None = None
    delta: tuple[int, int] = (0, 0)


_NOTHING = Action(ActionKind.NOTHING)

_MOVES = {
    pygame.K_RIGHT: Action(ActionKind.MOVE, delta=(1, 0)),
    pygame.K_LEFT: Action(ActionKind.MOVE, delta=(-1, 0)),
    pygame.K_UP: Action(ActionKind.MOVE, delta=(0, -1)),
    pygame.K_DOWN: Action(ActionKind.MOVE, delta=(0, 1)),
}

_DIGIT_KEYS = (
    pygame.K_1,
    pygame.K_2,
    pygame.K_3,
    pygame.K_4,
    pygame.K_5,
    pygame.K_6,
    pygame.K_7,
    pygame.K_8,
    pygame.K_9,
)

_PRESSES = {
    **{key: Action(ActionKind.WRITE, number=n) for n, key in enumerate(_DIGIT_KEYS, 1)},
    pygame.K_BACKSPACE: Action(ActionKind.REMOVE),
    **_MOVES,
    pygame.K_SPACE: Action(ActionKind.SOLVE),
    pygame.K_v: Action(ActionKind.TOGGLE_VISUAL),
    pygame.K_t: Action(ActionKind.LOAD_TEST),
    pygame.K_p: Action(ActionKind.PRINT_BOARD),
}


def action_for_key(key: int, repeat: bool) -> Action:
    """Map a pressed key to an action; held keys only keep moving the cursor."""
    table = _MOVES if repeat else _PRESSES
    return table.get(key, _NOTHING)


def _clamp(value: int) -> int:
    return max(0, min(SIZE - 1, value))


class EditorState:
    """Board, cursor and solver progress, independent of any window."""

    def __init__(self) -> None:
        self.board = Board.blank()
        self.cursor = (0, 0)
        self.running = True
        self.solving = False
        self.visual = True
        self.solving_index = 0

    def apply(self, action: Action) -> bool:
        """Carry out ``action``; returns whether it calls for a redraw."""
        kind = action.kind
        if kind is ActionKind.MOVE:
            dx, dy = action.delta
            x, y = self.cursor
            self.cursor = (_clamp(x + dx), _clamp(y + dy))
        elif kind is ActionKind.SOLVE:
            if self.board.is_valid():
                self.solving = not self.solving
        elif kind is ActionKind.WRITE:
            self.board[self.cursor] = Tile.hard(action.number)
        elif kind is ActionKind.REMOVE:
            self.board[self.cursor] = Tile.empty()
        elif kind is ActionKind.TOGGLE_VISUAL:
            self.visual = not self.visual
            print(f"visual solving: {self.visual}", file=sys.stderr)
        elif kind is ActionKind.PRINT_BOARD:
            print(repr(self.board), file=sys.stderr)
        elif kind is ActionKind.LOAD_TEST:
            self.board = test_board()
        else:
            return False
        return True

    def tick(self) -> None:
        """Run one solver step if solving is switched on."""
        if not self.solving:
            return
        next_index = solve_step(self.board, self.solving_index)
        if next_index is None or self.solving_index == CELLS - 1:
            self.solving = False
        else:
            self.solving_index = next_index

    def background_color(self) -> tuple[int, int, int]:
        """White while solving or when the board is valid, pink otherwise."""
        if self.solving or self.board.is_valid():
            return WHITE
        return INVALID_BACKGROUND


class App:
    """A pygame window that edits and solves the state's board."""

    def __init__(self, state: EditorState) -> None:
        self.state = state
        pygame.init()
        pygame.display.set_caption(TITLE)
        self._window = pygame.display.set_mode(
            (LOGICAL_WIDTH * SCALE, LOGICAL_HEIGHT * SCALE)
        )
        self._canvas = pygame.Surface((LOGICAL_WIDTH, LOGICAL_HEIGHT))
        self._font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        pygame.key.set_repeat(_KEY_REPEAT_DELAY_MS, _KEY_REPEAT_INTERVAL_MS)
        self._held: set[int] = set()

    def poll_action(self) -> Action:
        """Take at most one pending event and turn it into an action."""
        event = pygame.event.poll()
        if event.type == pygame.QUIT:
            self.state.running = False
            return _NOTHING
        if event.type == pygame.KEYDOWN:
            repeat = event.key in self._held
            self._held.add(event.key)
            return action_for_key(event.key, repeat)
        if event.type == pygame.KEYUP:
            self._held.discard(event.key)
        return _NOTHING

    def _draw_square(self, pos: tuple[int, int], color: tuple[int, int, int]) -> None:
        x, y = pos
        rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        self._canvas.fill(color, rect)

    def _draw_number(self, number: int, pos: tuple[int, int]) -> None:
        text = self._font.render(str(number), True, BLACK)
        width, height = text.get_size()
        x, y = pos
        left = x * TILE_SIZE + TILE_SIZE // 2 - width // 2 + 1
        top = y * TILE_SIZE + TILE_SIZE // 2 - height // 2 + 2
        self._canvas.blit(text, (left, top))

    def _draw_numbers(self) -> None:
        for y, row in enumerate(self.state.board.rows()):
            for x, tile in enumerate(row):
                if tile.kind is TileKind.HARD:
                    color = CURSOR_HARD_COLOR if (x, y) == self.state.cursor else YELLOW
                    self._draw_square((x, y), color)
                    self._draw_number(tile.number, (x, y))
                elif tile.kind is TileKind.SOFT:
                    self._draw_number(tile.number, (x, y))

    def _draw_grid(self) -> None:
        for i in range(SIZE):
            offset = i * TILE_SIZE
            lines = [offset - 1, offset, offset + 1] if i % SECTION == 0 else [offset]
            for at in lines:
                pygame.draw.line(self._canvas, BLACK, (at, 0), (at, LOGICAL_HEIGHT))
                pygame.draw.line(self._canvas, BLACK, (0, at), (LOGICAL_WIDTH, at))

    def render(self) -> None:
        """Draw the board and present it scaled up in the window."""
        self._canvas.fill(self.state.background_color())
        self._draw_square(self.state.cursor, CURSOR_COLOR)
        self._draw_numbers()
        self._draw_grid()
        pygame.transform.scale(self._canvas, self._window.get_size(), self._window)
        pygame.display.flip()

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        try:
            while self.state.running:
                self.state.tick()
                redraw = self.state.apply(self.poll_action())
                if self.state.visual or not self.state.solving or redraw:
                    self.render()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sudokustep",
        description=(
            "Edit a Sudoku board with the arrow keys, 1-9 and Backspace; "
            "Space solves, V toggles visual solving, T loads a sample, "
            "P prints the board."
        ),
    )
    parser.parse_args(argv)
    App(EditorState()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())