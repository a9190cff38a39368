import pytest

from sudokustep import fixtures
from sudokustep.board import (
    BacktrackError,
    Board,
    Tile,
    TileKind,
    position_of,
    previous_open_index,
    solve,
    solve_step,
)


def _solved_blank():
    board = Board.blank()
    solve(board)
    return board


def test_tile_constructors():
    assert Tile.hard(4) == Tile(TileKind.HARD, 4)
    assert Tile.soft(7).kind is TileKind.SOFT
    assert Tile.empty().number is None


@pytest.mark.parametrize("number", [0, 10, -1])
def test_tile_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        Tile.hard(number)
    with pytest.raises(ValueError):
        Tile.soft(number)


def test_board_shape_is_checked():
    with pytest.raises(ValueError):
        Board([[Tile.empty()] * 9] * 8)
    with pytest.raises(ValueError):
        Board([[Tile.empty()] * 8] * 9)


def test_board_get_and_set():
    board = Board.blank()
    board[(3, 5)] = Tile.hard(6)
    assert board[(3, 5)] == Tile.hard(6)
    assert board.rows()[5][3] == Tile.hard(6)
    assert board[(5, 3)] == Tile.empty()


def test_board_index_out_of_range():
    board = Board.blank()
    with pytest.raises(IndexError):
        board[(9, 0)]
    with pytest.raises(IndexError):
        board[(0, -1)] = Tile.hard(1)


def test_copy_is_independent():
    board = fixtures.test_board()
    clone = board.copy()
    assert clone == board
    clone[(2, 0)] = Tile.soft(1)
    assert board[(2, 0)] == Tile.empty()
    assert clone != board


def test_position_of_round_trip():
    for index in range(81):
        x, y = position_of(index)
        assert 0 <= x < 9 and 0 <= y < 9
        assert y * 9 + x == index
    assert position_of(80) == (8, 8)


@pytest.mark.parametrize("index", [-1, 81])
def test_position_of_out_of_range(index):
    with pytest.raises(IndexError):
        position_of(index)


def test_taken_values_blank_board():
    assert Board.blank().taken_values((4, 4)) == set()


def test_taken_values_covers_row_column_section():
    board = Board.blank()
    board[(0, 0)] = Tile.hard(5)
    assert 5 in board.taken_values((8, 0))
    assert 5 in board.taken_values((0, 8))
    assert 5 in board.taken_values((2, 2))
    assert 5 not in board.taken_values((4, 4))


def test_taken_values_counts_soft_tiles():
    board = Board.blank()
    board[(1, 1)] = Tile.soft(3)
    assert board.taken_values((1, 7)) == {3}


def test_fixture_is_valid():
    assert fixtures.test_board().is_valid()


def test_duplicate_in_row_is_invalid():
    board = fixtures.test_board()
    board[(8, 0)] = Tile.hard(4)
    assert not board.row_valid(0)
    assert not board.is_valid()


def test_duplicate_in_column_is_invalid():
    board = Board.blank()
    board[(2, 0)] = Tile.soft(9)
    board[(2, 6)] = Tile.hard(9)
    assert not board.column_valid(2)
    assert board.row_valid(0)
    assert not board.is_valid()


def test_duplicate_in_section_is_invalid():
    board = Board.blank()
    board[(3, 3)] = Tile.hard(2)
    board[(5, 5)] = Tile.hard(2)
    assert not board.section_valid(1, 1)
    assert board.row_valid(3) and board.column_valid(3)
    assert not board.is_valid()


def test_previous_open_index_skips_hard_tiles():
    board = Board.blank()
    board[position_of(2)] = Tile.hard(1)
    board[position_of(3)] = Tile.hard(2)
    assert previous_open_index(board, 4) == 1


def test_previous_open_index_off_the_board():
    with pytest.raises(BacktrackError):
        previous_open_index(fixtures.test_board(), 1)


def test_solve_step_skips_hard_tile():
    board = fixtures.test_board()
    assert solve_step(board, 0) == 1
    assert board == fixtures.test_board()


def test_solve_step_finishes_on_hard_last_tile():
    assert solve_step(fixtures.test_board(), 80) is None


def test_solve_step_places_smallest_candidate():
    board = Board.blank()
    assert solve_step(board, 0) == 1
    assert board[(0, 0)] == Tile.soft(1)


def test_solve_step_backtracks_and_retries():
    board = Board.blank()
    for x, n in zip(range(2, 9), range(3, 10)):
        board[(x, 0)] = Tile.hard(n)
    board[(1, 8)] = Tile.hard(2)
    board[(0, 0)] = Tile.soft(1)

    assert solve_step(board, 1) == 0
    assert board[(1, 0)] == Tile.empty()

    assert solve_step(board, 0) == 1
    assert board[(0, 0)] == Tile.soft(2)


def test_solve_step_raises_at_first_cell():
    board = Board.blank()
    for x in range(1, 9):
        board[(x, 0)] = Tile.hard(x)
    board[(0, 5)] = Tile.hard(9)
    with pytest.raises(BacktrackError):
        solve_step(board, 0)


def test_solve_blank_board_is_complete_and_valid():
    board = _solved_blank()
    assert board.is_valid()
    for row in board.rows():
        assert {tile.number for tile in row} == set(range(1, 10))
        assert all(tile.kind is TileKind.SOFT for tile in row)


def test_solve_keeps_hard_tiles_and_recovers_solution():
    solution = _solved_blank()
    puzzle = Board.blank()
    for index in range(81):
        pos = position_of(index)
        if index % 4:
            puzzle[pos] = Tile.hard(solution[pos].number)
    solve(puzzle)
    for index in range(81):
        pos = position_of(index)
        assert puzzle[pos].number == solution[pos].number
        expected = TileKind.SOFT if index % 4 == 0 else TileKind.HARD
        assert puzzle[pos].kind is expected


def test_solve_rejects_invalid_board():
    board = Board.blank()
    board[(0, 0)] = Tile.hard(1)
    board[(4, 0)] = Tile.hard(1)
    with pytest.raises(ValueError):
        solve(board)


def test_solve_unsolvable_board_raises():
    board = Board.blank()
    for x in range(1, 9):
        board[(x, 0)] = Tile.hard(x)
    board[(0, 5)] = Tile.hard(9)
    assert board.is_valid()
    with pytest.raises(BacktrackError):
        solve(board)