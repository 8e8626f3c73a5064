import numpy as np
import pytest

from pentago.core import (
    BOARD_SIZE,
    TEMPO_BONUS,
    WIN_SCORE,
    IllegalMoveError,
    Marker,
    Move,
    PentagoBoard,
    Rotation,
)


def test_rotation_clockwise_moves_corner() -> None:
    board = PentagoBoard()
    board.apply_marker(0, 0, Marker.MAX)
    board.rotate_quadrant(0, Rotation.CW)
    assert board.grid[0, 2] == Marker.MAX
    assert board.grid[0, 0] == Marker.EMPTY

    board = PentagoBoard()
    board.apply_marker(3, 3, Marker.MIN)
    board.rotate_quadrant(3, Rotation.CCW)
    assert board.grid[5, 3] == Marker.MIN


def test_opposite_rotation_restores_quadrant() -> None:
    board = PentagoBoard.from_rows([
        "X O . X . O",
        ". X O . . .",
        "O . . X X .",
        ". . O . O X",
        "X . . . . .",
        ". O X . . O",
    ])
    before = board.snapshot()
    for block in range(4):
        for direction in Rotation:
            board.rotate_quadrant(block, direction)
            assert board.snapshot() != before
            board.rotate_quadrant(block, direction.opposite)
            assert board.snapshot() == before


def test_rotation_leaves_other_quadrants_alone() -> None:
    board = PentagoBoard.from_rows([
        "X O X . . .",
        ". . . . . .",
        ". . . . . .",
        ". . . O X O",
        ". . . . . .",
        ". . . X . .",
    ])
    board.rotate_quadrant(0, Rotation.CW)
    assert board.grid[3:, 3:].tolist() == [[2, 1, 2], [0, 0, 0], [1, 0, 0]]


def test_children_enumerates_cells_quadrants_and_directions() -> None:
    board = PentagoBoard()
    moves = board.children(True)
    assert len(moves) == BOARD_SIZE * BOARD_SIZE * 8
    assert moves[0] == Move(0, 0, 0, Rotation.CW)
    assert moves[1] == Move(0, 0, 0, Rotation.CCW)
    assert moves[2] == Move(0, 0, 1, Rotation.CW)
    assert moves[8] == Move(0, 1, 0, Rotation.CW)


def test_children_empty_once_game_is_won() -> None:
    board = PentagoBoard.from_rows([
        "X X X X X .",
        "O O O O . .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
    ])
    assert board.winner() == Marker.MAX
    assert board.children(False) == []


def test_winner_detection() -> None:
    assert PentagoBoard().winner() is None
    column = PentagoBoard.from_rows([
        ". O . . . .",
        ". O . . . .",
        ". O . . . .",
        ". O . . . .",
        ". O . . . .",
        ". . . . . .",
    ])
    assert column.winner() == Marker.MIN
    diagonal = PentagoBoard.from_rows([
        ". . . . . .",
        ". . . . X .",
        ". . . X . .",
        ". . X . . .",
        ". X . . . .",
        "X . . . . .",
    ])
    assert diagonal.winner() == Marker.MAX
    both = PentagoBoard.from_rows([
        "X X X X X .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
        "O O O O O .",
    ])
    assert both.winner() == Marker.EMPTY
    assert both.heuristic_value(True) == 0


def test_heuristic_counts_open_lines_and_tempo() -> None:
    board = PentagoBoard()
    assert board.heuristic_value(True) == TEMPO_BONUS
    assert board.heuristic_value(False) == -TEMPO_BONUS
    board.apply_marker(0, 0, Marker.MAX)
    # the corner lies on one row, one column and one diagonal line
    assert board.heuristic_value(True) == 3 + TEMPO_BONUS
    board.apply_marker(0, 1, Marker.MIN)
    assert board.heuristic_value(True) < 3 + TEMPO_BONUS


def test_heuristic_scores_wins() -> None:
    board = PentagoBoard.from_rows([
        "X X X X X .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
        ". . . . . .",
    ])
    assert board.heuristic_value(False) == WIN_SCORE


def test_heuristic_cache_is_invalidated() -> None:
    board = PentagoBoard()
    first = board.heuristic_value(True)
    board.grid[2, 2] = Marker.MAX
    assert board.heuristic_value(True) == first
    board.clear_heuristic_cache()
    assert board.heuristic_value(True) != first
    board.apply_marker(2, 2, Marker.EMPTY)
    assert board.heuristic_value(True) == first


def test_place_validates_moves() -> None:
    board = PentagoBoard()
    board.place(Move(1, 1, 3, Rotation.CW), Marker.MAX)
    assert board.grid[1, 1] == Marker.MAX
    with pytest.raises(IllegalMoveError):
        board.place(Move(1, 1, 0, Rotation.CW), Marker.MIN)
    with pytest.raises(IllegalMoveError):
        board.place(Move(6, 0, 0, Rotation.CW), Marker.MIN)
    with pytest.raises(IllegalMoveError):
        board.place(Move(0, 0, 4, Rotation.CW), Marker.MIN)
    with pytest.raises(IllegalMoveError):
        board.place(Move(0, 0, 0, Rotation.CW), Marker.EMPTY)


def test_from_rows_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        PentagoBoard.from_rows(["......"] * 5)
    with pytest.raises(ValueError):
        PentagoBoard.from_rows(["....."] + ["......"] * 5)
    with pytest.raises(ValueError):
        PentagoBoard.from_rows(["....Z."] + ["......"] * 5)
    with pytest.raises(ValueError):
        PentagoBoard(np.zeros((5, 5), dtype=np.int8))


def test_copy_is_independent() -> None:
    board = PentagoBoard()
    clone = board.copy()
    clone.apply_marker(0, 0, Marker.MAX)
    assert board.grid[0, 0] == Marker.EMPTY
