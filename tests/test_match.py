import pytest

from pentago.core import Marker, PentagoBoard, SearchError
from pentago.evaluation import compare_algorithms, play_game
from pentago.search import ComputerPlayer, SearchConfig


def endgame_board() -> PentagoBoard:
    return PentagoBoard.from_rows([
        ". O X O X O",
        "X O X O X O",
        "O X O . O X",
        "O X O X O X",
        "X O X O X O",
        "X O X O . .",
    ])


def test_play_game_runs_to_completion() -> None:
    board = endgame_board()
    player_max = ComputerPlayer(SearchConfig(depth=1, algorithm="alphabeta"))
    player_min = ComputerPlayer(SearchConfig(depth=1, algorithm="minimax"))
    record = play_game(player_max, player_min, board)

    assert record.winner is not None
    assert 1 <= record.plies <= 4
    assert len(record.moves) == record.plies
    assert record.nodes[Marker.MAX] > 0
    assert record.board.winner() == record.winner
    # the starting board is left untouched
    assert board.snapshot() == endgame_board().snapshot()


def test_play_game_respects_ply_limit() -> None:
    player = ComputerPlayer(SearchConfig(depth=1))
    record = play_game(player, player, endgame_board(), max_plies=1)
    assert record.plies == 1
    assert record.nodes[Marker.MIN] == 0


def test_play_game_needs_positive_depth() -> None:
    player = ComputerPlayer(SearchConfig(depth=0))
    with pytest.raises(SearchError):
        play_game(player, player, endgame_board())


def test_compare_algorithms_agrees_on_score() -> None:
    result = compare_algorithms(endgame_board(), 2, True)
    assert result.scores_match
    assert result.nodes_saved >= 0
    assert result.minimax_nodes > 0
