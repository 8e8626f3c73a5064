from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pentago.core import BOARD_SIZE, Marker, Move, PentagoBoard, SearchError
from pentago.search import ComputerPlayer, SearchEngine, SearchResult


@dataclass
class GameRecord:
    winner: Optional[Marker]  # None when the ply limit stopped the game
    plies: int
    moves: List[Move] = field(default_factory=list)
    nodes: Dict[Marker, int] = field(default_factory=dict)
    board: Optional[PentagoBoard] = None


@dataclass
class ComparisonResult:
    depth: int
    minimax: SearchResult
    alphabeta: SearchResult
    minimax_nodes: int
    alphabeta_nodes: int

    @property
    def scores_match(self) -> bool:
        return self.minimax.score == self.alphabeta.score

    @property
    def nodes_saved(self) -> int:
        return self.minimax_nodes - self.alphabeta_nodes


def play_game(
    player_max: ComputerPlayer,
    player_min: ComputerPlayer,
    board: Optional[PentagoBoard] = None,
    *,
    maximizing: bool = True,
    max_plies: int = BOARD_SIZE * BOARD_SIZE,
) -> GameRecord:
    """Play two computer players against each other on a copy of ``board``."""
    board = board.copy() if board is not None else PentagoBoard()
    players = {True: player_max, False: player_min}
    nodes = {Marker.MAX: 0, Marker.MIN: 0}
    moves: List[Move] = []

    while board.winner() is None and len(moves) < max_plies:
        player = players[maximizing]
        before = player.nodes_expanded
        result = player.choose_move(board, maximizing)
        if result.move is None:
            raise SearchError("Search returned no move; depth must be at least 1 to play.")
        marker = Marker.for_side(maximizing)
        nodes[marker] += player.nodes_expanded - before
        board.place(result.move, marker)
        moves.append(result.move)
        maximizing = not maximizing

    return GameRecord(winner=board.winner(), plies=len(moves), moves=moves, nodes=nodes, board=board)


def compare_algorithms(board: PentagoBoard, depth: int, maximizing: bool) -> ComparisonResult:
    """Run minimax and alpha-beta on the same position with fresh node counters."""
    minimax_engine = SearchEngine()
    alphabeta_engine = SearchEngine()
    minimax = minimax_engine.minimax(depth, board, maximizing)
    alphabeta = alphabeta_engine.alpha_beta_prune(depth, board, maximizing)
    return ComparisonResult(
        depth=depth,
        minimax=minimax,
        alphabeta=alphabeta,
        minimax_nodes=minimax_engine.nodes_expanded,
        alphabeta_nodes=alphabeta_engine.nodes_expanded,
    )
