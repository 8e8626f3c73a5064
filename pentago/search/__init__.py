"""Game-tree search: minimax and alpha-beta over a shared mutable board."""

from .policy import SCORE_INF, AlphaBetaPolicy, MinimaxPolicy, SearchPolicy, Window
from .engine import SearchConfig, SearchEngine, SearchResult, simulated_move
from .player import ComputerPlayer

__all__ = [
    "SCORE_INF",
    "AlphaBetaPolicy",
    "MinimaxPolicy",
    "SearchPolicy",
    "Window",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "simulated_move",
    "ComputerPlayer",
]
