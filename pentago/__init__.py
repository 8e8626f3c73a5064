"""Pentago AI: game-tree search over a rotating-quadrant board."""

from . import core, search, evaluation
from .core import (
    NO_MOVE,
    IllegalMoveError,
    Marker,
    Move,
    PentagoBoard,
    PentagoError,
    Rotation,
    SearchBoard,
    SearchError,
)
from .search import (
    SCORE_INF,
    ComputerPlayer,
    SearchConfig,
    SearchEngine,
    SearchResult,
    simulated_move,
)
from .evaluation import ComparisonResult, GameRecord, compare_algorithms, play_game

__all__ = [
    "core",
    "search",
    "evaluation",
    "NO_MOVE",
    "IllegalMoveError",
    "Marker",
    "Move",
    "PentagoBoard",
    "PentagoError",
    "Rotation",
    "SearchBoard",
    "SearchError",
    "SCORE_INF",
    "ComputerPlayer",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "simulated_move",
    "ComparisonResult",
    "GameRecord",
    "compare_algorithms",
    "play_game",
]
