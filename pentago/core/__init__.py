"""Core game types and the reference Pentago board."""

from .state import NO_MOVE, Marker, Move, Rotation
from .errors import IllegalMoveError, PentagoError, SearchError
from .protocol import SearchBoard
from .board import (
    BOARD_SIZE,
    NUM_QUADRANTS,
    QUADRANT_SIZE,
    TEMPO_BONUS,
    WIN_LENGTH,
    WIN_SCORE,
    PentagoBoard,
)

__all__ = [
    "NO_MOVE",
    "Marker",
    "Move",
    "Rotation",
    "PentagoError",
    "IllegalMoveError",
    "SearchError",
    "SearchBoard",
    "BOARD_SIZE",
    "NUM_QUADRANTS",
    "QUADRANT_SIZE",
    "TEMPO_BONUS",
    "WIN_LENGTH",
    "WIN_SCORE",
    "PentagoBoard",
]
