"""Computer-vs-computer games and search comparisons."""

from .match import ComparisonResult, GameRecord, compare_algorithms, play_game

__all__ = ["ComparisonResult", "GameRecord", "compare_algorithms", "play_game"]
