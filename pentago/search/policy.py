from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

# Unbounded so that any integer heuristic can beat the starting value.
SCORE_INF = np.inf

Score = Union[int, float]


@dataclass
class Window:
    """Alpha/beta bounds owned by a single search frame."""

    alpha: Score = -SCORE_INF
    beta: Score = SCORE_INF


class SearchPolicy:
    """Selection rule plugged into the shared search core.

    Subclasses must override :meth:`initial_value`; the remaining hooks default
    to plain minimax behaviour (strict improvement, no bounds, no pruning).
    """

    name = "base"

    def initial_value(self, maximizing: bool, window: Window) -> Score:
        raise NotImplementedError

    def improves(self, score: Score, best: Score, maximizing: bool) -> bool:
        # Strict comparison: the first of several equal scores is kept.
        return score > best if maximizing else score < best

    def record(self, score: Score, maximizing: bool, window: Window) -> None:
        pass

    def should_prune(self, window: Window) -> bool:
        return False


class MinimaxPolicy(SearchPolicy):
    name = "minimax"

    def initial_value(self, maximizing: bool, window: Window) -> Score:
        return -SCORE_INF if maximizing else SCORE_INF


class AlphaBetaPolicy(SearchPolicy):
    name = "alphabeta"

    def initial_value(self, maximizing: bool, window: Window) -> Score:
        return window.alpha if maximizing else window.beta

    def record(self, score: Score, maximizing: bool, window: Window) -> None:
        if maximizing:
            window.alpha = score
        else:
            window.beta = score

    def should_prune(self, window: Window) -> bool:
        return window.alpha >= window.beta


POLICIES = {
    MinimaxPolicy.name: MinimaxPolicy(),
    AlphaBetaPolicy.name: AlphaBetaPolicy(),
}
