from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from pentago.core import NO_MOVE, Marker, Move, SearchBoard, SearchError

from .policy import POLICIES, SCORE_INF, AlphaBetaPolicy, MinimaxPolicy, Score, SearchPolicy, Window

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 2
    algorithm: str = AlphaBetaPolicy.name

    def validate(self) -> None:
        if self.depth < 0:
            raise SearchError(f"Search depth must be non-negative, got {self.depth}.")
        if self.algorithm not in POLICIES:
            raise SearchError(
                f"Unknown search algorithm {self.algorithm!r}; expected one of {sorted(POLICIES)}."
            )


@dataclass(frozen=True)
class SearchResult:
    score: Score
    move: Optional[Move] = None

    @property
    def row(self) -> int:
        return self.move.row if self.move is not None else NO_MOVE

    @property
    def col(self) -> int:
        return self.move.col if self.move is not None else NO_MOVE

    @property
    def block(self) -> int:
        return self.move.block if self.move is not None else NO_MOVE

    @property
    def direction(self) -> int:
        return int(self.move.direction) if self.move is not None else NO_MOVE

    def as_tuple(self) -> Tuple[Score, int, int, int, int]:
        return (self.score, self.row, self.col, self.block, self.direction)


@contextmanager
def simulated_move(board: SearchBoard, move: Move, marker: Marker) -> Iterator[None]:
    """Play ``move`` on ``board`` for the duration of the block.

    The rotation is reverted and the cell cleared on every exit path, then the
    board's cached evaluation is dropped.
    """
    board.apply_marker(move.row, move.col, marker)
    try:
        board.rotate_quadrant(move.block, move.direction)
        try:
            yield
        finally:
            board.rotate_quadrant(move.block, move.direction.opposite)
    finally:
        board.apply_marker(move.row, move.col, Marker.EMPTY)
        board.clear_heuristic_cache()


class SearchEngine:
    """Depth-limited minimax and alpha-beta search over a shared mutable board.

    ``nodes_expanded`` accumulates across calls: it is bumped once per leaf
    evaluation and once each time a child search returns to its parent. Call
    :meth:`reset` to start counting again.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self.config.validate()
        self.nodes_expanded = 0

    def reset(self) -> None:
        self.nodes_expanded = 0

    # ------------------------------------------------------------------
    def minimax(self, depth: int, board: SearchBoard, maximizing: bool) -> SearchResult:
        return self._run(MinimaxPolicy.name, depth, board, maximizing, -SCORE_INF, SCORE_INF)

    def alpha_beta_prune(
        self,
        depth: int,
        board: SearchBoard,
        maximizing: bool,
        alpha: Score = -SCORE_INF,
        beta: Score = SCORE_INF,
    ) -> SearchResult:
        return self._run(AlphaBetaPolicy.name, depth, board, maximizing, alpha, beta)

    def search(
        self,
        board: SearchBoard,
        maximizing: bool,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult:
        """Search with the algorithm and depth named by ``config`` (or the engine's own)."""
        config = config or self.config
        config.validate()
        return self._run(config.algorithm, config.depth, board, maximizing, -SCORE_INF, SCORE_INF)

    # ------------------------------------------------------------------
    def _run(
        self,
        algorithm: str,
        depth: int,
        board: SearchBoard,
        maximizing: bool,
        alpha: Score,
        beta: Score,
    ) -> SearchResult:
        if board is None:
            raise SearchError("A board is required to search.")
        if depth < 0:
            raise SearchError(f"Search depth must be non-negative, got {depth}.")
        policy = POLICIES.get(algorithm)
        if policy is None:
            raise SearchError(f"Unknown search algorithm {algorithm!r}.")

        start_nodes = self.nodes_expanded
        result = self._search(policy, depth, board, maximizing, alpha, beta)
        logger.debug(
            "%s depth=%d maximizing=%s score=%s move=%s nodes=%d",
            policy.name,
            depth,
            maximizing,
            result.score,
            result.move,
            self.nodes_expanded - start_nodes,
        )
        return result

    def _search(
        self,
        policy: SearchPolicy,
        depth: int,
        board: SearchBoard,
        maximizing: bool,
        alpha: Score,
        beta: Score,
    ) -> SearchResult:
        moves = board.children(maximizing)
        if depth == 0 or not moves:
            self.nodes_expanded += 1
            return SearchResult(board.heuristic_value(maximizing))

        window = Window(alpha, beta)
        marker = Marker.for_side(maximizing)
        best = policy.initial_value(maximizing, window)
        best_move: Optional[Move] = None

        for move in moves:
            with simulated_move(board, move, marker):
                score = self._search(
                    policy, depth - 1, board, not maximizing, window.alpha, window.beta
                ).score
                self.nodes_expanded += 1
                if policy.improves(score, best, maximizing):
                    best = score
                    best_move = move
                    policy.record(score, maximizing, window)
            if policy.should_prune(window):
                break

        return SearchResult(best, best_move)
