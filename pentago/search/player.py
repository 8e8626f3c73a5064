from __future__ import annotations

from typing import Optional

from pentago.core import SearchBoard

from .engine import SearchConfig, SearchEngine, SearchResult


class ComputerPlayer:
    """Artificial player choosing moves with a configured search.

    Who moves first is decided per game, so the computer may play either the
    maximizing or the minimizing side.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self.engine = SearchEngine(self.config)

    @property
    def nodes_expanded(self) -> int:
        return self.engine.nodes_expanded

    def choose_move(self, board: SearchBoard, maximizing: bool) -> SearchResult:
        return self.engine.search(board, maximizing, self.config)
