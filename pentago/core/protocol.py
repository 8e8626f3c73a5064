from __future__ import annotations

from typing import Protocol, Sequence

from .state import Marker, Move, Rotation


class SearchBoard(Protocol):
    """What the search engine needs from a board.

    The engine mutates one shared instance in place. ``rotate_quadrant`` with
    the opposite direction must exactly invert a prior rotation, and placing
    ``Marker.EMPTY`` must clear a cell.
    """

    def children(self, side_is_maximizing: bool) -> Sequence[Move]:
        ...

    def apply_marker(self, row: int, col: int, marker: Marker) -> None:
        ...

    def rotate_quadrant(self, block: int, direction: Rotation) -> None:
        ...

    def heuristic_value(self, side_is_maximizing: bool) -> int:
        ...

    def clear_heuristic_cache(self) -> None:
        ...
