from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import IllegalMoveError
from .state import Marker, Move, Rotation

BOARD_SIZE = 6
QUADRANT_SIZE = 3
NUM_QUADRANTS = 4
WIN_LENGTH = 5

WIN_SCORE = 100_000
TEMPO_BONUS = 5
# Indexed by the number of own markers in a line free of opposing markers.
LINE_WEIGHTS = np.array([0, 1, 10, 100, 1000, WIN_SCORE], dtype=np.int64)

BoardArray = NDArray[np.int8]

# (row slice, col slice) of each quadrant: 0 top-left, 1 top-right, 2 bottom-left, 3 bottom-right.
QUADRANT_SLICES: Tuple[Tuple[slice, slice], ...] = (
    (slice(0, 3), slice(0, 3)),
    (slice(0, 3), slice(3, 6)),
    (slice(3, 6), slice(0, 3)),
    (slice(3, 6), slice(3, 6)),
)


def _build_lines() -> Tuple[np.ndarray, np.ndarray]:
    lines: List[List[Tuple[int, int]]] = []
    span = BOARD_SIZE - WIN_LENGTH + 1
    for fixed in range(BOARD_SIZE):
        for start in range(span):
            lines.append([(fixed, start + i) for i in range(WIN_LENGTH)])
            lines.append([(start + i, fixed) for i in range(WIN_LENGTH)])
    for r in range(span):
        for c in range(span):
            lines.append([(r + i, c + i) for i in range(WIN_LENGTH)])
            lines.append([(r + i, BOARD_SIZE - 1 - c - i) for i in range(WIN_LENGTH)])
    rows = np.array([[cell[0] for cell in line] for line in lines], dtype=np.intp)
    cols = np.array([[cell[1] for cell in line] for line in lines], dtype=np.intp)
    return rows, cols


LINE_ROWS, LINE_COLS = _build_lines()


class PentagoBoard:
    """Mutable 6x6 Pentago board implementing the ``SearchBoard`` protocol."""

    def __init__(self, grid: Optional[BoardArray] = None) -> None:
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            grid = np.asarray(grid, dtype=np.int8).copy()
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}.")
            if not np.isin(grid, [int(m) for m in Marker]).all():
                raise ValueError("Board contains unknown marker values.")
        self.grid: BoardArray = grid
        self._heuristic_cache: Dict[bool, int] = {}

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "PentagoBoard":
        """Build a board from strings of ``.``, ``X`` (max) and ``O`` (min)."""
        symbols = {m.symbol: int(m) for m in Marker}
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}.")
        grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for r, line in enumerate(rows):
            cells = line.replace(" ", "")
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Row {r} must have {BOARD_SIZE} cells: {line!r}")
            for c, ch in enumerate(cells):
                if ch not in symbols:
                    raise ValueError(f"Unknown symbol {ch!r} in row {r}.")
                grid[r, c] = symbols[ch]
        return cls(grid)

    def copy(self) -> "PentagoBoard":
        return PentagoBoard(self.grid)

    def snapshot(self) -> bytes:
        return self.grid.tobytes()

    # ------------------------------------------------------------------
    # SearchBoard protocol
    def children(self, side_is_maximizing: bool) -> List[Move]:
        if self.winner() is not None:
            return []
        moves: List[Move] = []
        for row, col in self.empty_cells():
            for block in range(NUM_QUADRANTS):
                for direction in Rotation:
                    moves.append(Move(row, col, block, direction))
        return moves

    def apply_marker(self, row: int, col: int, marker: Marker) -> None:
        if not self._in_bounds(row, col):
            raise IllegalMoveError(f"Cell ({row},{col}) is off the board.")
        self.grid[row, col] = int(Marker(marker))
        self._heuristic_cache.clear()

    def rotate_quadrant(self, block: int, direction: Rotation) -> None:
        if not 0 <= block < NUM_QUADRANTS:
            raise IllegalMoveError(f"Unknown quadrant {block}.")
        try:
            direction = Rotation(direction)
        except ValueError as exc:
            raise IllegalMoveError(f"Unknown rotation direction {direction!r}.") from exc
        rows, cols = QUADRANT_SLICES[block]
        k = -1 if direction == Rotation.CW else 1
        self.grid[rows, cols] = np.rot90(self.grid[rows, cols], k=k).copy()
        self._heuristic_cache.clear()

    def heuristic_value(self, side_is_maximizing: bool) -> int:
        cached = self._heuristic_cache.get(side_is_maximizing)
        if cached is None:
            cached = self._evaluate(side_is_maximizing)
            self._heuristic_cache[side_is_maximizing] = cached
        return cached

    def clear_heuristic_cache(self) -> None:
        self._heuristic_cache.clear()

    # ------------------------------------------------------------------
    def place(self, move: Move, marker: Marker) -> None:
        """Play ``move`` for ``marker`` after checking it is legal."""
        marker = Marker(marker)
        if marker == Marker.EMPTY:
            raise IllegalMoveError("Cannot place an empty marker.")
        if not self._in_bounds(move.row, move.col):
            raise IllegalMoveError(f"Cell ({move.row},{move.col}) is off the board.")
        if self.grid[move.row, move.col] != Marker.EMPTY:
            raise IllegalMoveError(f"Cell ({move.row},{move.col}) is occupied.")
        if not 0 <= move.block < NUM_QUADRANTS:
            raise IllegalMoveError(f"Unknown quadrant {move.block}.")
        if self.winner() is not None:
            raise IllegalMoveError("Game is already over.")
        self.apply_marker(move.row, move.col, marker)
        self.rotate_quadrant(move.block, move.direction)

    def empty_cells(self) -> Iterable[Tuple[int, int]]:
        for r, c in np.argwhere(self.grid == Marker.EMPTY):
            yield int(r), int(c)

    def is_full(self) -> bool:
        return not np.any(self.grid == Marker.EMPTY)

    def winner(self) -> Optional[Marker]:
        """Return the winning marker, ``Marker.EMPTY`` for a draw, ``None`` while ongoing."""
        max_five, min_five = self._fives()
        if max_five and min_five:
            return Marker.EMPTY
        if max_five:
            return Marker.MAX
        if min_five:
            return Marker.MIN
        if self.is_full():
            return Marker.EMPTY
        return None

    def render(self) -> str:
        rows = []
        for r in range(BOARD_SIZE):
            left = " ".join(Marker(int(v)).symbol for v in self.grid[r, :QUADRANT_SIZE])
            right = " ".join(Marker(int(v)).symbol for v in self.grid[r, QUADRANT_SIZE:])
            rows.append(f"{left} | {right}")
            if r == QUADRANT_SIZE - 1:
                rows.append("------+------")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"PentagoBoard(empty={int(np.sum(self.grid == Marker.EMPTY))})\n{self.render()}"

    # ------------------------------------------------------------------
    def _line_counts(self) -> Tuple[np.ndarray, np.ndarray]:
        values = self.grid[LINE_ROWS, LINE_COLS]
        return (values == Marker.MAX).sum(axis=1), (values == Marker.MIN).sum(axis=1)

    def _fives(self) -> Tuple[bool, bool]:
        max_counts, min_counts = self._line_counts()
        return bool(np.any(max_counts == WIN_LENGTH)), bool(np.any(min_counts == WIN_LENGTH))

    def _evaluate(self, side_is_maximizing: bool) -> int:
        max_counts, min_counts = self._line_counts()
        max_five = bool(np.any(max_counts == WIN_LENGTH))
        min_five = bool(np.any(min_counts == WIN_LENGTH))
        if max_five and min_five:
            return 0
        if max_five:
            return WIN_SCORE
        if min_five:
            return -WIN_SCORE
        if self.is_full():
            return 0
        score = int(LINE_WEIGHTS[max_counts[min_counts == 0]].sum())
        score -= int(LINE_WEIGHTS[min_counts[max_counts == 0]].sum())
        score += TEMPO_BONUS if side_is_maximizing else -TEMPO_BONUS
        return score

    @staticmethod
    def _in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
