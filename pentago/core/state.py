from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

NO_MOVE = -1


class Marker(IntEnum):
    EMPTY = 0
    MAX = 1
    MIN = 2

    @property
    def symbol(self) -> str:
        return {Marker.EMPTY: ".", Marker.MAX: "X", Marker.MIN: "O"}[self]

    def opponent(self) -> "Marker":
        if self == Marker.EMPTY:
            raise ValueError("EMPTY has no opponent.")
        return Marker.MIN if self == Marker.MAX else Marker.MAX

    @staticmethod
    def for_side(side_is_maximizing: bool) -> "Marker":
        return Marker.MAX if side_is_maximizing else Marker.MIN


class Rotation(IntEnum):
    CW = 0
    CCW = 1

    @property
    def opposite(self) -> "Rotation":
        return Rotation.CCW if self == Rotation.CW else Rotation.CW


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    block: int
    direction: Rotation

    def __post_init__(self) -> None:
        # Boards may hand out plain ints for the direction.
        object.__setattr__(self, "direction", Rotation(self.direction))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.row, self.col, self.block, int(self.direction))

    def __str__(self) -> str:
        return f"({self.row},{self.col}) q{self.block} {self.direction.name}"
