"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
FLEET_LENGTHS: tuple[int, ...] = (5, 4, 3, 3, 2)


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def is_horizontal(self) -> bool:
        return self is Orientation.HORIZONTAL

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class ShotResult(StrEnum):
    """Result of a single valid shot."""

    HIT = "hit"
    MISS = "miss"


class CellState(StrEnum):
    """What a presentation layer should draw for one cell."""

    EMPTY = "EMPTY"
    SHIP = "SHIP"
    HIT = "HIT"
    MISS = "MISS"
    SUNK = "SUNK"


class Phase(StrEnum):
    """Match phase."""

    SETUP = "setup"
    BATTLE = "battle"
    ENDED = "ended"


class Side(StrEnum):
    """Participant in a match."""

    HUMAN = "HUMAN"
    COMPUTER = "COMPUTER"

    @property
    def opponent(self) -> Side:
        return Side.COMPUTER if self is Side.HUMAN else Side.HUMAN


class FailureReason(StrEnum):
    """Why an operation was rejected without changing state."""

    INVALID_PLACEMENT = "INVALID_PLACEMENT"
    INVALID_ATTACK = "INVALID_ATTACK"
    WRONG_PHASE = "WRONG_PHASE"
    WRONG_TURN = "WRONG_TURN"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate; `x` is the column and `y` the row."""

    x: int
    y: int

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Outcome of one attack against a board."""

    valid: bool
    result: ShotResult | None = None
    coord: Coord | None = None
    sunk: bool = False


INVALID_ATTACK = AttackResult(valid=False)


def cells_for_placement(x: int, y: int, length: int, orientation: Orientation) -> list[Coord]:
    """Compute the cells a ship would cover, bow first."""
    if orientation.is_horizontal:
        return [Coord(x + i, y) for i in range(length)]
    return [Coord(x, y + i) for i in range(length)]
