"""Rule engine: ships, boards, players and match rules."""

from battleship.game.core.board import Board, place_fleet_randomly
from battleship.game.core.match import (
    MatchState,
    PlacementOutcome,
    TurnOutcome,
    computer_attack,
    human_attack,
    new_match,
    place_next_ship,
    rotate,
)
from battleship.game.core.models import (
    BOARD_SIZE,
    FLEET_LENGTHS,
    AttackResult,
    CellState,
    Coord,
    FailureReason,
    Orientation,
    Phase,
    ShotResult,
    Side,
)
from battleship.game.core.player import AttackStrategy, ManualStrategy, Player, RandomStrategy
from battleship.game.core.ship import InvalidShipLength, Ship

__all__ = [
    "BOARD_SIZE",
    "FLEET_LENGTHS",
    "AttackResult",
    "AttackStrategy",
    "Board",
    "CellState",
    "Coord",
    "FailureReason",
    "InvalidShipLength",
    "ManualStrategy",
    "MatchState",
    "Orientation",
    "Phase",
    "PlacementOutcome",
    "Player",
    "RandomStrategy",
    "Ship",
    "ShotResult",
    "Side",
    "TurnOutcome",
    "computer_attack",
    "human_attack",
    "new_match",
    "place_fleet_randomly",
    "place_next_ship",
    "rotate",
]
