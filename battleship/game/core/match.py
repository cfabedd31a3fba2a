"""Match phase rules: fleet setup, alternating turns and win detection.

All operations take an explicit `MatchState` and either apply a change and
report success, or report a `FailureReason` and leave the state untouched.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from engine.api.flow import FlowTransition, create_flow_program
from battleship.game.core.board import place_fleet_randomly
from battleship.game.core.models import (
    FLEET_LENGTHS,
    AttackResult,
    FailureReason,
    Orientation,
    Phase,
    ShotResult,
    Side,
)
from battleship.game.core.player import Player, computer_player, human_player
from battleship.game.core.ship import Ship

logger = logging.getLogger(__name__)

_PHASE_FLOW = create_flow_program(
    (
        FlowTransition(trigger="fleet_placed", source=Phase.SETUP, target=Phase.BATTLE),
        FlowTransition(trigger="fleet_sunk", source=Phase.BATTLE, target=Phase.ENDED),
    )
)


@dataclass(slots=True)
class MatchState:
    """Runtime match state."""

    human: Player
    computer: Player
    phase: Phase = Phase.SETUP
    turn: Side | None = None
    ship_index: int = 0
    orientation: Orientation = Orientation.HORIZONTAL
    winner: Side | None = None
    generation: int = 0
    fleet_lengths: tuple[int, ...] = FLEET_LENGTHS
    last_message: str = ""
    history: list[str] = field(default_factory=list)

    def player(self, side: Side) -> Player:
        return self.human if side is Side.HUMAN else self.computer

    @property
    def next_ship_length(self) -> int | None:
        if self.phase is not Phase.SETUP or self.ship_index >= len(self.fleet_lengths):
            return None
        return self.fleet_lengths[self.ship_index]


@dataclass(frozen=True, slots=True)
class PlacementOutcome:
    """Result of one setup placement attempt."""

    success: bool
    message: str
    phase: Phase
    reason: FailureReason | None = None
    ship_length: int | None = None
    next_ship_length: int | None = None


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    """Result of one attack attempt by either side."""

    success: bool
    message: str
    phase: Phase
    turn: Side | None
    reason: FailureReason | None = None
    attack: AttackResult | None = None
    winner: Side | None = None

    @property
    def fleet_sunk(self) -> bool:
        return self.winner is not None


def new_match(rng: random.Random, generation: int = 0) -> MatchState:
    """Create a match in setup with the computer fleet already deployed."""
    state = MatchState(
        human=human_player(),
        computer=computer_player(rng),
        generation=generation,
    )
    place_fleet_randomly(state.computer.board, rng, state.fleet_lengths)
    _announce(state, f"Place your ship of length {state.fleet_lengths[0]}.")
    logger.info("match_started generation=%d", generation)
    return state


def rotate(state: MatchState) -> Orientation:
    """Flip the orientation used for the next placement."""
    state.orientation = state.orientation.toggled()
    return state.orientation


def place_next_ship(state: MatchState, x: int, y: int) -> PlacementOutcome:
    """Place the next fleet ship for the human at (x, y)."""
    length = state.next_ship_length
    if length is None:
        return PlacementOutcome(
            success=False,
            message="Ships can only be placed during setup.",
            phase=state.phase,
            reason=FailureReason.WRONG_PHASE,
        )

    ship = Ship(length)
    if not state.human.board.place_ship(ship, x, y, state.orientation.is_horizontal):
        logger.info("placement_invalid length=%d x=%s y=%s", length, x, y)
        return PlacementOutcome(
            success=False,
            message=(
                f"Invalid placement! Please try placing a ship of length {length} "
                "at a different location."
            ),
            phase=state.phase,
            reason=FailureReason.INVALID_PLACEMENT,
            ship_length=length,
            next_ship_length=length,
        )

    state.ship_index += 1
    upcoming = state.next_ship_length
    if upcoming is not None:
        _announce(state, f"Place your ship of length {upcoming}.")
    else:
        _transition(state, "fleet_placed")
        state.turn = Side.HUMAN
        _announce(state, "All ships placed! Attack the computer's board!")
    return PlacementOutcome(
        success=True,
        message=state.last_message,
        phase=state.phase,
        ship_length=length,
        next_ship_length=upcoming,
    )


def human_attack(state: MatchState, x: int, y: int) -> TurnOutcome:
    """Resolve the human's shot at the computer board."""
    return _resolve_attack(state, Side.HUMAN, x, y)


def computer_attack(state: MatchState) -> TurnOutcome:
    """Let the computer pick and fire its shot at the human board."""
    return _resolve_attack(state, Side.COMPUTER, None, None)


def _resolve_attack(state: MatchState, side: Side, x: int | None, y: int | None) -> TurnOutcome:
    if state.phase is not Phase.BATTLE:
        return _rejected(state, FailureReason.WRONG_PHASE, "The battle is not in progress.")
    if state.turn is not side:
        return _rejected(state, FailureReason.WRONG_TURN, "It is not your turn.")

    attacker = state.player(side)
    defender = state.player(side.opponent)
    attack = attacker.attack(defender.board, x, y)
    if not attack.valid:
        logger.info("attack_invalid side=%s x=%s y=%s", side.value, x, y)
        if x is not None and y is not None and not defender.board.in_bounds(x, y):
            message = "Invalid move! That coordinate is off the board."
        else:
            message = "Invalid move! You've already attacked that coordinate."
        return _rejected(state, FailureReason.INVALID_ATTACK, message)

    logger.debug(
        "attack side=%s x=%d y=%d result=%s",
        side.value,
        attack.coord.x,
        attack.coord.y,
        attack.result.value,
    )
    if defender.board.all_sunk():
        _transition(state, "fleet_sunk")
        state.winner = side
        if side is Side.HUMAN:
            _announce(state, "You won! All enemy ships sunk!")
        else:
            _announce(state, "Computer won! All your ships sunk!")
    else:
        state.turn = side.opponent
        _announce(state, _attack_message(side, attack))

    return TurnOutcome(
        success=True,
        message=state.last_message,
        phase=state.phase,
        turn=state.turn,
        attack=attack,
        winner=state.winner,
    )


def _attack_message(side: Side, attack: AttackResult) -> str:
    if side is Side.HUMAN:
        return "Hit! Computer's turn." if attack.result is ShotResult.HIT else "Miss! Computer's turn."
    return "Computer hit your ship!" if attack.result is ShotResult.HIT else "Computer missed!"


def _rejected(state: MatchState, reason: FailureReason, message: str) -> TurnOutcome:
    return TurnOutcome(
        success=False,
        message=message,
        phase=state.phase,
        turn=state.turn,
        reason=reason,
        winner=state.winner,
    )


def _transition(state: MatchState, trigger: str) -> None:
    target = _PHASE_FLOW.resolve(state.phase, trigger)
    if target is None:
        raise RuntimeError(f"No phase transition for {trigger!r} from {state.phase.value}.")
    logger.info("phase_transition from=%s to=%s", state.phase.value, target.value)
    state.phase = target


def _announce(state: MatchState, message: str) -> None:
    state.last_message = message
    state.history.append(message)
