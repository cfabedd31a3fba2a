"""Match controller: owns the live match and paces the computer's replies."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from engine.runtime.scheduler import Scheduler
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
from battleship.game.core.models import CellState, Orientation, Phase, Side

logger = logging.getLogger(__name__)

DEFAULT_COMPUTER_DELAY_SECONDS = 1.0

type Grid = tuple[tuple[CellState, ...], ...]


@dataclass(frozen=True, slots=True)
class MatchView:
    """Read-only projection of the match for a presentation layer."""

    phase: Phase
    turn: Side | None
    winner: Side | None
    orientation: Orientation
    next_ship_length: int | None
    message: str
    human_grid: Grid
    computer_grid: Grid
    computer_turn_pending: bool


class MatchController:
    """Sequences setup, battle and end of a match against the computer."""

    def __init__(
        self,
        rng: random.Random,
        scheduler: Scheduler | None = None,
        *,
        computer_delay: float = DEFAULT_COMPUTER_DELAY_SECONDS,
        reveal_computer_ships: bool = False,
    ) -> None:
        if computer_delay < 0.0:
            raise ValueError("computer_delay must be >= 0")
        self._rng = rng
        self._scheduler = scheduler if scheduler is not None else Scheduler()
        self._computer_delay = computer_delay
        self._reveal_computer_ships = reveal_computer_ships
        self._generation = 0
        self._pending_task: int | None = None
        self._state = new_match(self._rng, self._generation)
        self._status = self._state.last_message

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def status(self) -> str:
        return self._status

    @property
    def computer_turn_pending(self) -> bool:
        return self._pending_task is not None and self._scheduler.is_pending(self._pending_task)

    def start_new_game(self) -> MatchState:
        """Discard the current match, including any scheduled computer turn."""
        self._cancel_pending()
        self._generation += 1
        self._state = new_match(self._rng, self._generation)
        self._status = self._state.last_message
        return self._state

    def rotate(self) -> Orientation:
        orientation = rotate(self._state)
        logger.debug("orientation=%s", orientation.value)
        return orientation

    def place_ship(self, x: int, y: int) -> PlacementOutcome:
        outcome = place_next_ship(self._state, x, y)
        self._status = outcome.message
        return outcome

    def attack(self, x: int, y: int) -> TurnOutcome:
        """Fire the human's shot; schedules the computer's reply when due."""
        outcome = human_attack(self._state, x, y)
        self._status = outcome.message
        if outcome.success and self._state.turn is Side.COMPUTER:
            self._schedule_computer_turn()
        return outcome

    def advance(self, delta_seconds: float) -> int:
        """Pump the scheduler with elapsed host time."""
        return self._scheduler.advance(delta_seconds)

    def advance_turn(self) -> TurnOutcome | None:
        """Run a pending computer turn immediately instead of waiting for its delay."""
        if not self.computer_turn_pending:
            return None
        self._cancel_pending()
        return self._computer_turn(self._generation)

    def view(self) -> MatchView:
        state = self._state
        return MatchView(
            phase=state.phase,
            turn=state.turn,
            winner=state.winner,
            orientation=state.orientation,
            next_ship_length=state.next_ship_length,
            message=self._status,
            human_grid=state.human.board.render_grid(reveal_ships=True),
            computer_grid=state.computer.board.render_grid(
                reveal_ships=self._reveal_computer_ships
            ),
            computer_turn_pending=self.computer_turn_pending,
        )

    def _schedule_computer_turn(self) -> None:
        self._cancel_pending()
        generation = self._generation
        self._pending_task = self._scheduler.call_later(
            self._computer_delay, lambda: self._computer_turn(generation)
        )
        logger.debug(
            "computer_turn_scheduled generation=%d delay=%.2f", generation, self._computer_delay
        )

    def _computer_turn(self, generation: int) -> TurnOutcome | None:
        if generation != self._generation:
            logger.info(
                "computer_turn_stale scheduled_generation=%d current_generation=%d",
                generation,
                self._generation,
            )
            return None
        self._pending_task = None
        outcome = computer_attack(self._state)
        self._status = outcome.message
        return outcome

    def _cancel_pending(self) -> None:
        if self._pending_task is not None:
            self._scheduler.cancel(self._pending_task)
            self._pending_task = None
