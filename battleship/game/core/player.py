"""Players and their attack-target selection strategies."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from battleship.game.core.board import Board
from battleship.game.core.models import INVALID_ATTACK, AttackResult, Coord


class AttackStrategy(ABC):
    """Selects the coordinate an attack is aimed at."""

    selects_targets: bool = False

    @abstractmethod
    def select_target(self, opponent_board: Board, requested: Coord | None) -> Coord | None:
        """Return the coordinate to attack, or None when no attack can be made."""


class ManualStrategy(AttackStrategy):
    """Attacks exactly where the caller asks."""

    def select_target(self, opponent_board: Board, requested: Coord | None) -> Coord | None:
        return requested


class RandomStrategy(AttackStrategy):
    """Blind uniform search over cells the opponent has not been attacked on.

    Keeps no memory of earlier hits: every shot is independent of the last.
    """

    selects_targets = True

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def select_target(self, opponent_board: Board, requested: Coord | None) -> Coord | None:
        size = opponent_board.size
        if opponent_board.attack_count >= size * size:
            return None
        while True:
            coord = Coord(self._rng.randrange(size), self._rng.randrange(size))
            if not opponent_board.was_attacked(coord.x, coord.y):
                return coord


class Player:
    """A board owner attacking through a strategy."""

    def __init__(self, strategy: AttackStrategy, board: Board | None = None) -> None:
        self.strategy = strategy
        self.board = board if board is not None else Board()

    @property
    def is_computer(self) -> bool:
        return self.strategy.selects_targets

    def attack(self, opponent_board: Board, x: int | None = None, y: int | None = None) -> AttackResult:
        """Resolve a target through the strategy and fire at the opponent board."""
        requested = Coord(x, y) if x is not None and y is not None else None
        target = self.strategy.select_target(opponent_board, requested)
        if target is None:
            return INVALID_ATTACK
        return opponent_board.receive_attack(target.x, target.y)


def human_player() -> Player:
    return Player(ManualStrategy())


def computer_player(rng: random.Random) -> Player:
    return Player(RandomStrategy(rng))
