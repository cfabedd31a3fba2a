"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

import numpy as np

from battleship.game.core.models import (
    BOARD_SIZE,
    FLEET_LENGTHS,
    INVALID_ATTACK,
    AttackResult,
    CellState,
    Coord,
    Orientation,
    ShotResult,
    cells_for_placement,
)
from battleship.game.core.ship import Ship

logger = logging.getLogger(__name__)

_MAX_RANDOM_PLACEMENT_ATTEMPTS = 10_000


class Board:
    """Numpy-backed 10x10 board.

    `grid` holds ship ids: 0 for water, otherwise the 1-based index of the
    occupying ship in `ships`. Attacked coordinates only ever accumulate.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = size
        self.grid: np.ndarray = np.zeros((size, size), dtype=np.int16)
        self.ships: list[Ship] = []
        self.missed_attacks: list[Coord] = []
        self._attacked: set[Coord] = set()

    @property
    def attacked(self) -> frozenset[Coord]:
        return frozenset(self._attacked)

    @property
    def attack_count(self) -> int:
        return len(self._attacked)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return whether the coordinate is in board bounds."""
        return Coord(x, y).in_bounds(self.size)

    def was_attacked(self, x: int, y: int) -> bool:
        return Coord(x, y) in self._attacked

    def ship_at(self, x: int, y: int) -> Ship | None:
        """Return the ship covering a cell, if any."""
        if not self.in_bounds(x, y):
            return None
        ship_id = int(self.grid[y, x])
        if ship_id == 0:
            return None
        return self.ships[ship_id - 1]

    def can_place(self, length: int, x: int, y: int, orientation: Orientation) -> bool:
        """Return whether every target cell is on the board and empty."""
        for cell in cells_for_placement(x, y, length, orientation):
            if not self.in_bounds(cell.x, cell.y):
                return False
            if self.grid[cell.y, cell.x] != 0:
                return False
        return True

    def place_ship(self, ship: Ship, x: int, y: int, horizontal: bool) -> bool:
        """Place a ship with its bow at (x, y), growing right or down.

        Returns False and leaves the board untouched when any cell would be
        off-board or already occupied.
        """
        orientation = Orientation.HORIZONTAL if horizontal else Orientation.VERTICAL
        if any(existing is ship for existing in self.ships):
            return False
        if not self.can_place(ship.length, x, y, orientation):
            logger.debug(
                "placement_rejected length=%d x=%d y=%d orientation=%s",
                ship.length,
                x,
                y,
                orientation.value,
            )
            return False
        self.ships.append(ship)
        ship_id = len(self.ships)
        for cell in cells_for_placement(x, y, ship.length, orientation):
            self.grid[cell.y, cell.x] = ship_id
        return True

    def receive_attack(self, x: int, y: int) -> AttackResult:
        """Resolve a shot at (x, y).

        Off-board and repeated coordinates are invalid and mutate nothing.
        """
        coord = Coord(x, y)
        if not self.in_bounds(x, y) or coord in self._attacked:
            return INVALID_ATTACK

        self._attacked.add(coord)
        ship = self.ship_at(x, y)
        if ship is None:
            self.missed_attacks.append(coord)
            return AttackResult(valid=True, result=ShotResult.MISS, coord=coord)

        was_sunk = ship.is_sunk
        ship.register_hit()
        return AttackResult(
            valid=True,
            result=ShotResult.HIT,
            coord=coord,
            sunk=ship.is_sunk and not was_sunk,
        )

    def all_sunk(self) -> bool:
        """Return whether every placed ship is sunk (vacuously true when empty)."""
        return all(ship.is_sunk for ship in self.ships)

    def cell_state(self, x: int, y: int, *, reveal_ships: bool = False) -> CellState:
        """Project one cell for display; hidden ships show as water until sunk."""
        ship = self.ship_at(x, y)
        if ship is not None and ship.is_sunk:
            return CellState.SUNK
        if Coord(x, y) in self._attacked:
            return CellState.MISS if ship is None else CellState.HIT
        if ship is not None and reveal_ships:
            return CellState.SHIP
        return CellState.EMPTY

    def render_grid(self, *, reveal_ships: bool = False) -> tuple[tuple[CellState, ...], ...]:
        """Project the whole board, row by row."""
        return tuple(
            tuple(self.cell_state(x, y, reveal_ships=reveal_ships) for x in range(self.size))
            for y in range(self.size)
        )


def place_fleet_randomly(
    board: Board, rng: random.Random, lengths: Iterable[int] = FLEET_LENGTHS
) -> list[Ship]:
    """Place one ship per length at uniformly random legal positions."""
    placed: list[Ship] = []
    for length in lengths:
        ship = Ship(length)
        for _ in range(_MAX_RANDOM_PLACEMENT_ATTEMPTS):
            x = rng.randrange(board.size)
            y = rng.randrange(board.size)
            horizontal = rng.random() < 0.5
            if board.place_ship(ship, x, y, horizontal):
                placed.append(ship)
                break
        else:
            raise RuntimeError(f"Failed to place ship of length {length}.")
    return placed
