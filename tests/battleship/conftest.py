from __future__ import annotations

import logging
import random

import pytest

from engine.runtime.logging import shutdown_engine_logging
from engine.runtime.scheduler import Scheduler
from battleship.game.app.controller import MatchController
from battleship.game.core.match import MatchState, new_match, place_next_ship

# Bow positions for the fixed fleet (5, 4, 3, 3, 2), all horizontal on even rows.
HUMAN_FLEET_BOWS: tuple[tuple[int, int], ...] = ((0, 0), (0, 2), (0, 4), (0, 6), (0, 8))


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def match_state(seeded_rng: random.Random) -> MatchState:
    return new_match(seeded_rng)


@pytest.fixture
def battle_state(match_state: MatchState) -> MatchState:
    for x, y in HUMAN_FLEET_BOWS:
        assert place_next_ship(match_state, x, y).success
    return match_state


@pytest.fixture
def controller_factory(scheduler: Scheduler):
    def _make(seed: int = 1337, computer_delay: float = 1.0) -> MatchController:
        return MatchController(
            random.Random(seed), scheduler, computer_delay=computer_delay
        )

    return _make


@pytest.fixture
def battle_controller(controller_factory) -> MatchController:
    controller = controller_factory()
    for x, y in HUMAN_FLEET_BOWS:
        assert controller.place_ship(x, y).success
    return controller


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    shutdown_engine_logging()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)
