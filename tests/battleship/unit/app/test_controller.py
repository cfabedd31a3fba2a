import random

import pytest

from battleship.game.app.controller import MatchController
from battleship.game.core.models import CellState, FailureReason, Orientation, Phase, Side


def _first_water_cell(board):
    for y in range(board.size):
        for x in range(board.size):
            if board.ship_at(x, y) is None:
                return x, y
    raise AssertionError("board has no water")


def test_controller_starts_in_setup(controller_factory) -> None:
    controller = controller_factory()
    view = controller.view()
    assert view.phase is Phase.SETUP
    assert view.next_ship_length == 5
    assert view.orientation is Orientation.HORIZONTAL
    assert view.message == "Place your ship of length 5."
    assert not view.computer_turn_pending


def test_computer_grid_hides_ships(controller_factory) -> None:
    view = controller_factory().view()
    assert all(cell is CellState.EMPTY for row in view.computer_grid for cell in row)


def test_rotate_only_flips_orientation(controller_factory) -> None:
    controller = controller_factory()
    assert controller.rotate() is Orientation.VERTICAL
    assert controller.state.human.board.ships == []
    assert controller.view().orientation is Orientation.VERTICAL


def test_invalid_placement_reports_failure(controller_factory) -> None:
    controller = controller_factory()
    outcome = controller.place_ship(8, 0)
    assert outcome.reason is FailureReason.INVALID_PLACEMENT
    assert controller.status.startswith("Invalid placement!")
    assert controller.view().next_ship_length == 5


def test_human_attack_schedules_delayed_computer_reply(battle_controller) -> None:
    x, y = _first_water_cell(battle_controller.state.computer.board)
    outcome = battle_controller.attack(x, y)
    assert outcome.success
    assert battle_controller.computer_turn_pending
    assert battle_controller.state.turn is Side.COMPUTER

    assert battle_controller.advance(0.5) == 0
    assert battle_controller.state.human.board.attack_count == 0

    assert battle_controller.advance(0.5) == 1
    assert battle_controller.state.human.board.attack_count == 1
    assert battle_controller.state.turn is Side.HUMAN
    assert not battle_controller.computer_turn_pending


def test_advance_turn_runs_pending_reply_immediately(battle_controller) -> None:
    assert battle_controller.advance_turn() is None
    x, y = _first_water_cell(battle_controller.state.computer.board)
    battle_controller.attack(x, y)
    outcome = battle_controller.advance_turn()
    assert outcome is not None and outcome.success
    assert battle_controller.state.turn is Side.HUMAN
    assert battle_controller.scheduler.queued_task_count == 0


def test_rejected_attack_schedules_nothing(battle_controller) -> None:
    outcome = battle_controller.attack(10, 0)
    assert outcome.reason is FailureReason.INVALID_ATTACK
    assert not battle_controller.computer_turn_pending
    assert battle_controller.state.turn is Side.HUMAN


def test_attack_while_computer_pending_is_wrong_turn(battle_controller) -> None:
    board = battle_controller.state.computer.board
    x, y = _first_water_cell(board)
    battle_controller.attack(x, y)
    outcome = battle_controller.attack((x + 1) % 10, y)
    assert outcome.reason is FailureReason.WRONG_TURN
    assert board.attack_count == 1


def test_reset_discards_pending_computer_turn(battle_controller) -> None:
    x, y = _first_water_cell(battle_controller.state.computer.board)
    battle_controller.attack(x, y)
    assert battle_controller.computer_turn_pending

    fresh = battle_controller.start_new_game()
    assert fresh.phase is Phase.SETUP
    assert fresh.generation == 1
    assert not battle_controller.computer_turn_pending

    battle_controller.advance(5.0)
    assert fresh.human.board.attack_count == 0
    assert fresh.phase is Phase.SETUP
    assert battle_controller.view().next_ship_length == 5


def test_stale_generation_callback_is_ignored(battle_controller, monkeypatch) -> None:
    # Leave the old match's callback queued so only the generation check stops it.
    monkeypatch.setattr(battle_controller.scheduler, "cancel", lambda task_id: None)
    x, y = _first_water_cell(battle_controller.state.computer.board)
    assert battle_controller.attack(x, y).success

    fresh = battle_controller.start_new_game()
    assert battle_controller.advance(1.0) == 1

    assert battle_controller.state is fresh
    assert fresh.phase is Phase.SETUP
    assert fresh.human.board.attack_count == 0
    assert not battle_controller.computer_turn_pending
    assert battle_controller.status == "Place your ship of length 5."


def test_winning_shot_ends_match_without_scheduling(battle_controller) -> None:
    board = battle_controller.state.computer.board
    targets = [(x, y) for y in range(10) for x in range(10) if board.ship_at(x, y)]
    for x, y in targets:
        assert battle_controller.attack(x, y).success
        battle_controller.advance_turn()
    assert battle_controller.state.phase is Phase.ENDED
    assert battle_controller.state.winner is Side.HUMAN
    assert not battle_controller.computer_turn_pending
    assert battle_controller.view().message == "You won! All enemy ships sunk!"


def test_negative_delay_is_rejected(scheduler) -> None:
    with pytest.raises(ValueError):
        MatchController(random.Random(0), scheduler, computer_delay=-1.0)
