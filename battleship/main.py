"""Application entry point: a line-oriented terminal host."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

from engine.api.logging import get_logger
from engine.runtime.logging import shutdown_engine_logging
from battleship.game.app.controller import Grid, MatchController, MatchView
from battleship.game.core.models import CellState, Phase
from battleship.game.infra.app_data import ensure_app_data_dirs
from battleship.game.infra.config import GameConfig, load_default_env_files, load_game_config
from battleship.game.infra.logging import setup_logging

logger = get_logger(__name__)

_CELL_GLYPHS = {
    CellState.EMPTY: ".",
    CellState.SHIP: "S",
    CellState.HIT: "X",
    CellState.MISS: "o",
    CellState.SUNK: "#",
}

CONSOLE_LOG_LEVEL = "WARNING"

HELP = "Commands: '<x> <y>' place/attack, 'r' rotate, 'n' new game, 'q' quit."


def render_grid(grid: Grid) -> list[str]:
    lines = ["   " + " ".join(str(x) for x in range(len(grid[0])))]
    for y, row in enumerate(grid):
        lines.append(f"{y:2} " + " ".join(_CELL_GLYPHS[cell] for cell in row))
    return lines


def render_view(view: MatchView) -> str:
    left = ["Your board"] + render_grid(view.human_grid)
    right = ["Enemy board"] + render_grid(view.computer_grid)
    width = max(len(line) for line in left) + 4
    rows = [f"{a:<{width}}{b}" for a, b in zip(left, right, strict=True)]
    footer = f"[{view.phase.value}]"
    if view.phase is Phase.SETUP:
        footer += f" orientation={view.orientation.value.lower()}"
    rows.append(footer + f" {view.message}")
    return "\n".join(rows)


def parse_coordinate(text: str) -> tuple[int, int] | None:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def run(
    controller: MatchController,
    config: GameConfig,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Drive a match from text commands until the user quits or input ends."""
    write(HELP)
    write(render_view(controller.view()))
    while True:
        try:
            line = read_line("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            write("Goodbye!")
            return
        if not line:
            continue
        if line in {"q", "quit", "exit"}:
            write("Thanks for playing!")
            return
        if line in {"h", "help"}:
            write(HELP)
            continue
        if line in {"r", "rotate"}:
            controller.rotate()
        elif line in {"n", "new"}:
            controller.start_new_game()
        else:
            coord = parse_coordinate(line)
            if coord is None:
                write(f"Could not parse {line!r}. {HELP}")
                continue
            if controller.state.phase is Phase.SETUP:
                controller.place_ship(*coord)
            else:
                controller.attack(*coord)
                write(render_view(controller.view()))
                if controller.computer_turn_pending:
                    sleep(config.computer_delay)
                    controller.advance(config.computer_delay)
        write(render_view(controller.view()))


def main() -> None:
    """Run the Battleship terminal game."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging(console_level_name=CONSOLE_LOG_LEVEL)
    config = load_game_config()
    logger.info(
        "startup app_data=%s computer_delay=%.2f seed=%s",
        paths["root"],
        config.computer_delay,
        config.seed,
    )
    controller = MatchController(
        random.Random(config.seed),
        computer_delay=config.computer_delay,
        reveal_computer_ships=config.reveal_computer_ships,
    )
    try:
        run(controller, config)
    finally:
        shutdown_engine_logging()


if __name__ == "__main__":
    main()
