from __future__ import annotations

import os

from battleship.game.infra.config import (
    GameConfig,
    load_default_env_files,
    load_env_file,
    load_game_config,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_env_file_missing_is_noop(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("BATTLESHIP_SEED", raising=False)
    load_env_file(str(tmp_path / ".env.missing"))
    assert "BATTLESHIP_SEED" not in os.environ


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("A=app\nB=app\n", encoding="utf-8")
    app_local_env.write_text("B=app_local\n", encoding="utf-8")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)

    load_default_env_files(paths=(str(app_env), str(app_local_env)))
    assert os.environ.get("A") == "app"
    assert os.environ.get("B") == "app_local"


def test_relative_env_file_is_read_from_cwd(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env.app").write_text("BATTLESHIP_SEED=42\n", encoding="utf-8")
    monkeypatch.delenv("BATTLESHIP_SEED", raising=False)
    monkeypatch.chdir(tmp_path)
    load_env_file(".env.app")
    assert os.environ.get("BATTLESHIP_SEED") == "42"

    monkeypatch.delenv("BATTLESHIP_SEED")
    monkeypatch.chdir(tmp_path / "..")
    load_env_file(".env.app")
    assert "BATTLESHIP_SEED" not in os.environ


def test_load_game_config_defaults(monkeypatch) -> None:
    for name in ("BATTLESHIP_COMPUTER_DELAY", "BATTLESHIP_SEED", "BATTLESHIP_REVEAL_COMPUTER"):
        monkeypatch.delenv(name, raising=False)
    assert load_game_config() == GameConfig()


def test_load_game_config_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("BATTLESHIP_COMPUTER_DELAY", "0.25")
    monkeypatch.setenv("BATTLESHIP_SEED", "42")
    monkeypatch.setenv("BATTLESHIP_REVEAL_COMPUTER", "yes")
    config = load_game_config()
    assert config.computer_delay == 0.25
    assert config.seed == 42
    assert config.reveal_computer_ships


def test_load_game_config_tolerates_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("BATTLESHIP_COMPUTER_DELAY", "-3")
    monkeypatch.setenv("BATTLESHIP_SEED", "abc")
    config = load_game_config()
    assert config.computer_delay == 0.0
    assert config.seed is None

    monkeypatch.setenv("BATTLESHIP_COMPUTER_DELAY", "soon")
    assert load_game_config().computer_delay == 1.0
