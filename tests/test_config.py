from __future__ import annotations

from pathlib import Path

import pytest

from sudoku_logic import config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    config.reload()
    yield
    config.reload()


def _write_config(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    return path


def test_bundled_defaults() -> None:
    settings = config.resolve_settings(env={})

    assert settings.max_steps == 1000
    assert settings.console_level == "INFO"
    assert settings.log_file == "sudoku.log"
    assert settings.file_level == "DEBUG"
    assert settings.trace_level == "none"
    assert settings.events_enabled is False
    assert settings.events_dir == "logs/solve"
    assert settings.events_max_bytes == 100 * 1024 * 1024


def test_get_section_uses_dotted_paths() -> None:
    assert config.get_section("solver.max_steps") == 1000
    assert config.get_section("solver.missing", 5) == 5
    with pytest.raises(KeyError, match="solver.missing"):
        config.get_section("solver.missing")


def test_environment_overrides_toml() -> None:
    settings = config.resolve_settings(
        env={
            "SUDOKU_MAX_STEPS": "7",
            "SUDOKU_LOG_LEVEL": "debug",
            "SUDOKU_LOG_FILE": "",
            "SUDOKU_TRACE_LEVEL": "RULES",
        }
    )

    assert settings.max_steps == 7
    assert settings.console_level == "DEBUG"
    assert settings.log_file == ""
    assert settings.trace_level == "rules"


@pytest.mark.parametrize("value", ["abc", "0", "-3", ""])
def test_invalid_step_limit_is_ignored(value: str) -> None:
    assert config.resolve_settings(env={"SUDOKU_MAX_STEPS": value}).max_steps == 1000


def test_events_dir_enables_events_unless_disabled() -> None:
    enabled = config.resolve_settings(env={"SUDOKU_EVENTS_DIR": "/tmp/events"})
    assert enabled.events_enabled is True
    assert enabled.events_dir == "/tmp/events"

    disabled = config.resolve_settings(
        env={"SUDOKU_EVENTS_DIR": "/tmp/events", "SUDOKU_EVENTS_ENABLED": "off"}
    )
    assert disabled.events_enabled is False

    assert config.resolve_settings(env={"SUDOKU_EVENTS_ENABLED": "yes"}).events_enabled is True


def test_command_line_overrides_skip_unset_values() -> None:
    settings = config.resolve_settings(env={"SUDOKU_MAX_STEPS": "9"})
    overridden = settings.override(max_steps=None, console_level="ERROR")

    assert overridden.max_steps == 9
    assert overridden.console_level == "ERROR"
    assert settings.console_level == "INFO"


def test_config_file_can_be_replaced(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write_config(
        tmp_path / "sudoku.toml",
        '[solver]\nmax_steps = 5\n\n[trace]\nlevel = "rules"\n',
    )
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))
    config.reload()

    settings = config.resolve_settings(env={})

    assert settings.max_steps == 5
    assert settings.trace_level == "rules"
    assert settings.log_file == "sudoku.log"


def test_missing_config_file_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "absent.toml"))
    config.reload()

    with pytest.raises(RuntimeError, match="was not found"):
        config.get_config()


def test_unknown_levels_fall_back_to_toml(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="sudoku_logic"):
        settings = config.resolve_settings(
            env={"SUDOKU_LOG_LEVEL": "verbose", "SUDOKU_TRACE_LEVEL": "everything"}
        )

    assert settings.console_level == "INFO"
    assert settings.trace_level == "none"
    assert "Ignoring SUDOKU_LOG_LEVEL='verbose'" in caplog.text
    assert "Ignoring SUDOKU_TRACE_LEVEL='everything'" in caplog.text


def test_level_names_are_case_insensitive() -> None:
    settings = config.resolve_settings(
        env={"SUDOKU_LOG_LEVEL": " Warning ", "SUDOKU_TRACE_LEVEL": "Rules"}
    )

    assert settings.console_level == "WARNING"
    assert settings.trace_level == "rules"
