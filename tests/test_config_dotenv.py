from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_filter import cli as cli_module
from lib_log_filter import config as log_config
from lib_log_filter.config import FilterSettings, load_filter_settings


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values that are not already set."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_FILTER_INCLUDE=dotenv-prefix\n")
    monkeypatch.chdir(nested)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_FILTER_INCLUDE"] == "dotenv-prefix"

    os.environ.pop("LOG_FILTER_INCLUDE", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_FILTER_INCLUDE=dotenv-prefix\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_FILTER_INCLUDE", "real-prefix")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_FILTER_INCLUDE"] == "real-prefix"


def test_enable_dotenv_with_explicit_start(tmp_path: Path) -> None:
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)
    env_file = tmp_path / "a" / ".env"
    env_file.write_text("LOG_FILTER_PATTERN=from-explicit\n")

    try:
        assert log_config.enable_dotenv(search_from=deep) == env_file.resolve()
        assert os.environ["LOG_FILTER_PATTERN"] == "from-explicit"
    finally:
        os.environ.pop("LOG_FILTER_PATTERN", None)


def test_enable_dotenv_runs_once(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("LOG_FILTER_EXCLUDE=first\n")

    try:
        first = log_config.enable_dotenv(search_from=tmp_path)
        (tmp_path / ".env").write_text("LOG_FILTER_EXCLUDE=second\n")
        os.environ.pop("LOG_FILTER_EXCLUDE", None)
        second = log_config.enable_dotenv(search_from=tmp_path)
    finally:
        os.environ.pop("LOG_FILTER_EXCLUDE", None)

    assert first == second
    assert "LOG_FILTER_EXCLUDE" not in os.environ


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "1", True),
        (None, "TRUE", True),
        (None, "off", False),
        (True, None, True),
        (False, "1", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []


def test_load_filter_settings_parses_lists() -> None:
    settings = load_filter_settings(
        {
            "LOG_FILTER_INCLUDE": "INFO, WARN,,",
            "LOG_FILTER_EXCLUDE": "INFO: tick",
            "LOG_FILTER_PATTERN": "",
        }
    )

    assert settings == FilterSettings(include_prefixes=("INFO", "WARN"), exclude_prefixes=("INFO: tick",), pattern=None)


def test_load_filter_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILTER_PATTERN", "db")

    assert load_filter_settings().pattern == "db"


def test_merged_overrides_only_given_fields() -> None:
    base = FilterSettings(include_prefixes=("INFO",), exclude_prefixes=("INFO: tick",), pattern="db")

    merged = base.merged(include_prefixes=("WARN",))

    assert merged == FilterSettings(include_prefixes=("WARN",), exclude_prefixes=("INFO: tick",), pattern="db")


def test_build_predicate_without_rules_accepts_everything() -> None:
    assert FilterSettings().build_predicate()("") is True
