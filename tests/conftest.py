from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_filter import config as log_config
from lib_log_filter.adapters.memory import ListEmitter


@pytest.fixture
def record_console() -> Console:
    """Rich console writing to memory with recording enabled and colour off."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def list_sink() -> ListEmitter:
    return ListEmitter()


@pytest.fixture(autouse=True)
def _clean_filter_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``LOG_FILTER_*`` variables out of the tests."""

    for name in (
        log_config.DOTENV_ENV_VAR,
        log_config.INCLUDE_ENV_VAR,
        log_config.EXCLUDE_ENV_VAR,
        log_config.PATTERN_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
