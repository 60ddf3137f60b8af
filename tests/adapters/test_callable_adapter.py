from __future__ import annotations

import pytest

from lib_log_filter.adapters.callable_sink import CallableEmitter, as_emitter
from lib_log_filter.adapters.memory import ListEmitter
from lib_log_filter.application.use_cases.filtering import with_filter
from lib_log_filter.domain.errors import InvalidArgumentError
from lib_log_filter.domain.predicates import starts_with


def test_callable_emitter_delegates() -> None:
    seen: list[str] = []
    CallableEmitter(seen.append).emit("hi")

    assert seen == ["hi"]


def test_callable_emitter_wraps_print(capsys: pytest.CaptureFixture[str]) -> None:
    with_filter(CallableEmitter(print), starts_with("INFO")).emit("INFO: printed")

    assert capsys.readouterr().out == "INFO: printed\n"


def test_callable_emitter_rejects_non_callables() -> None:
    with pytest.raises(InvalidArgumentError, match="sink must not be None"):
        CallableEmitter(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="sink must be callable"):
        CallableEmitter("stdout")  # type: ignore[arg-type]


def test_as_emitter_returns_emitters_unchanged() -> None:
    sink = ListEmitter()

    assert as_emitter(sink) is sink


def test_as_emitter_wraps_callables() -> None:
    seen: list[str] = []
    emitter = as_emitter(seen.append)

    assert isinstance(emitter, CallableEmitter)
    emitter.emit("x")
    assert seen == ["x"]


def test_as_emitter_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError):
        as_emitter(None)  # type: ignore[arg-type]


def test_list_emitter_clear(list_sink: ListEmitter) -> None:
    list_sink.emit("a")
    list_sink.clear()

    assert list_sink.messages == []
