"""Adapter turning any ``str -> None`` callable into an :class:`EmitterPort`."""

from __future__ import annotations

from lib_log_filter.application.ports.emitter import EmitterPort, Sink
from lib_log_filter.domain.errors import InvalidArgumentError, require_callable


class CallableEmitter(EmitterPort):
    """Delegate :meth:`emit` to a wrapped callable such as ``print``."""

    __slots__ = ("_sink",)

    def __init__(self, sink: Sink) -> None:
        require_callable(sink, "sink")
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink

    def emit(self, message: str) -> None:
        self._sink(message)

    def __repr__(self) -> str:
        return f"CallableEmitter({self._sink!r})"


def as_emitter(target: EmitterPort | Sink) -> EmitterPort:
    """Return ``target`` as an emitter, wrapping bare callables.

    Objects already exposing ``emit`` are returned unchanged.

    Examples
    --------
    >>> seen = []
    >>> as_emitter(seen.append).emit("x")
    >>> seen
    ['x']
    """

    if target is None:
        raise InvalidArgumentError("target", "must not be None")
    if isinstance(target, EmitterPort) and callable(getattr(target, "emit")):
        return target
    return CallableEmitter(target)


__all__ = ["CallableEmitter", "as_emitter"]
