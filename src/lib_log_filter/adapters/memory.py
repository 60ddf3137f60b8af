"""In-memory emitter recording every message it receives."""

from __future__ import annotations

from lib_log_filter.application.ports.emitter import EmitterPort


class ListEmitter(EmitterPort):
    """Append emitted messages to :attr:`messages` in arrival order.

    Examples
    --------
    >>> sink = ListEmitter()
    >>> sink.emit("hello")
    >>> sink.messages
    ['hello']
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        """Forget every recorded message."""
        self.messages.clear()


__all__ = ["ListEmitter"]
