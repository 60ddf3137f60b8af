"""Concrete emitters implementing :class:`EmitterPort`."""

from __future__ import annotations

from .callable_sink import CallableEmitter, as_emitter
from .console.rich_console import RichConsoleEmitter
from .logging_bridge import StdlibLoggingEmitter
from .memory import ListEmitter
from .stream import StreamEmitter

__all__ = [
    "CallableEmitter",
    "ListEmitter",
    "RichConsoleEmitter",
    "StdlibLoggingEmitter",
    "StreamEmitter",
    "as_emitter",
]
