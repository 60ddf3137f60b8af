"""Public package surface for composable message filters.

Wrap any emitter (an object with ``emit(message)``) in a predicate so only
matching messages get through::

    from lib_log_filter import StreamEmitter, starts_with, with_filter

    info = with_filter(StreamEmitter(), starts_with("INFO"))
    info.emit("INFO: start")   # printed
    info.emit("DEBUG: x")      # dropped

The result is an emitter again, so filters chain with ``with_filter`` or
:meth:`FilteredEmitter.with_filter`.
"""

from __future__ import annotations

from .adapters import (
    CallableEmitter,
    ListEmitter,
    RichConsoleEmitter,
    StdlibLoggingEmitter,
    StreamEmitter,
    as_emitter,
)
from .application.ports import EmitterPort, Predicate, Sink
from .application.use_cases.filtering import FilteredEmitter, filter_sink, with_filter
from .domain import (
    InvalidArgumentError,
    all_of,
    always,
    any_of,
    contains,
    matches,
    negate,
    never,
    starts_with,
)

__all__ = [
    "CallableEmitter",
    "EmitterPort",
    "FilteredEmitter",
    "InvalidArgumentError",
    "ListEmitter",
    "Predicate",
    "RichConsoleEmitter",
    "Sink",
    "StdlibLoggingEmitter",
    "StreamEmitter",
    "all_of",
    "always",
    "any_of",
    "as_emitter",
    "contains",
    "filter_sink",
    "matches",
    "negate",
    "never",
    "starts_with",
    "with_filter",
]
