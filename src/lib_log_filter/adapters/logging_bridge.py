"""Emitter forwarding messages to a standard library :class:`logging.Logger`.

Lets filtered emitters feed an application's existing ``logging`` tree. The
bridge applies a fixed level; handler errors follow the ``logging`` module's
own ``raiseExceptions`` policy.
"""

from __future__ import annotations

import logging

from lib_log_filter.application.ports.emitter import EmitterPort
from lib_log_filter.domain.errors import InvalidArgumentError


class StdlibLoggingEmitter(EmitterPort):
    """Call ``logger.log(level, message)`` for every emitted message."""

    def __init__(self, logger: logging.Logger | str, level: int = logging.INFO) -> None:
        if logger is None:
            raise InvalidArgumentError("logger", "must not be None")
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._level = level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def level(self) -> int:
        return self._level

    def emit(self, message: str) -> None:
        # Messages are pre-rendered text; never treat them as %-format strings.
        self._logger.log(self._level, "%s", message)


__all__ = ["StdlibLoggingEmitter"]
