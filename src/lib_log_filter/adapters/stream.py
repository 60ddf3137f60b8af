"""Text-stream emitter, the plain "print to standard output" sink.

Purpose
-------
Write each message as a line to a text stream. The stream defaults to
``sys.stdout`` and is resolved on every call so redirections made after
construction (pytest ``capsys``, ``contextlib.redirect_stdout``) are honoured.

System Role
-----------
Default base emitter for the CLI. Write and flush errors are not handled here;
they surface from :meth:`StreamEmitter.emit` unchanged.
"""

from __future__ import annotations

import sys
from typing import TextIO

from lib_log_filter.application.ports.emitter import EmitterPort


class StreamEmitter(EmitterPort):
    """Write messages to ``stream`` followed by ``terminator``.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> StreamEmitter(buffer).emit("ready")
    >>> buffer.getvalue()
    'ready\\n'
    """

    def __init__(self, stream: TextIO | None = None, *, terminator: str = "\n") -> None:
        self._stream = stream
        self._terminator = terminator

    @property
    def stream(self) -> TextIO:
        """Return the target stream, falling back to the current ``sys.stdout``."""
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, message: str) -> None:
        stream = self.stream
        stream.write(message + self._terminator)
        stream.flush()


__all__ = ["StreamEmitter"]
