"""Rich-powered console emitter implementing :class:`EmitterPort`.

Purpose
-------
Print messages through :class:`rich.console.Console` so terminal output picks
up Rich's colour detection and ``NO_COLOR``/``FORCE_COLOR`` handling.

Contents
--------
* :class:`RichConsoleEmitter` – emitter used by ``lib_log_filter filter --rich``.

System Role
-----------
Human-facing base sink. The message text is printed verbatim: markup and
automatic highlighting are off unless requested.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_filter.application.ports.emitter import EmitterPort


class RichConsoleEmitter(EmitterPort):
    """Render messages using a Rich console with an optional style."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        style: str | None = None,
        markup: bool = False,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the emitter with colour and markup preferences."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._style = style
        self._markup = markup

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, message: str) -> None:
        """Print ``message`` on its own line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> RichConsoleEmitter(console=console, style="cyan").emit("INFO: ready")
        >>> console.export_text()
        'INFO: ready\\n'
        """
        self._console.print(message, style=self._style, markup=self._markup, highlight=False)


__all__ = ["RichConsoleEmitter"]
