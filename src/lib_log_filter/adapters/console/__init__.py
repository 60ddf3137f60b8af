"""Console emitters."""

from __future__ import annotations

from .rich_console import RichConsoleEmitter

__all__ = ["RichConsoleEmitter"]
