"""Emitter port describing the single-operation logging capability.

Purpose
-------
Define the narrow abstraction every base sink and every filtered decorator
satisfies, so a filtered emitter can stand in wherever a plain one is
expected.

Contents
--------
* :class:`EmitterPort` – runtime-checkable protocol with a single ``emit``.
* :data:`Sink` – plain callable form of the same capability.
* :data:`Predicate` – re-exported from :mod:`lib_log_filter.domain.predicates`.

System Role
-----------
Adapters implement :class:`EmitterPort`; the composition use case depends
only on this protocol and never on a concrete adapter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from lib_log_filter.domain.predicates import Predicate


@runtime_checkable
class EmitterPort(Protocol):
    """Accept a text message and emit it to some sink."""

    def emit(self, message: str) -> None:
        """Emit ``message``; sink failures propagate to the caller."""


Sink = Callable[[str], None]
"""Function form of :class:`EmitterPort` (e.g. ``print`` or ``list.append``)."""


__all__ = ["EmitterPort", "Predicate", "Sink"]
