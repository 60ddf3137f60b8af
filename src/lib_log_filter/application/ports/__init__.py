"""Ports consumed by the application layer."""

from __future__ import annotations

from .emitter import EmitterPort, Predicate, Sink

__all__ = ["EmitterPort", "Predicate", "Sink"]
