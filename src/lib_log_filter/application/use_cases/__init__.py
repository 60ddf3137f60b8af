"""Application use cases."""

from __future__ import annotations

from .filtering import FilteredEmitter, filter_sink, with_filter

__all__ = ["FilteredEmitter", "filter_sink", "with_filter"]
