"""Domain values and pure predicates used by the filtering layer."""

from __future__ import annotations

from .errors import InvalidArgumentError
from .predicates import Predicate, all_of, always, any_of, contains, matches, negate, never, starts_with

__all__ = [
    "InvalidArgumentError",
    "Predicate",
    "all_of",
    "always",
    "any_of",
    "contains",
    "matches",
    "negate",
    "never",
    "starts_with",
]
