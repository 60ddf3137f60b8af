"""Error taxonomy for filter composition.

Purpose
-------
Name the single failure the composition layer raises itself. Everything else
(sink I/O errors, exceptions thrown by predicates) travels through filters
untouched and reaches the caller as raised.

Contents
--------
* :class:`InvalidArgumentError` – contract violation detected while composing.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a composition receives a missing or malformed collaborator.

    Examples
    --------
    >>> err = InvalidArgumentError("predicate", "must not be None")
    >>> err.argument
    'predicate'
    >>> str(err)
    'predicate must not be None'
    """

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"{argument} {reason}")
        self.argument = argument


def require_callable(value: object, argument: str) -> None:
    """Fail fast unless ``value`` is present and callable."""

    if value is None:
        raise InvalidArgumentError(argument, "must not be None")
    if not callable(value):
        raise InvalidArgumentError(argument, f"must be callable, got {type(value).__name__}")


__all__ = ["InvalidArgumentError", "require_callable"]
