"""Predicate factories and combinators for message filters.

Purpose
-------
Provide the stock decisions callers hand to :func:`with_filter` so common
rules (prefix, substring, regex) and their boolean composition do not have to
be rewritten as ad-hoc lambdas.

Contents
--------
* :data:`Predicate` – the ``str -> bool`` callable type.
* Leaf factories: :func:`starts_with`, :func:`contains`, :func:`matches`,
  :func:`always`, :func:`never`.
* Combinators: :func:`all_of`, :func:`any_of`, :func:`negate`.

System Role
-----------
Pure domain functions. Every factory returns a closure ``str -> bool`` with no
side effects, safe to share between emitters and threads.

Examples
--------
>>> is_info = starts_with("INFO")
>>> is_info("INFO: start"), is_info("DEBUG: x")
(True, False)
>>> quiet = all_of(is_info, negate(contains("heartbeat")))
>>> quiet("INFO: heartbeat ok"), quiet("INFO: user login")
(False, True)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Pattern

from .errors import InvalidArgumentError, require_callable

Predicate = Callable[[str], bool]
"""Decision over a single message: ``True`` keeps it, ``False`` drops it."""


def _require_texts(values: tuple[str, ...], argument: str) -> tuple[str, ...]:
    if not values:
        raise InvalidArgumentError(argument, "requires at least one value")
    for value in values:
        if not isinstance(value, str):
            raise InvalidArgumentError(argument, f"must be str, got {type(value).__name__}")
    return values


def starts_with(*prefixes: str) -> Predicate:
    """Accept messages beginning with any of ``prefixes``.

    Examples
    --------
    >>> starts_with("WARN", "ERROR")("ERROR: disk full")
    True
    """

    wanted = _require_texts(prefixes, "prefixes")

    def _predicate(message: str) -> bool:
        return message.startswith(wanted)

    return _predicate


def contains(*fragments: str) -> Predicate:
    """Accept messages containing any of ``fragments``."""

    wanted = _require_texts(fragments, "fragments")

    def _predicate(message: str) -> bool:
        return any(fragment in message for fragment in wanted)

    return _predicate


def matches(pattern: str | Pattern[str], flags: int = 0) -> Predicate:
    """Accept messages where ``pattern`` is found anywhere (``re.search``).

    The expression is compiled once when the predicate is created; an invalid
    expression raises :class:`InvalidArgumentError` at that point.

    Examples
    --------
    >>> matches(r"user=\\d+")("login user=42")
    True
    >>> matches(r"^DEBUG")("INFO: DEBUG mode")
    False
    """

    if pattern is None:
        raise InvalidArgumentError("pattern", "must not be None")
    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern, flags)
        except re.error as exc:
            raise InvalidArgumentError("pattern", f"is not a valid regular expression: {exc}") from exc
    elif isinstance(pattern, re.Pattern):
        if flags:
            raise InvalidArgumentError("flags", "cannot be combined with a compiled pattern")
        compiled = pattern
    else:
        raise InvalidArgumentError("pattern", f"must be str or re.Pattern, got {type(pattern).__name__}")

    def _predicate(message: str) -> bool:
        return compiled.search(message) is not None

    return _predicate


def always() -> Predicate:
    """Accept every message."""

    def _predicate(message: str) -> bool:
        return True

    return _predicate


def never() -> Predicate:
    """Reject every message."""

    def _predicate(message: str) -> bool:
        return False

    return _predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Require ALL predicates to pass (AND), evaluated left to right.

    Empty ``predicates`` = always True.
    """

    for index, predicate in enumerate(predicates):
        require_callable(predicate, f"predicates[{index}]")

    def _predicate(message: str) -> bool:
        return all(predicate(message) for predicate in predicates)

    return _predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Require ANY predicate to pass (OR), evaluated left to right.

    Empty ``predicates`` = always False.
    """

    for index, predicate in enumerate(predicates):
        require_callable(predicate, f"predicates[{index}]")

    def _predicate(message: str) -> bool:
        return any(predicate(message) for predicate in predicates)

    return _predicate


def negate(predicate: Predicate) -> Predicate:
    """Invert ``predicate`` (NOT)."""

    require_callable(predicate, "predicate")

    def _predicate(message: str) -> bool:
        return not predicate(message)

    return _predicate


__all__ = [
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
