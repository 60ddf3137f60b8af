"""Environment-driven configuration for the filter CLI.

Purpose
-------
Decide whether a nearby ``.env`` should be loaded, load it at most once, and
translate ``LOG_FILTER_*`` variables into a :class:`FilterSettings` value the
CLI turns into a predicate.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle variable consulted when no CLI flag is given.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – python-dotenv integration.
* :class:`FilterSettings` / :func:`load_filter_settings` – include/exclude rules.

System Role
-----------
Configuration lives at the edge: library callers compose predicates directly
and never need this module.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain.predicates import Predicate, all_of, always, matches, negate, starts_with

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_FILTER_USE_DOTENV"
INCLUDE_ENV_VAR = "LOG_FILTER_INCLUDE"
EXCLUDE_ENV_VAR = "LOG_FILTER_EXCLUDE"
PATTERN_ENV_VAR = "LOG_FILTER_PATTERN"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_dotenv_loaded: Path | None = None
_dotenv_attempted = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise ``env_value`` is parsed as a
    boolean toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` into ``os.environ`` without overriding existing values.

    The search walks upwards from ``search_from`` (default: the current
    working directory). Subsequent calls return the first result without
    touching the environment again.
    """

    global _dotenv_loaded, _dotenv_attempted
    if _dotenv_attempted:
        return _dotenv_loaded
    _dotenv_attempted = True

    candidate: Path | None
    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        start = search_from.resolve()
        candidate = next((d / ".env" for d in (start, *start.parents) if (d / ".env").is_file()), None)
    if candidate is None:
        logger.debug("no .env file found", extra={"search_from": str(search_from or Path.cwd())})
        return None

    load_dotenv(candidate, override=False)
    _dotenv_loaded = candidate.resolve()
    logger.debug("loaded .env", extra={"dotenv_path": str(_dotenv_loaded)})
    return _dotenv_loaded


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_attempted
    _dotenv_loaded = None
    _dotenv_attempted = False


def _split_csv(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(slots=True, frozen=True)
class FilterSettings:
    """Declarative filter rules.

    Attributes
    ----------
    include_prefixes:
        When non-empty, a message must start with one of these.
    exclude_prefixes:
        A message starting with any of these is dropped.
    pattern:
        Optional regular expression that must be found in the message.
    """

    include_prefixes: tuple[str, ...] = ()
    exclude_prefixes: tuple[str, ...] = ()
    pattern: str | None = None

    def build_predicate(self) -> Predicate:
        """Return the conjunction of the configured rules.

        Examples
        --------
        >>> keep = FilterSettings(include_prefixes=("INFO",), exclude_prefixes=("INFO: tick",)).build_predicate()
        >>> keep("INFO: start"), keep("INFO: tick 3"), keep("DEBUG: x")
        (True, False, False)
        >>> FilterSettings().build_predicate()("anything")
        True
        """
        rules: list[Predicate] = []
        if self.include_prefixes:
            rules.append(starts_with(*self.include_prefixes))
        if self.exclude_prefixes:
            rules.append(negate(starts_with(*self.exclude_prefixes)))
        if self.pattern:
            rules.append(matches(self.pattern))
        if not rules:
            return always()
        return all_of(*rules)

    def merged(
        self,
        *,
        include_prefixes: tuple[str, ...] = (),
        exclude_prefixes: tuple[str, ...] = (),
        pattern: str | None = None,
    ) -> "FilterSettings":
        """Return a copy where each non-empty override replaces the stored value."""
        return FilterSettings(
            include_prefixes=include_prefixes or self.include_prefixes,
            exclude_prefixes=exclude_prefixes or self.exclude_prefixes,
            pattern=pattern if pattern is not None else self.pattern,
        )


def load_filter_settings(environ: Mapping[str, str] | None = None) -> FilterSettings:
    """Build :class:`FilterSettings` from ``LOG_FILTER_*`` variables.

    Examples
    --------
    >>> load_filter_settings({"LOG_FILTER_INCLUDE": "INFO, WARN", "LOG_FILTER_PATTERN": "db"})
    FilterSettings(include_prefixes=('INFO', 'WARN'), exclude_prefixes=(), pattern='db')
    """

    env = os.environ if environ is None else environ
    pattern = env.get(PATTERN_ENV_VAR) or None
    return FilterSettings(
        include_prefixes=_split_csv(env.get(INCLUDE_ENV_VAR)),
        exclude_prefixes=_split_csv(env.get(EXCLUDE_ENV_VAR)),
        pattern=pattern,
    )


__all__ = [
    "DOTENV_ENV_VAR",
    "EXCLUDE_ENV_VAR",
    "FilterSettings",
    "INCLUDE_ENV_VAR",
    "PATTERN_ENV_VAR",
    "enable_dotenv",
    "load_filter_settings",
    "should_use_dotenv",
]
