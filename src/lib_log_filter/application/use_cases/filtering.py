"""Use case composing a base emitter with a filtering predicate.

Purpose
-------
Decorate an emitter so that only messages accepted by a predicate reach it,
while the result still satisfies :class:`EmitterPort` and can be wrapped
again.

Contents
--------
* :class:`FilteredEmitter` – immutable decorator holding ``base`` and
  ``predicate``.
* :func:`with_filter` – canonical composition returning a
  :class:`FilteredEmitter`.
* :func:`filter_sink` – the same composition over plain ``str -> None``
  callables, returning a closure.

System Role
-----------
The only policy in the package. Composition validates its inputs up front and
raises :class:`InvalidArgumentError`; afterwards ``emit`` never catches
anything, so sink and predicate exceptions reach the caller unchanged.

Examples
--------
>>> from lib_log_filter.adapters.memory import ListEmitter
>>> from lib_log_filter.domain.predicates import starts_with
>>> sink = ListEmitter()
>>> info_only = with_filter(sink, starts_with("INFO"))
>>> for line in ("INFO: start", "DEBUG: x", "INFO: end"):
...     info_only.emit(line)
>>> sink.messages
['INFO: start', 'INFO: end']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lib_log_filter.application.ports.emitter import EmitterPort, Predicate, Sink
from lib_log_filter.domain.errors import InvalidArgumentError, require_callable

logger = logging.getLogger(__name__)


def _describe(collaborator: object) -> str:
    # Type or function name only; a FilteredEmitter repr walks the whole chain.
    return getattr(collaborator, "__qualname__", None) or type(collaborator).__name__


def _require_emitter(base: object) -> None:
    if base is None:
        raise InvalidArgumentError("base", "must not be None")
    if not isinstance(base, EmitterPort) or not callable(getattr(base, "emit")):
        raise InvalidArgumentError("base", f"must provide an emit(message) method, got {type(base).__name__}")


@dataclass(slots=True, frozen=True)
class FilteredEmitter(EmitterPort):
    """Emitter forwarding to ``base`` only the messages ``predicate`` accepts.

    Attributes
    ----------
    base:
        Emitter receiving accepted messages, referenced and never copied.
    predicate:
        Decision evaluated exactly once per :meth:`emit` call.
    """

    base: EmitterPort
    predicate: Predicate

    def __post_init__(self) -> None:
        _require_emitter(self.base)
        require_callable(self.predicate, "predicate")

    def emit(self, message: str) -> None:
        """Forward ``message`` unchanged when the predicate accepts it.

        A rejected message is a successful no-op.
        """
        if self.predicate(message):
            self.base.emit(message)

    def with_filter(self, predicate: Predicate) -> "FilteredEmitter":
        """Wrap this emitter in a further filter (logical AND).

        Examples
        --------
        >>> from lib_log_filter.adapters.memory import ListEmitter
        >>> sink = ListEmitter()
        >>> chained = with_filter(sink, lambda m: "db" in m).with_filter(lambda m: m.startswith("WARN"))
        >>> chained.emit("WARN db slow"); chained.emit("WARN cache cold"); chained.emit("INFO db up")
        >>> sink.messages
        ['WARN db slow']
        """
        return with_filter(self, predicate)


def with_filter(base: EmitterPort, predicate: Predicate) -> FilteredEmitter:
    """Return ``base`` decorated so only messages passing ``predicate`` are emitted.

    Parameters
    ----------
    base:
        Any object with an ``emit(message)`` method, including another
        :class:`FilteredEmitter`.
    predicate:
        Callable ``str -> bool``.

    Raises
    ------
    InvalidArgumentError
        When ``base`` or ``predicate`` is ``None`` or of the wrong shape. No
        emitter is produced in that case.
    """

    emitter = FilteredEmitter(base, predicate)
    logger.debug(
        "composed filtered emitter",
        extra={"filter_base": _describe(base), "filter_predicate": _describe(predicate)},
    )
    return emitter


def filter_sink(sink: Sink, predicate: Predicate) -> Sink:
    """Return a callable forwarding to ``sink`` only messages passing ``predicate``.

    The function counterpart of :func:`with_filter` for callers that model
    emitters as plain callables (``print``, ``list.append``, ``logger.info``).
    The result is itself a sink and may be filtered again.

    Examples
    --------
    >>> seen = []
    >>> errors = filter_sink(seen.append, lambda m: m.startswith("ERROR"))
    >>> errors("ERROR: boom"); errors("INFO: fine")
    >>> seen
    ['ERROR: boom']
    """

    require_callable(sink, "sink")
    require_callable(predicate, "predicate")
    logger.debug(
        "composed filtered sink",
        extra={"filter_base": _describe(sink), "filter_predicate": _describe(predicate)},
    )

    def _filtered(message: str) -> None:
        if predicate(message):
            sink(message)

    return _filtered


__all__ = ["FilteredEmitter", "filter_sink", "with_filter"]
