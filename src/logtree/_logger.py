"""Logger facade - abstracts the underlying logging implementation.

Users interact with this module, never with loguru directly.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from logtree._backend import Channel, context
from logtree.attributes import LoggerAttributes, apply_attributes
from logtree.levels import Severity, level_name, to_levelno
from logtree.normalize import normalize
from logtree.tracing import call_site, caller_context

if TYPE_CHECKING:
    from logtree.registry import LoggerRegistry

__all__ = ['Logger']


def _is_deferred(arg: Any) -> bool:
    """Callables other than classes and exceptions are evaluated lazily."""
    return callable(arg) and not isinstance(arg, (type, BaseException))


class Logger:
    """Hierarchical logger backed by a loguru channel.

    Loggers are created by a `LoggerRegistry`, one per name. Level and
    tracing are inherited from the closest ancestor that sets them
    explicitly, ending at the registry's root defaults.

    Any severity method takes a single argument: a plain value (logged as
    ``str(value)``), an exception (logged with its traceback) or a
    zero-argument callable, which is called only if the severity is
    enabled.

        >>> log = registry.get('app.db', level='debug')  # doctest: +SKIP
        >>> log.debug(lambda: expensive_dump())  # doctest: +SKIP
    """

    def __init__(self, name: str, sink: Channel, registry: LoggerRegistry,
                 parent_name: str | None = None):
        self._name = name
        self._sink = sink
        self._registry = registry
        self._parent_name = parent_name
        self._level: int | None = None
        self._tracing: bool | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def sink(self) -> Channel:
        """The backend channel this logger writes to."""
        return self._sink

    @property
    def sink_name(self) -> str:
        return self._sink.name

    @property
    def parent(self) -> Logger | None:
        """The logger one level up, None for the root."""
        if self._parent_name is None:
            return None
        # Parents are registered before their children
        parent = self._registry.find(self._parent_name)
        if parent is None:
            parent = self._registry.lookup(self._parent_name)
        return parent

    def _lineage(self) -> Iterator[Logger]:
        logger = self
        while logger is not None:
            yield logger
            logger = logger.parent

    # Attributes

    @property
    def level(self) -> int:
        """Effective level, inherited when not set on this logger."""
        for logger in self._lineage():
            if logger._level is not None:
                return logger._level
        return self._registry.default_level

    @level.setter
    def level(self, value: Severity | str | int | None) -> None:
        levelno = to_levelno(value)
        self._level = levelno
        self._sink.threshold = levelno

    @property
    def tracing(self) -> bool | None:
        """Tracing as set on this logger; None when inherited."""
        return self._tracing

    @tracing.setter
    def tracing(self, value: bool | None) -> None:
        self._tracing = None if value is None else bool(value)

    def is_tracing(self) -> bool:
        """Effective tracing, inherited when not set on this logger."""
        for logger in self._lineage():
            if logger._tracing is not None:
                return logger._tracing
        return self._registry.default_tracing

    @property
    def attributes(self) -> LoggerAttributes:
        """Explicitly set attributes of this logger."""
        return LoggerAttributes(level=self._level, tracing=self._tracing)

    @attributes.setter
    def attributes(self, value: LoggerAttributes | Mapping[str, Any] | None) -> None:
        apply_attributes(self, value)

    # Logging

    def trace(self, msg: Any) -> None:
        self._log(Severity.TRACE, msg)

    def debug(self, msg: Any) -> None:
        self._log(Severity.DEBUG, msg)

    def info(self, msg: Any) -> None:
        self._log(Severity.INFO, msg)

    def warn(self, msg: Any) -> None:
        self._log(Severity.WARN, msg)

    def error(self, msg: Any) -> None:
        self._log(Severity.ERROR, msg)

    def fatal(self, msg: Any) -> None:
        self._log(Severity.FATAL, msg)

    # Aliases
    warning = warn
    critical = fatal

    def log_error(self, msg: str, error: BaseException | None) -> None:
        """Log `msg` at ERROR with `error` passed to the backend untouched."""
        if self._enabled(Severity.ERROR):
            self._forward(Severity.ERROR, str(msg), error)

    def log_fatal(self, msg: str, error: BaseException | None) -> None:
        """Log `msg` at FATAL with `error` passed to the backend untouched."""
        if self._enabled(Severity.FATAL):
            self._forward(Severity.FATAL, str(msg), error)

    def _enabled(self, severity: Severity) -> bool:
        return self._sink.is_enabled(severity, self.level)

    def _log(self, severity: Severity, msg: Any) -> None:
        if not self._enabled(severity):
            return
        if _is_deferred(msg):
            msg = msg()
        message, cause = normalize(msg)
        self._forward(severity, message, cause)

    def _forward(self, severity: Severity, message: str, cause: BaseException | None) -> None:
        frame, depth = call_site(_INTERNAL_FILES)
        with caller_context(context, frame if self.is_tracing() else None):
            self._sink.emit(severity, message, cause, depth=depth)

    # Compatibility with Rails-style and stdlib-style loggers

    def isEnabledFor(self, level: Severity | str | int) -> bool:
        return to_levelno(level) >= self.level

    def is_trace(self) -> bool:
        return self._enabled(Severity.TRACE)

    def is_debug(self) -> bool:
        return self._enabled(Severity.DEBUG)

    def is_info(self) -> bool:
        return self._enabled(Severity.INFO)

    def is_warn(self) -> bool:
        return self._enabled(Severity.WARN)

    def is_error(self) -> bool:
        return self._enabled(Severity.ERROR)

    def is_fatal(self) -> bool:
        return self._enabled(Severity.FATAL)

    def flush(self) -> None:
        """Nothing to flush; sinks are owned by the backend."""

    def __repr__(self) -> str:
        return f'<Logger {self._name or "(root)"} ({level_name(self.level)})>'


# Frames from this file are skipped when looking for the caller
_INTERNAL_FILES = frozenset({Logger._forward.__code__.co_filename})
