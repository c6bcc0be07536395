"""Loguru backend - internal implementation detail.

This module is NOT part of the public API. Users should never import from here.
To switch backends, only this file needs to change.

The facade needs three things from the engine: named channels with an
optional threshold, severity-tagged emission with an optional exception, and
a per-thread key/value context that ends up in every record.
"""
from __future__ import annotations

from contextvars import ContextVar
from typing import Any

from loguru import logger as _loguru

__all__ = [
    'Channel',
    'ContextStore',
    'add_sink',
    'complete',
    'context',
    'fill_extra',
    'get_backend',
    'level_no',
    'remove_sink',
    ]

# Keys every record carries in ``record['extra']``
EXTRA_DEFAULTS = {
    'logger_name': '',
    'file_name': '',
    'line_number': '',
    'method_name': '',
}

_context_var: ContextVar[dict[str, str]] = ContextVar('logtree_context', default={})


class ContextStore:
    """Per-thread (and per-task) key/value context read by every emission.

    Backed by a ``ContextVar``, so each thread sees its own mapping. The
    mapping is replaced, never mutated, on every write.
    """

    def put(self, key: str, value: str) -> None:
        data = dict(_context_var.get())
        data[key] = value
        _context_var.set(data)

    def remove(self, key: str) -> None:
        data = _context_var.get()
        if key in data:
            data = dict(data)
            del data[key]
            _context_var.set(data)

    def get(self, key: str) -> str | None:
        return _context_var.get().get(key)

    def snapshot(self) -> dict[str, str]:
        """Copy of the current mapping."""
        return dict(_context_var.get())

    def clear(self) -> None:
        _context_var.set({})


# Shared store, one per process; contents are per thread
context = ContextStore()


def level_no(name: str) -> int:
    """Numeric value of a loguru level name.

    Raises ValueError for a level loguru does not know.
    """
    return _loguru.level(str(name)).no


class Channel:
    """Named emission point on top of loguru.

    Loguru has a single global logger, so a channel is its name bound into
    ``extra['logger_name']`` plus an optional threshold checked by the caller.
    """

    def __init__(self, name: str, threshold: int | None = None):
        self.name = name
        self._threshold = threshold

    @property
    def threshold(self) -> int | None:
        return self._threshold

    @threshold.setter
    def threshold(self, value: int | None) -> None:
        self._threshold = value

    def is_enabled(self, severity: str, threshold: int | None = None) -> bool:
        """Check `severity` against `threshold`, or the channel's own one.

        No threshold at all means every severity is enabled; loguru sinks
        still apply their own levels.
        """
        levelno = level_no(severity)
        limit = self._threshold if threshold is None else threshold
        return limit is None or levelno >= limit

    def emit(self, severity: str, message: str, cause: BaseException | None = None,
             depth: int = 0) -> None:
        """Send a message to loguru.

        `depth` counts frames between the caller of this method and the
        frame loguru should report as the origin of the record.
        """
        extra = {**EXTRA_DEFAULTS, **context.snapshot(), 'logger_name': self.name}
        bound = _loguru.bind(**extra)
        bound.opt(depth=depth + 1, exception=cause).log(str(severity), message)

    def __repr__(self) -> str:
        return f'Channel({self.name!r}, threshold={self._threshold!r})'


def fill_extra(record: dict) -> None:
    """Loguru patcher giving every record the context keys.

    Records from code that logs through loguru directly lack them, which
    would break format strings referring to ``extra[file_name]`` and friends.
    Values already present are kept.
    """
    for key, value in EXTRA_DEFAULTS.items():
        record['extra'].setdefault(key, value)


class LoguruBackend:
    """Loguru-based logging backend."""

    def __init__(self):
        self._sink_ids: list[int] = []

    def reset(self) -> None:
        """Remove all sinks and start fresh."""
        _loguru.remove()
        self._sink_ids.clear()

    def add_sink(self, sink: Any, **kwargs) -> int:
        """Add a sink and return its ID."""
        sink_id = _loguru.add(sink, **kwargs)
        self._sink_ids.append(sink_id)
        return sink_id

    def remove_sink(self, sink_id: int) -> None:
        """Remove a sink by ID."""
        _loguru.remove(sink_id)
        if sink_id in self._sink_ids:
            self._sink_ids.remove(sink_id)

    def configure(self, **kwargs) -> None:
        """Configure the logger (patchers, etc.)."""
        _loguru.configure(**kwargs)

    def complete(self) -> None:
        """Wait for all async sinks to complete."""
        _loguru.complete()


# Singleton backend instance
_backend: LoguruBackend | None = None


def get_backend() -> LoguruBackend:
    """Get the singleton backend instance."""
    global _backend
    if _backend is None:
        _backend = LoguruBackend()
    return _backend


# Module-level convenience functions for public API
def add_sink(sink: Any, **kwargs) -> int:
    """Add a sink. Returns sink ID for later removal."""
    return get_backend().add_sink(sink, **kwargs)


def remove_sink(sink_id: int) -> None:
    """Remove a sink by its ID."""
    get_backend().remove_sink(sink_id)


def complete() -> None:
    """Wait for all async sinks to complete. Call on shutdown."""
    get_backend().complete()
