"""Registry of loggers, one instance per canonical name.
"""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from logtree import config as config_log
from logtree._backend import Channel
from logtree._logger import Logger
from logtree.attributes import LoggerAttributes, apply_attributes
from logtree.levels import to_levelno
from logtree.naming import canonical_name, parent_of, to_sink_name

__all__ = ['LoggerRegistry', 'get_logger', 'get_registry', 'root_logger']


class LoggerRegistry:
    """Owns every logger it creates, for as long as it lives.

    Asking twice for the same canonical name returns the same `Logger`.
    Creating a logger creates its missing ancestors first, so every logger
    but the root has a parent.

    Args:
        namespace: Prefix for backend channel names (see `to_sink_name`)
        default_level: Level of the root logger when it sets none
        default_tracing: Tracing of the root logger when it sets none
        channel_factory: Callable creating the backend channel for a name
    """

    def __init__(
        self,
        namespace: str | None = None,
        default_level: str | int | None = None,
        default_tracing: bool | None = None,
        channel_factory: Callable[[str], Channel] | None = None,
    ):
        self.namespace = namespace or config_log.naming.namespace
        if default_level is None:
            default_level = config_log.root.level
        self.default_level = to_levelno(default_level)
        if default_tracing is None:
            default_tracing = config_log.root.tracing
        self.default_tracing = bool(default_tracing)
        # Channels belong to this registry; other registries never see them
        self._channel_factory = channel_factory or Channel
        self._loggers: dict[str, Logger] = {}
        # Reentrant: creating a logger creates its parent under the same lock
        self._lock = threading.RLock()

    def get(self, name: str | None = '', attributes: LoggerAttributes | Mapping[str, Any] | None = None,
            **kwargs) -> Logger:
        """Get or create the logger for `name`.

        Attributes (a mapping, `LoggerAttributes` or keyword arguments) are
        only applied when the logger is created; an existing logger is
        returned unchanged.
        """
        key = canonical_name(name)
        with self._lock:
            logger = self._loggers.get(key)
            if logger is not None:
                return logger
            parent_name = None
            if key:
                parent_name = parent_of(key) or ''
                self.get(parent_name)
            channel = self._channel_factory(to_sink_name(key, self.namespace))
            logger = Logger(key, channel, self, parent_name)
            apply_attributes(logger, attributes)
            apply_attributes(logger, kwargs or None)
            self._loggers[key] = logger
            return logger

    def lookup(self, name: str | None) -> Logger:
        """Same logger `get` returns for `name`, without attributes."""
        return self.get(name)

    def find(self, name: str) -> Logger | None:
        """Existing logger for canonical `name`, or None. Takes no lock."""
        return self._loggers.get(name)

    __getitem__ = lookup

    def root(self) -> Logger:
        return self.get('')

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._loggers)

    def __contains__(self, name: str | None) -> bool:
        return canonical_name(name) in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def __iter__(self) -> Iterator[Logger]:
        with self._lock:
            return iter(list(self._loggers.values()))


# Process-wide registry instance
_registry: LoggerRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Get the process-wide registry (lazy initialization)."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LoggerRegistry()
    return _registry


def get_logger(name: str | None = '', attributes: LoggerAttributes | Mapping[str, Any] | None = None,
               **kwargs) -> Logger:
    """Get a logger from the process-wide registry.

    Args:
        name: Hierarchical name, ``A::B`` or ``a.b``
        attributes: Mapping or `LoggerAttributes` applied on creation
        **kwargs: Attributes as keyword arguments (``level``, ``tracing``)

    Returns
        Logger instance

    Examples
        >>> log = get_logger('mymodule', level='debug')
        >>> log is get_logger('mymodule')
        True
    """
    return get_registry().get(name, attributes, **kwargs)


def root_logger() -> Logger:
    """Root logger of the process-wide registry."""
    return get_registry().root()
