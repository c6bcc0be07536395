"""Logging configuration and host helpers.
"""
from __future__ import annotations

import sys
from typing import Any, TextIO

from logtree import config as config_log
from logtree._backend import fill_extra, get_backend
from logtree._logger import Logger
from logtree.naming import name_for
from logtree.registry import LoggerRegistry, get_registry

__all__ = [
    'FMT_SIMPLE',
    'FMT_TRACE',
    'configure_logging',
    'enable_logger',
    'set_level',
]


# Format strings for loguru
# {extra[logger_name]} is the channel name (e.g. 'python.app.db')
# {extra[file_name]} etc. are filled only while tracing is on
FMT_SIMPLE = '<level>{level.name:<8} {time:YYYY-MM-DD HH:mm:ss,SSS} {extra[logger_name]} {line} {message}</level>'
FMT_TRACE = '<level>{level.name:<8} {time:YYYY-MM-DD HH:mm:ss,SSS} {extra[logger_name]} [{extra[file_name]}:{extra[line_number]} {extra[method_name]}] {message}</level>'


def configure_logging(
    level: str | int | None = None,
    fmt: str | None = None,
    sink: TextIO | Any = None,
    registry: LoggerRegistry | None = None,
    **sink_kwargs,
) -> int:
    """Reset loguru and install a single console sink.

    Level filtering is done by the loggers, so the sink itself accepts
    everything down to TRACE. A patcher fills the context keys on records
    logged through loguru directly; it replaces any patcher set before.

    Args:
        level: Level for the root logger (left alone if None)
        fmt: Format string; picks a tracing-aware one by default
        sink: Destination, stderr by default
        registry: Registry whose root gets `level`
        **sink_kwargs: Extra arguments for loguru's ``add``

    Returns
        Sink ID
    """
    backend = get_backend()
    backend.reset()
    backend.configure(patcher=fill_extra)

    if fmt is None:
        fmt = FMT_TRACE if config_log.root.tracing else FMT_SIMPLE

    options = {
        'level': 'TRACE',
        'format': fmt,
        'colorize': None,
        'backtrace': False,
        'diagnose': config_log.log.enable_diagnose,
    }
    options.update(sink_kwargs)
    sink_id = backend.add_sink(sink or sys.stderr, **options)

    if level is not None:
        set_level(level, registry)
    return sink_id


def set_level(level: str | int | None, registry: LoggerRegistry | None = None) -> None:
    """Set the root logger's level; None restores the default."""
    if registry is None:
        registry = get_registry()
    registry.root().level = level


class _LoggerDescriptor:
    """Class and instance access to the logger named after the class."""

    def __init__(self, registry: LoggerRegistry | None = None, attributes: dict | None = None):
        self._registry = registry
        self._attributes = attributes or None

    def __get__(self, instance: Any, owner: type) -> Logger:
        registry = self._registry
        if registry is None:
            registry = get_registry()
        return registry.get(name_for(owner), self._attributes)


def enable_logger(cls: type | None = None, *, registry: LoggerRegistry | None = None,
                  **attributes: Any) -> Any:
    """Class decorator adding a ``logger`` attribute to a class.

    The logger is named after the class (``module.QualName``) and is
    available from the class and its instances.

        >>> @enable_logger  # doctest: +SKIP
        ... class Worker:
        ...     def run(self):
        ...         self.logger.info('running')

    Keyword arguments are applied as attributes when the logger is created:
    ``@enable_logger(level='debug', tracing=True)``.
    """
    def wrapper(klass: type) -> type:
        klass.logger = _LoggerDescriptor(registry, attributes)
        return klass
    if cls is None:
        return wrapper
    return wrapper(cls)
