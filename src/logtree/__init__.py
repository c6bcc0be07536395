"""Hierarchical loggers on top of loguru.

Public API - users should only import from this module.

Usage:
    import logtree

    # Console output
    logtree.configure_logging(level='info')

    # Named loggers, one per name; level and tracing inherit down the tree
    db = logtree.get_logger('app::db', level='debug')
    db.debug('Query executed')
    logtree.get_logger('app::db::pool').debug(lambda: expensive_summary())

    # Caller file/line/method in every record of a subtree; the tracing
    # format shows them (or set CONFIG_LOGTREE_TRACING=1 for the default)
    logtree.configure_logging(level='info', fmt=logtree.FMT_TRACE)
    logtree.get_logger('app').tracing = True

    # Class-level loggers
    @logtree.enable_logger
    class Worker:
        def run(self):
            self.logger.info('running')
"""
from logtree._backend import add_sink, complete, remove_sink
from logtree._logger import Logger
from logtree.attributes import LoggerAttributes
from logtree.levels import Severity
from logtree.registry import LoggerRegistry, get_logger, get_registry
from logtree.registry import root_logger
from logtree.setup import FMT_SIMPLE, FMT_TRACE, configure_logging
from logtree.setup import enable_logger, set_level

__all__ = [
    # Configuration
    'configure_logging',
    'set_level',
    'FMT_SIMPLE',
    'FMT_TRACE',
    # Logger access
    'get_logger',
    'get_registry',
    'root_logger',
    'Logger',
    'LoggerAttributes',
    'LoggerRegistry',
    'Severity',
    'enable_logger',
    # Sink management
    'add_sink',
    'remove_sink',
    'complete',
]
