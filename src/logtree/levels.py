"""Severities and level coercion.
"""
from __future__ import annotations

import logging
from enum import StrEnum

from logtree._backend import level_no

__all__ = ['Severity', 'to_levelno', 'level_name']


class Severity(StrEnum):
    """Severities understood by the facade, valued by their loguru names."""
    TRACE = 'TRACE'
    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARN = 'WARNING'
    ERROR = 'ERROR'
    FATAL = 'CRITICAL'


# Spellings accepted on top of the loguru level names
_ALIASES = {
    'WARN': 'WARNING',
    'FATAL': 'CRITICAL',
}


def to_levelno(level: Severity | str | int | None) -> int | None:
    """Coerce `level` into a numeric level.

    Accepts a `Severity`, a level name in any case ('warn' and 'fatal'
    included), a stdlib ``logging`` constant or any int. ``None`` passes
    through and means "inherit".

    >>> to_levelno('fatal') == logging.FATAL
    True
    >>> to_levelno(logging.DEBUG)
    10
    >>> to_levelno(None) is None
    True
    """
    if level is None:
        return None
    if isinstance(level, bool):
        raise TypeError(f'Invalid level: {level!r}')
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        return level_no(_ALIASES.get(name, name))
    raise TypeError(f'Invalid level: {level!r}')


def level_name(levelno: int) -> str:
    """Best-effort name for a numeric level."""
    for severity in Severity:
        if level_no(severity) == levelno:
            return severity.value
    return logging.getLevelName(levelno)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
