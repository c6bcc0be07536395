"""Conversion of log call arguments into a (message, cause) pair.
"""
from __future__ import annotations

import traceback
from typing import Any

__all__ = ['normalize', 'unwrap_cause']


def unwrap_cause(exc: BaseException) -> BaseException | None:
    """Underlying exception of an explicitly chained one (``raise X from Y``).
    """
    cause = getattr(exc, '__cause__', None)
    if isinstance(cause, BaseException):
        return cause
    return None


def _render(exc: BaseException) -> str:
    """Description followed by the exception's own traceback."""
    if getattr(exc, '__cause__', None) is not None and unwrap_cause(exc) is None:
        # traceback refuses a malformed cause, format the frames alone
        lines = [*traceback.format_tb(exc.__traceback__), f'{type(exc).__name__}: {exc}']
    else:
        lines = traceback.format_exception(type(exc), exc, exc.__traceback__, chain=False)
    return f'{exc}\n{"".join(lines).rstrip()}'


def normalize(argument: Any) -> tuple[str, BaseException | None]:
    """Turn a log argument into a displayable message and optional cause.

    Plain values are stringified. An exception is rendered with its
    traceback into the message. When the exception wraps another one, the
    wrapped exception is returned as the cause so the backend can render its
    traceback natively.

    >>> normalize(7)
    ('7', None)
    """
    if not isinstance(argument, BaseException):
        return str(argument), None
    return _render(argument), unwrap_cause(argument)
