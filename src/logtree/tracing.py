"""Caller metadata scoped into the backend context.
"""
from __future__ import annotations

import inspect
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from logtree._backend import ContextStore

__all__ = ['CONTEXT_KEYS', 'call_site', 'caller_context']

CONTEXT_KEYS = ('file_name', 'line_number', 'method_name')


def call_site(internal: set[str] | frozenset[str]) -> tuple[FrameType | None, int]:
    """Find the first frame outside the `internal` source files.

    Returns the frame and its distance from the caller of this function,
    which is what the backend expects as `depth`.
    """
    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None
    depth = 0
    while frame is not None and frame.f_code.co_filename in internal:
        frame = frame.f_back
        depth += 1
    return frame, depth


def _metadata(frame: FrameType | None) -> dict[str, str]:
    if frame is None:
        return dict.fromkeys(CONTEXT_KEYS, '')
    return {
        'file_name': frame.f_code.co_filename,
        'line_number': str(frame.f_lineno),
        'method_name': frame.f_code.co_name,
    }


@contextmanager
def caller_context(store: ContextStore, frame: FrameType | None) -> Iterator[None]:
    """Put caller file, line and method into `store` for the block.

    A `frame` of None puts blank values, so an outer scope's values never
    show up in this call. Prior values are restored on exit, whether the
    block raises or not.
    """
    previous = {key: store.get(key) for key in CONTEXT_KEYS}
    try:
        for key, value in _metadata(frame).items():
            store.put(key, value)
        yield
    finally:
        for key, value in previous.items():
            if value is None:
                store.remove(key)
            else:
                store.put(key, value)
