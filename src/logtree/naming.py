"""Mapping of hierarchical identifiers onto backend channel names.

Identifiers may use ``::`` (``A::B::C``) or Python's dotted form
(``pkg.mod.Class``); both canonicalise to dot-separated segments.
"""
from __future__ import annotations

from typing import Any

from logtree import config as config_log

__all__ = ['SEPARATOR', 'canonical_name', 'name_for', 'parent_of', 'to_sink_name']

SEPARATOR = '.'
_ALT_SEPARATOR = '::'


def canonical_name(identifier: str | None) -> str:
    """Normalize separators; the root is the empty string.

    >>> canonical_name('A::B::C')
    'A.B.C'
    >>> canonical_name(None)
    ''
    """
    if not identifier:
        return ''
    return identifier.strip().replace(_ALT_SEPARATOR, SEPARATOR).strip(SEPARATOR)


def to_sink_name(identifier: str | None, namespace: str | None = None) -> str:
    """Prefix the canonical name with the backend namespace tag.

    >>> to_sink_name('A::B::C', namespace='python')
    'python.A.B.C'
    >>> to_sink_name('', namespace='python')
    'python'
    """
    namespace = namespace or config_log.naming.namespace
    name = canonical_name(identifier)
    return f'{namespace}{SEPARATOR}{name}' if name else namespace


def parent_of(identifier: str | None) -> str | None:
    """Drop the last segment, or None for a top-level or root name.

    >>> parent_of('A::B::C')
    'A.B'
    >>> parent_of('A') is None
    True
    """
    name = canonical_name(identifier)
    if SEPARATOR not in name:
        return None
    return name.rsplit(SEPARATOR, 1)[0]


def name_for(obj: Any) -> str:
    """Hierarchical name for a class, function or module."""
    qualname = getattr(obj, '__qualname__', None)
    if qualname is None:
        return canonical_name(getattr(obj, '__name__', None) or type(obj).__qualname__)
    module = getattr(obj, '__module__', None)
    if not module or module == '__main__':
        return canonical_name(qualname)
    return canonical_name(f'{module}.{qualname}')


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
