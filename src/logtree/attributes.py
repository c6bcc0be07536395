"""Bulk assignment of logger attributes.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logtree._logger import Logger

__all__ = ['UNSET', 'LoggerAttributes', 'apply_attributes']


class _Unset:
    """Marker for an attribute that was not provided (``None`` means inherit)."""

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class LoggerAttributes:
    """Options a logger can be created or reconfigured with.

    A field left as `UNSET` is not touched; set it to None to make the
    logger inherit the value from its parent again.
    """
    level: Any = UNSET
    tracing: bool | None = UNSET

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> LoggerAttributes:
        """Build from a mapping, ignoring keys with no matching field.

        >>> LoggerAttributes.from_mapping({'tracing': True, 'bogus': 1})
        LoggerAttributes(level=UNSET, tracing=True)
        >>> LoggerAttributes.from_mapping(None)
        LoggerAttributes(level=UNSET, tracing=UNSET)
        """
        if not mapping:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{str(k): v for k, v in mapping.items() if str(k) in known})

    def items(self) -> list[tuple[str, Any]]:
        """Provided (name, value) pairs."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)
                if getattr(self, f.name) is not UNSET]


def apply_attributes(logger: Logger, attributes: LoggerAttributes | Mapping[str, Any] | None) -> None:
    """Set each provided attribute on `logger` through its public setters.
    """
    if attributes is None:
        return
    if not isinstance(attributes, LoggerAttributes):
        attributes = LoggerAttributes.from_mapping(attributes)
    for name, value in attributes.items():
        setattr(logger, name, value)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
