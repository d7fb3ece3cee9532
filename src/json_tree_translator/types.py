"""Shared type aliases and the ``MISSING`` sentinel."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

__all__ = ["MISSING", "JsonValue", "Missing", "Path", "as_path"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# A location inside a JsonValue; () is the root.  Array indices are stringified.
Path = tuple[str, ...]


class Missing(Enum):
    """Marker for "no value here", distinct from JSON ``null`` (``None``)."""

    MISSING = "MISSING"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING


def as_path(segments: Iterable[object]) -> Path:
    """Normalise any iterable of segments into a ``Path`` tuple of strings.

    Integer indices are accepted for convenience and stringified.
    """
    return tuple(str(segment) for segment in segments)
