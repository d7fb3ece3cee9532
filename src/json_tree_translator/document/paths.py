"""Path-addressed access to nested JSON values.

All three operations treat the document as immutable.  Writes copy only the
containers along the addressed path (one shallow copy per level); every
container off the path is shared with the input.  This is safe because no
operation in this package mutates a JSON value in place.

List levels are addressed by stringified index ("0", "1", ...).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_tree_translator.errors import PathError
from json_tree_translator.types import MISSING, JsonValue, Missing, Path, as_path

__all__ = ["delete_at_path", "get_at_path", "has_path", "set_at_path"]


def _parse_index(segment: str) -> int | None:
    """Return ``segment`` as a list index, or None if it is not a plain decimal."""
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def get_at_path(doc: JsonValue, path: Iterable[object]) -> JsonValue | Missing:
    """Return the value at ``path`` or ``MISSING`` when it does not exist.

    Absence is a value, not an error: a missing key, an out-of-range index,
    a non-index segment against a list, or any segment that descends into a
    scalar all yield ``MISSING``.

    Args:
        doc:  The JSON value to read from.
        path: Sequence of segments; empty means the root.

    Returns:
        The addressed value (possibly ``None`` for JSON null) or ``MISSING``.
    """
    current: Any = doc
    for segment in as_path(path):
        if isinstance(current, dict):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif isinstance(current, list):
            index = _parse_index(segment)
            if index is None or index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current


def has_path(doc: JsonValue, path: Iterable[object]) -> bool:
    """Return True if ``path`` addresses an existing value (JSON null counts)."""
    return get_at_path(doc, path) is not MISSING


def set_at_path(doc: JsonValue, path: Iterable[object], value: JsonValue) -> JsonValue:
    """Return a new document with ``value`` stored at ``path``.

    An empty path replaces the whole document.  Missing intermediate levels,
    and intermediate scalars, are replaced by empty mappings.  In a list the
    segment must be an existing index or exactly ``len(list)`` (append).

    Raises:
        PathError: If a list level is addressed by a non-index segment or an
            index past the end of the list.
    """
    segments = as_path(path)
    if not segments:
        return value
    return _set(doc, segments, value)


def _set(node: Any, segments: Path, value: JsonValue) -> JsonValue:
    head, rest = segments[0], segments[1:]

    if isinstance(node, list):
        index = _parse_index(head)
        if index is None or index > len(node):
            msg = f"cannot set {head!r} on a list of length {len(node)}"
            raise PathError(msg)
        items = list(node)
        child = items[index] if index < len(items) else MISSING
        new_child = _set(child, rest, value) if rest else value
        if index == len(items):
            items.append(new_child)
        else:
            items[index] = new_child
        return items

    mapping = dict(node) if isinstance(node, dict) else {}
    if rest:
        mapping[head] = _set(mapping.get(head, MISSING), rest, value)
    else:
        mapping[head] = value
    return mapping


def delete_at_path(doc: JsonValue, path: Iterable[object]) -> JsonValue:
    """Return a new document with the key (or list element) at ``path`` removed.

    The key disappears; it is not set to null.  Removing a list element
    shifts the later elements down by one.  The root cannot be deleted: an
    empty path returns ``doc`` itself, as does a path that does not exist.
    """
    segments = as_path(path)
    if not segments or get_at_path(doc, segments) is MISSING:
        return doc
    return _delete(doc, segments)


def _delete(node: Any, segments: Path) -> JsonValue:
    # Only reached for paths known to exist.
    head, rest = segments[0], segments[1:]

    if isinstance(node, list):
        index = int(head)
        items = list(node)
        if rest:
            items[index] = _delete(items[index], rest)
        else:
            del items[index]
        return items

    mapping = dict(node)
    if rest:
        mapping[head] = _delete(mapping[head], rest)
    else:
        del mapping[head]
    return mapping
