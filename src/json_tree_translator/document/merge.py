"""StructuralMerger: deep-merge sparse changes into a base document.

The merge is keyed on the *changes* document only.  Keys that exist only in
the base survive untouched, so re-exporting a partially translated document
never drops namespaces or strings that were not part of the edit.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from json_tree_translator.document.paths import set_at_path
from json_tree_translator.types import JsonValue

__all__ = ["DEFAULT_NAMESPACES", "build_export", "merge", "unflatten"]

# Namespaces an export starts from when there is no previous export.
DEFAULT_NAMESPACES: tuple[str, ...] = (
    "common",
    "psp",
    "succession_profile",
    "okr",
    "appraisal",
)


def merge(base: JsonValue, changes: JsonValue) -> JsonValue:
    """Return ``base`` with ``changes`` deep-merged on top.

    For every key in ``changes``: when both sides hold a mapping the merge
    recurses, otherwise the value from ``changes`` wins (or is inserted).
    Lists and scalars are never merged element-wise.  When either argument
    is not a mapping, ``changes`` replaces ``base`` outright.

    Neither input is mutated; untouched base sub-trees are shared.
    """
    if not isinstance(base, dict) or not isinstance(changes, dict):
        return changes
    result = dict(base)
    for key, value in changes.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge(current, value)
        else:
            result[key] = value
    return result


def unflatten(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Fold dotted-path edits into a nested document.

    ``{"common.greeting": "Hi"}`` becomes ``{"common": {"greeting": "Hi"}}``.
    A mapping value is treated as one more level of sub-keys, so
    ``{"common": {"a.b": "x"}}`` becomes ``{"common": {"a": {"b": "x"}}}``.
    Later entries win over earlier ones when they address the same leaf.
    """
    nested: dict[str, Any] = {}
    for dotted, value in flat.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                nested = _fold(nested, f"{dotted}.{sub_key}", sub_value)
        else:
            nested = _fold(nested, dotted, value)
    return nested


def _fold(target: dict[str, Any], dotted: str, value: Any) -> dict[str, Any]:
    nested = set_at_path({}, dotted.split("."), value)
    return merge(target, nested)  # type: ignore[return-value]


def build_export(
    base: JsonValue | None,
    changes: Mapping[str, Any],
    namespaces: Iterable[str] = DEFAULT_NAMESPACES,
) -> dict[str, Any]:
    """Assemble the document to export for one language.

    Args:
        base:       The previously exported document, or None to start from
                    a skeleton of empty ``namespaces``.
        changes:    Dotted-path edits (see ``unflatten``).
        namespaces: Top-level keys of the skeleton used when ``base`` is None.

    Returns:
        ``merge(base, unflatten(changes))`` where every top-level key of the
        base is guaranteed to be present, as an empty mapping if it was falsy.
    """
    if not isinstance(base, dict):
        base = {namespace: {} for namespace in namespaces}
    result: dict[str, Any] = merge(base, unflatten(changes))  # type: ignore[assignment]
    for key in base:
        if not result.get(key):
            result[key] = {}
    return result
