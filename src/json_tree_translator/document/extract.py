"""String extraction and rebuilding: the unit of work for translation.

``extract_strings`` flattens every string leaf of a JSON value into two
parallel lists (strings and their paths).  ``rebuild`` is the inverse: it
writes a list of replacement strings back at those paths, leaving every other
leaf untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from json_tree_translator.types import JsonValue, Path

__all__ = ["ExtractionResult", "extract_strings", "rebuild"]


@dataclass(slots=True)
class ExtractionResult:
    """Parallel lists of string leaves and their paths, in document order.

    Attributes:
        strings: Leaf string values.
        paths:   ``paths[i]`` locates ``strings[i]`` inside the source value.
    """

    strings: list[str] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.strings)

    def __bool__(self) -> bool:
        return bool(self.strings)


def extract_strings(doc: JsonValue) -> ExtractionResult:
    """Collect every ``str`` leaf of ``doc`` with its path.

    Traversal is depth-first: mappings in insertion order, lists in index
    order.  Numbers, booleans and null are skipped.  A bare string document
    yields a single entry with the root path ``()``.
    """
    result = ExtractionResult()
    _extract(doc, (), result)
    return result


def _extract(node: Any, path: Path, result: ExtractionResult) -> None:
    if isinstance(node, str):
        result.strings.append(node)
        result.paths.append(path)
    elif isinstance(node, list):
        for index, item in enumerate(node):
            _extract(item, (*path, str(index)), result)
    elif isinstance(node, dict):
        for key, value in node.items():
            _extract(value, (*path, key), result)


def rebuild(
    doc: JsonValue,
    translated: Sequence[str],
    paths: Sequence[Path],
) -> JsonValue:
    """Return a deep copy of ``doc`` with ``translated[i]`` written at ``paths[i]``.

    Args:
        doc:        The value the paths were extracted from.
        translated: Replacement strings, one per path.
        paths:      Paths as produced by ``extract_strings(doc)``.

    Returns:
        A new JSON value; ``doc`` is not modified.

    Raises:
        ValueError: If ``translated`` and ``paths`` differ in length.
        KeyError / IndexError: If a path does not exist in ``doc``.
    """
    if len(translated) != len(paths):
        msg = (
            f"translated has {len(translated)} entries but paths has {len(paths)}"
        )
        raise ValueError(msg)

    result: Any = copy.deepcopy(doc)
    for path, value in zip(paths, translated, strict=True):
        if not path:
            result = value
            continue
        current = result
        for segment in path[:-1]:
            if isinstance(current, list):
                current = current[int(segment)]
            else:
                current = current[segment]
        last = path[-1]
        if isinstance(current, list):
            current[int(last)] = value
        else:
            current[last] = value
    return result
