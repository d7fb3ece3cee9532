"""Document import/export: parsing, pretty-printing and locale discovery."""

from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import Any, Literal

from json_tree_translator.errors import ParseError
from json_tree_translator.types import JsonValue

__all__ = [
    "dump_document",
    "export_filename",
    "load_locales",
    "parse_document",
    "write_export",
]

log = logging.getLogger(__name__)

ExportStyle = Literal["dot", "underscore"]


def parse_document(text: str | bytes) -> JsonValue:
    """Decode raw text as a JSON document.

    Raises:
        ParseError: With the decoder's own message, line and column when the
            text is not valid JSON.  There is no partial recovery.
    """
    try:
        return json.loads(text)  # type: ignore[no-any-return]
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc), lineno=exc.lineno, colno=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(str(exc)) from exc


def dump_document(doc: JsonValue) -> str:
    """Serialize ``doc`` pretty-printed with 2-space indentation."""
    return json.dumps(doc, indent=2, ensure_ascii=False)


def export_filename(lang: str, style: ExportStyle = "dot") -> str:
    """Return ``translation.<lang>.json`` (dot) or ``translation_<lang>.json``."""
    if style == "dot":
        return f"translation.{lang}.json"
    if style == "underscore":
        return f"translation_{lang}.json"
    msg = f"unknown export style {style!r}"
    raise ValueError(msg)


def write_export(
    doc: JsonValue,
    lang: str,
    directory: str | FilePath,
    style: ExportStyle = "dot",
) -> FilePath:
    """Write ``doc`` to ``directory`` under the export filename for ``lang``.

    Returns:
        The path of the written file.
    """
    target = FilePath(directory) / export_filename(lang, style)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_document(doc) + "\n", encoding="utf-8")
    log.info("Exported %s translation to %s", lang, target)
    return target


def load_locales(root: str | FilePath) -> dict[str, dict[str, Any]]:
    """Load every ``locales/<lang>/<namespace>.json`` file below ``root``.

    Args:
        root: Directory to scan recursively.

    Returns:
        ``{lang: {namespace: document}}`` where namespace is the file stem.

    Raises:
        ParseError: If a JSON file is not inside a ``locales/<lang>/``
            directory, or does not contain valid JSON.
    """
    root = FilePath(root)
    translations: dict[str, dict[str, Any]] = {}
    for file in sorted(root.rglob("*.json")):
        parts = file.relative_to(root).parts
        try:
            locale_index = parts.index("locales")
        except ValueError:
            locale_index = -1
        # locales/<lang>/<namespace>.json needs two parts after "locales"
        if locale_index == -1 or len(parts) < locale_index + 3:
            raise ParseError(f"Invalid file structure: {file}")
        lang = parts[locale_index + 1]
        try:
            content = parse_document(file.read_bytes())
        except ParseError as exc:
            raise ParseError(f"{file}: {exc}", exc.lineno, exc.colno) from exc
        translations.setdefault(lang, {})[file.stem] = content
    log.debug("Loaded locales %s from %s", sorted(translations), root)
    return translations
