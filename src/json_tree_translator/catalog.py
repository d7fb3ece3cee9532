"""TranslationCatalog: per-language namespace documents and their export.

A catalog is loaded from a ``locales/<lang>/<namespace>.json`` tree.  Edits are
addressed by dotted paths whose first segment is the namespace
(``"common.buttons.save"``) and are folded into the previously exported
document with ``build_export`` so untouched namespaces survive re-export.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path as FilePath
from typing import Any

from json_tree_translator.document.io import load_locales, write_export
from json_tree_translator.document.merge import DEFAULT_NAMESPACES, build_export
from json_tree_translator.document.paths import get_at_path, set_at_path
from json_tree_translator.types import MISSING, JsonValue

__all__ = ["SUPPORTED_LANGUAGES", "Language", "TranslationCatalog"]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Language:
    code: str
    name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("nl", "Dutch"),
    Language("pl", "Polish"),
    Language("ru", "Russian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
)


@dataclass
class TranslationCatalog:
    """Translations keyed by language, then namespace.

    Attributes:
        translations: ``{lang: {namespace: document}}``.
        exported:     Previously exported document per language; the base
                      that new edits are merged into.
        namespaces:   Skeleton used when a language has no previous export.
    """

    translations: dict[str, dict[str, Any]] = field(default_factory=dict)
    exported: dict[str, dict[str, Any]] = field(default_factory=dict)
    namespaces: tuple[str, ...] = DEFAULT_NAMESPACES

    @classmethod
    def from_directory(cls, root: str | FilePath) -> TranslationCatalog:
        """Load every locale below ``root``.

        A ``translation.json`` namespace file is taken as the language's
        previous export rather than as a namespace of its own.
        """
        catalog = cls()
        for lang, namespaces in load_locales(root).items():
            previous = namespaces.pop("translation", None)
            if isinstance(previous, dict):
                catalog.exported[lang] = previous
            catalog.translations[lang] = namespaces
        return catalog

    @property
    def languages(self) -> list[str]:
        return list(self.translations)

    def get(self, lang: str, dotted_path: str) -> JsonValue | None:
        """Return the value at ``dotted_path`` for ``lang``, or None when absent."""
        value = get_at_path(self.translations.get(lang, {}), dotted_path.split("."))
        return None if value is MISSING else value

    def add_translation(
        self, dotted_path: str, values: Mapping[str, JsonValue]
    ) -> list[str]:
        """Store ``values[lang]`` at ``dotted_path`` for every known language.

        Languages that are not in the catalog are skipped; missing
        intermediate levels are created.

        Returns:
            The languages that were updated.
        """
        segments = dotted_path.split(".")
        updated = []
        for lang, value in values.items():
            if lang not in self.translations:
                log.debug("Skipping unknown language %s for %s", lang, dotted_path)
                continue
            self.translations[lang] = set_at_path(  # type: ignore[assignment]
                self.translations[lang], segments, value
            )
            updated.append(lang)
        return updated

    def export_document(
        self, lang: str, edits: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Build the export for ``lang``.

        Args:
            lang:  Language code.
            edits: Dotted-path edits to apply; defaults to the catalog's own
                   namespaces for ``lang``.

        Every key below a namespace is split on ``.`` (see ``unflatten``),
        so a stored key that itself contains a dot, such as
        ``{"common": {"a.b": "x"}}``, is exported nested as
        ``{"common": {"a": {"b": "x"}}}``.
        """
        changes = self.translations.get(lang, {}) if edits is None else edits
        return build_export(self.exported.get(lang), changes, self.namespaces)

    def export(
        self,
        lang: str,
        directory: str | FilePath,
        edits: Mapping[str, Any] | None = None,
    ) -> FilePath:
        """Write ``translation.<lang>.json`` and remember it as the new base."""
        document = self.export_document(lang, edits)
        path = write_export(document, lang, directory)
        self.exported[lang] = document
        return path

    def missing_languages(
        self,
        values: Mapping[str, Any],
        languages: Iterable[str] | None = None,
    ) -> list[str]:
        """Return the languages without a non-empty value in ``values``."""
        wanted = self.languages if languages is None else list(languages)
        return [lang for lang in wanted if not values.get(lang)]
