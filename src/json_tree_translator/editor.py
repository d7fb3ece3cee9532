"""DocumentEditor: node-level editing of the source document.

Every edit goes through the path accessor, replaces the store's document as
a whole, and re-projects the tree (keeping collapsed nodes collapsed).
Adding or editing enforces the uniqueness rules of the translation files:
a key must not exist anywhere in the source document (nor at the same level
of the target document when global validation is on), and a string value
must not already appear anywhere in the source document.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable
from pathlib import Path as FilePath
from typing import Any

from json_tree_translator.batch import BatchTranslator
from json_tree_translator.document.io import dump_document, parse_document, write_export
from json_tree_translator.document.paths import delete_at_path, get_at_path, set_at_path
from json_tree_translator.errors import DuplicateEntryError, EditorError, ParseError
from json_tree_translator.job import TranslationJob, run_job, start_job
from json_tree_translator.store import DocumentStore
from json_tree_translator.tree import TreeNode, TreeProjector
from json_tree_translator.types import MISSING, JsonValue, Path, as_path

__all__ = [
    "DocumentEditor",
    "format_key",
    "key_exists_anywhere",
    "key_exists_at",
    "value_exists_anywhere",
]

log = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def format_key(key: str) -> str:
    """Normalise a user-entered key: trimmed, lowercased, spaces to ``_``."""
    return _WHITESPACE.sub("_", key.strip().lower())


def key_exists_at(doc: JsonValue, parent: Iterable[object], key: str) -> bool:
    """Return True if the mapping at ``parent`` already has ``key``."""
    container = get_at_path(doc, parent)
    return isinstance(container, dict) and key in container


def key_exists_anywhere(doc: JsonValue, key: str) -> bool:
    """Return True if any mapping inside ``doc`` has ``key``."""
    if isinstance(doc, dict):
        return key in doc or any(key_exists_anywhere(v, key) for v in doc.values())
    if isinstance(doc, list):
        return any(key_exists_anywhere(item, key) for item in doc)
    return False


def value_exists_anywhere(doc: JsonValue, value: str) -> bool:
    """Return True if the string ``value`` is a leaf anywhere inside ``doc``."""
    if isinstance(doc, str):
        return doc == value
    if isinstance(doc, dict):
        return any(value_exists_anywhere(v, value) for v in doc.values())
    if isinstance(doc, list):
        return any(value_exists_anywhere(item, value) for item in doc)
    return False


class DocumentEditor:
    """Edits the store's source document and keeps its tree view current.

    Args:
        store:     The session's document pair.
        projector: Tree projector.  Defaults to ``TreeProjector()``.
    """

    def __init__(
        self, store: DocumentStore, projector: TreeProjector | None = None
    ) -> None:
        self._store = store
        self._projector = projector if projector is not None else TreeProjector()
        self.tree: TreeNode | None = None
        self.selected_path: Path = ()
        self.job: TranslationJob | None = None
        self.refresh()

    @property
    def store(self) -> DocumentStore:
        return self._store

    def _content(self) -> JsonValue:
        source = self._store.source
        if source is None:
            raise EditorError("no source file loaded")
        return source.content

    def _replace(self, content: JsonValue) -> None:
        self._store.update_content("source", content)
        self.refresh()

    def refresh(self) -> TreeNode | None:
        """Re-project the tree from the store's current source document."""
        source = self._store.source
        if source is None:
            self.tree = None
        else:
            self.tree = self._projector.project(source.content, previous=self.tree)
        return self.tree

    # ------------------------------------------------------------------
    # Tree operations
    # ------------------------------------------------------------------

    def toggle(self, path: Iterable[object]) -> TreeNode:
        """Expand or collapse the container at ``path``."""
        if self.tree is None:
            raise EditorError("no source file loaded")
        self.tree = self._projector.toggle(self.tree, path)
        return self.tree

    def add(
        self,
        parent: Iterable[object],
        key: str,
        value: str = "",
        as_object: bool = False,
        validate_with_global: bool = False,
    ) -> Path:
        """Add a child under ``parent``: an empty object or a string value.

        Returns:
            The path of the new node.

        Raises:
            EditorError: If ``parent`` is not an object, or the key is empty
                after formatting.
            DuplicateEntryError: If the key or value violates uniqueness.
        """
        content = self._content()
        parent_path = as_path(parent)
        if not isinstance(get_at_path(content, parent_path), dict):
            raise EditorError(
                f"cannot add under {'/'.join(parent_path) or 'root'}: not an object"
            )
        formatted = format_key(key)
        if not formatted:
            raise EditorError("key must not be empty")

        target = self._store.target
        if validate_with_global and target is not None:
            if key_exists_at(target.content, parent_path, formatted):
                raise DuplicateEntryError(
                    f"key {formatted!r} already exists in the global file"
                )
        if key_exists_anywhere(content, formatted):
            raise DuplicateEntryError(
                f"key {formatted!r} already exists somewhere in the current file"
            )
        if not as_object and value_exists_anywhere(content, value):
            raise DuplicateEntryError(
                f"value {value!r} already exists somewhere in the current file"
            )

        new_path = (*parent_path, formatted)
        self._replace(set_at_path(content, new_path, {} if as_object else value))
        log.debug("Added %s", "/".join(new_path))
        return new_path

    def edit(self, path: Iterable[object], value: str) -> None:
        """Replace the leaf at ``path`` with ``value``.

        Raises:
            EditorError: If there is no leaf at ``path``.
            DuplicateEntryError: If ``value`` already exists elsewhere.
        """
        content = self._content()
        node_path = as_path(path)
        current = get_at_path(content, node_path)
        if current is MISSING or isinstance(current, (dict, list)):
            raise EditorError(f"no value to edit at {'/'.join(node_path) or 'root'}")
        if current == value:
            return
        if value_exists_anywhere(content, value):
            raise DuplicateEntryError(
                f"value {value!r} already exists somewhere in the current file"
            )
        self._replace(set_at_path(content, node_path, value))

    def delete(self, path: Iterable[object]) -> None:
        """Remove the node at ``path``; the root cannot be deleted."""
        self._replace(delete_at_path(self._content(), path))

    def select(self, path: Iterable[object]) -> Path:
        """Select the subtree that ``preview`` and ``translate`` act on."""
        self.selected_path = as_path(path)
        return self.selected_path

    def preview(self, path: Iterable[object] | None = None) -> str:
        """Return the pretty-printed JSON of the node at ``path`` (or the selection)."""
        node_path = self.selected_path if path is None else as_path(path)
        value = get_at_path(self._content(), node_path)
        if value is MISSING:
            raise EditorError(f"nothing at {'/'.join(node_path) or 'root'}")
        return dump_document(value)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    async def translate(
        self,
        languages: Iterable[str],
        batch: BatchTranslator,
        path: Iterable[object] | None = None,
        source_lang: str = "en",
        cancel_event: asyncio.Event | None = None,
    ) -> TranslationJob:
        """Translate the subtree at ``path`` (or the selection) into ``languages``.

        The job is available as ``self.job`` while it runs.

        Raises:
            EditorError: If there is nothing at the path, or no language.
        """
        node_path = self.selected_path if path is None else as_path(path)
        content: Any = get_at_path(self._content(), node_path)
        if content is MISSING or content is None:
            where = "/".join(node_path) or "root"
            raise EditorError(f"nothing to translate at {where}")
        langs = list(languages)
        if not langs:
            raise EditorError("select at least one language")

        self.job = start_job(content, langs)
        self._store.is_processing = True
        try:
            await run_job(self.job, content, batch, source_lang, cancel_event)
        finally:
            self._store.is_processing = False
        self._store.error = self.job.error
        return self.job

    def export_result(self, lang: str, directory: str | FilePath) -> FilePath:
        """Write the last job's result for ``lang`` as ``translation_<lang>.json``.

        Raises:
            EditorError: If there is no result for ``lang`` or it is an error
                message rather than a document.
        """
        if self.job is None or lang not in self.job.results:
            raise EditorError(f"no translation result for {lang!r}")
        try:
            doc = parse_document(self.job.results[lang])
        except ParseError as exc:
            raise EditorError(f"result for {lang!r} is not a document: {exc}") from exc
        return write_export(doc, lang, directory, style="underscore")
