"""DocumentStore: the session's source/target document pair.

An explicit context object passed to whichever component needs the documents
(editor, exporter).  Documents are replaced whole on every edit; the store
never mutates a JSON value in place.  Only the file pair is persisted by
``save``/``load``; processing flags and errors are session state.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path as FilePath
from typing import Any, Literal

from json_tree_translator.document.io import parse_document
from json_tree_translator.errors import ParseError
from json_tree_translator.types import JsonValue

__all__ = ["DocumentStore", "FileKind", "JsonFile"]

log = logging.getLogger(__name__)

FileKind = Literal["source", "target"]
_KINDS: tuple[FileKind, ...] = ("source", "target")


@dataclass(frozen=True, slots=True)
class JsonFile:
    """A named JSON document.

    Attributes:
        name:          Original file name.
        content:       The parsed document.
        last_modified: Modification time in milliseconds since the epoch.
    """

    name: str
    content: JsonValue
    last_modified: int = field(default_factory=lambda: int(time.time() * 1000))

    @classmethod
    def from_text(cls, name: str, text: str | bytes) -> JsonFile:
        """Parse ``text`` into a JsonFile.

        Raises:
            ParseError: If ``text`` is not valid JSON.
        """
        return cls(name=name, content=parse_document(text))

    @classmethod
    def from_path(cls, path: str | FilePath) -> JsonFile:
        """Read and parse a JSON file from disk."""
        path = FilePath(path)
        return cls(
            name=path.name,
            content=parse_document(path.read_bytes()),
            last_modified=int(path.stat().st_mtime * 1000),
        )

    def with_content(self, content: JsonValue) -> JsonFile:
        """Return a copy holding ``content`` with a fresh modification time."""
        return replace(self, content=content, last_modified=int(time.time() * 1000))


class DocumentStore:
    """Holds the source and target documents for one editing session.

    Example::

        store = DocumentStore()
        store.set_file("source", JsonFile.from_path("en/translation.json"))
        store.get_file("source").content
    """

    def __init__(self) -> None:
        self._files: dict[FileKind, JsonFile | None] = dict.fromkeys(_KINDS)
        self.is_processing = False
        self.error: str | None = None

    def __repr__(self) -> str:
        names = {kind: f.name if f else None for kind, f in self._files.items()}
        return f"DocumentStore(files={names!r})"

    @property
    def source(self) -> JsonFile | None:
        return self._files["source"]

    @property
    def target(self) -> JsonFile | None:
        return self._files["target"]

    def get_file(self, kind: FileKind) -> JsonFile | None:
        """Return the file in slot ``kind``."""
        _check_kind(kind)
        return self._files[kind]

    def set_file(self, kind: FileKind, file: JsonFile | None) -> None:
        """Replace the file in slot ``kind`` and clear any recorded error."""
        _check_kind(kind)
        self._files[kind] = file
        self.error = None

    def update_content(self, kind: FileKind, content: JsonValue) -> JsonFile:
        """Swap the document of slot ``kind`` for ``content``.

        Raises:
            LookupError: If the slot is empty.
        """
        current = self.get_file(kind)
        if current is None:
            msg = f"no {kind} file loaded"
            raise LookupError(msg)
        updated = current.with_content(content)
        self.set_file(kind, updated)
        return updated

    def reset(self) -> None:
        """Forget both files and any recorded error."""
        self._files = dict.fromkeys(_KINDS)
        self.error = None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: str | FilePath) -> None:
        """Persist the file pair as JSON to ``path``."""
        payload = {
            "files": {
                kind: asdict(file) if file is not None else None
                for kind, file in self._files.items()
            }
        }
        FilePath(path).write_text(
            json.dumps(payload, ensure_ascii=False), encoding="utf-8"
        )

    @classmethod
    def load(cls, path: str | FilePath) -> DocumentStore:
        """Restore a store saved with ``save``; a missing file gives an empty store.

        Raises:
            ParseError: If the saved state is not valid JSON or has the wrong shape.
        """
        store = cls()
        path = FilePath(path)
        if not path.exists():
            log.debug("No saved store at %s", path)
            return store

        payload: Any = parse_document(path.read_bytes())
        files = payload.get("files") if isinstance(payload, dict) else None
        if not isinstance(files, dict):
            raise ParseError(f"{path}: saved store has no 'files' mapping")
        for kind in _KINDS:
            entry = files.get(kind)
            if entry is None:
                continue
            try:
                store._files[kind] = JsonFile(
                    name=entry["name"],
                    content=entry["content"],
                    last_modified=int(entry["last_modified"]),
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ParseError(f"{path}: invalid {kind} entry ({exc})") from exc
        return store


def _check_kind(kind: str) -> None:
    if kind not in _KINDS:
        msg = f"file kind must be one of {_KINDS}, got {kind!r}"
        raise ValueError(msg)
