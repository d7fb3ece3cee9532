"""Exception hierarchy for json-tree-translator.

Absence inside a document is never an error (see ``get_at_path`` and the
``MISSING`` sentinel).  Everything here marks a failure the caller has to
react to: a bad import, an impossible write, a backend that gave up, or a
job that could not run to completion.
"""

from __future__ import annotations

__all__ = [
    "BackendError",
    "DuplicateEntryError",
    "EditorError",
    "JobError",
    "JsonTranslatorError",
    "ParseError",
    "PathError",
    "TranslationCancelled",
    "TranslationError",
]


class JsonTranslatorError(Exception):
    """Base class for every error raised by this package."""


class ParseError(JsonTranslatorError, ValueError):
    """Raised when raw text cannot be decoded as a JSON document.

    Attributes:
        lineno: 1-based line of the failure, or None when unknown.
        colno:  1-based column of the failure, or None when unknown.
    """

    def __init__(
        self, message: str, lineno: int | None = None, colno: int | None = None
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class PathError(JsonTranslatorError, LookupError):
    """Raised when a write addresses a list with a segment that is not an index."""


class BackendError(JsonTranslatorError):
    """A single translation backend failed (transport, status or payload)."""


class TranslationError(JsonTranslatorError):
    """Every backend of a provider failed for one string."""


class TranslationCancelled(JsonTranslatorError):
    """A batch was cancelled at a chunk boundary."""


class JobError(JsonTranslatorError):
    """The orchestration around a translation batch failed."""


class EditorError(JsonTranslatorError):
    """An editor operation was rejected."""


class DuplicateEntryError(EditorError):
    """A key or value being added already exists where it must be unique."""
