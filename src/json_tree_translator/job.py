"""TranslationJob: one multi-language translation request and its lifecycle.

A job moves ``pending -> translating -> completed | error``.  It is mutated
only by the coroutine that runs it (once per language and once at the end),
never concurrently, so a UI can poll it while the job runs.  A job always
terminates: a failure for one language is recorded as that language's result,
and anything escaping the orchestration marks the whole job ``error``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum, auto

from json_tree_translator.batch import BatchTranslator
from json_tree_translator.document.io import dump_document
from json_tree_translator.errors import JobError, TranslationCancelled
from json_tree_translator.pipeline import translate_document
from json_tree_translator.types import JsonValue

__all__ = ["JobStatus", "TranslationJob", "run_job", "start_job", "translate_languages"]

log = logging.getLogger(__name__)


class JobStatus(StrEnum):
    """Lifecycle states of a TranslationJob (values are lowercase names)."""

    PENDING = auto()
    TRANSLATING = auto()
    COMPLETED = auto()
    ERROR = auto()


@dataclass(slots=True)
class TranslationJob:
    """State of one translation request.

    Attributes:
        source_text:      The content being translated, pretty-printed.
        languages:        Target language codes, duplicates removed.
        status:           Current lifecycle state.
        current_language: Language being translated right now, if any.
        results:          Language code -> pretty-printed translated JSON, or
                          an error message for a language that failed.
        error:            Message of the job-level failure when ``status`` is
                          ``error``.
    """

    source_text: str
    languages: list[str]
    status: JobStatus = JobStatus.PENDING
    current_language: str | None = None
    results: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def progress(self) -> float:
        """Percentage of languages finished, in [0, 100]."""
        if not self.languages:
            return 0.0
        if self.status is JobStatus.COMPLETED:
            return 100.0
        if self.status is not JobStatus.TRANSLATING:
            return 0.0
        return len(self.results) / len(self.languages) * 100.0

    @property
    def done(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.ERROR)

    def raise_for_status(self) -> None:
        """Raise ``JobError`` if the job ended in the ``error`` state."""
        if self.status is JobStatus.ERROR:
            raise JobError(self.error or "translation job failed")


def start_job(content: JsonValue, languages: Iterable[str]) -> TranslationJob:
    """Create a pending job for ``content``; duplicate languages are dropped."""
    return TranslationJob(
        source_text=dump_document(content),
        languages=list(dict.fromkeys(languages)),
    )


async def run_job(
    job: TranslationJob,
    content: JsonValue,
    batch: BatchTranslator,
    source_lang: str = "en",
    cancel_event: asyncio.Event | None = None,
) -> TranslationJob:
    """Translate ``content`` into every language of ``job``, one after another.

    Never raises for translation problems: per-language failures become an
    ``"Error translating to <lang>: ..."`` result and a job-level failure
    (including cancellation) sets ``status`` to ``error``.

    Returns:
        ``job`` itself, in the ``completed`` or ``error`` state.
    """
    job.status = JobStatus.TRANSLATING
    job.results = {}
    job.error = None
    try:
        for lang in job.languages:
            job.current_language = lang
            try:
                translated = await translate_document(
                    content, lang, batch, source_lang, cancel_event=cancel_event
                )
            except TranslationCancelled:
                raise
            except Exception as exc:  # noqa: BLE001 - becomes this language's result
                log.error("Translation to %s failed: %s", lang, exc)
                job.results[lang] = f"Error translating to {lang}: {exc}"
            else:
                job.results[lang] = dump_document(translated)
        job.status = JobStatus.COMPLETED
    except Exception as exc:  # noqa: BLE001 - surfaced through job.status
        log.error("Translation job failed", exc_info=True)
        job.status = JobStatus.ERROR
        job.error = str(exc) or type(exc).__name__
    finally:
        job.current_language = None
    return job


async def translate_languages(
    content: JsonValue,
    languages: Iterable[str],
    batch: BatchTranslator,
    source_lang: str = "en",
    cancel_event: asyncio.Event | None = None,
) -> TranslationJob:
    """Create and run a job in one call."""
    job = start_job(content, languages)
    return await run_job(job, content, batch, source_lang, cancel_event)
