"""BatchTranslator: rate-controlled translation of many strings.

Strings are split into consecutive chunks of ``BatchConfig.chunk_size``.
All requests of a chunk run concurrently (``asyncio.gather``) and the chunk
is joined before the next one starts; between chunks the translator pauses
for ``inter_chunk_delay_ms``.  This caps simultaneous outbound requests and
the aggregate request rate against provider rate limits.

A failed string never fails the batch: its slot receives a placeholder
describing the failure, so the output always has one entry per input, in
input order.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from json_tree_translator.config import BatchConfig
from json_tree_translator.errors import TranslationCancelled, TranslationError

if TYPE_CHECKING:
    from json_tree_translator.protocols import TranslationBackend

__all__ = ["BatchTranslator", "error_placeholder"]

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def error_placeholder(target_lang: str, reason: object) -> str:
    """Return the text substituted for a string that could not be translated."""
    return f"[translation error ({target_lang}): {reason}]"


class BatchTranslator:
    """Drive a translator over many strings with bounded fan-out.

    Args:
        translator: Any ``TranslationBackend``-conformant object, typically a
            ``FallbackTranslationProvider`` or a ``TranslationCache`` around one.
        config:     Rate-control settings.  Defaults to ``BatchConfig()``.
        on_chunk:   Optional ``callback(done, total)`` called from the driving
            task after every chunk.

    Example::

        batch = BatchTranslator(provider, BatchConfig(chunk_size=5))
        french = await batch.translate_all(["Save", "Cancel"], "fr")
    """

    def __init__(
        self,
        translator: TranslationBackend,
        config: BatchConfig | None = None,
        on_chunk: ProgressCallback | None = None,
    ) -> None:
        self._translator: Any = translator
        self._config: BatchConfig = config if config is not None else BatchConfig()
        self._on_chunk = on_chunk

        if self._config.max_attempts > 1:
            # Caller-side retry: only TranslationError (both backends down)
            # is retried, with jittered exponential backoff.
            _retry = retry(
                retry=retry_if_exception_type(TranslationError),
                wait=wait_random_exponential(multiplier=0.5, max=10),
                stop=stop_after_attempt(self._config.max_attempts),
                reraise=True,
            )
            self._call_translator = _retry(self._raw_call)
        else:
            self._call_translator = self._raw_call

    @property
    def config(self) -> BatchConfig:
        return self._config

    async def translate_all(
        self,
        texts: Iterable[str],
        target_lang: str,
        source_lang: str = "en",
        cancel_event: asyncio.Event | None = None,
    ) -> list[str]:
        """Translate ``texts`` into ``target_lang`` chunk by chunk.

        Args:
            texts:        Strings to translate.
            target_lang:  Target language code.
            source_lang:  Source language code.  Defaults to ``"en"``.
            cancel_event: Checked before every chunk; once set, no further
                chunk is started.

        Returns:
            Exactly one string per input, in input order.  Failed strings are
            replaced by ``error_placeholder(target_lang, reason)``.

        Raises:
            TranslationCancelled: If ``cancel_event`` was set at a chunk
                boundary.
        """
        items = list(texts)
        total = len(items)
        size = self._config.chunk_size
        results: list[str] = []

        for start in range(0, total, size):
            if cancel_event is not None and cancel_event.is_set():
                raise TranslationCancelled(
                    f"cancelled after {start} of {total} strings ({target_lang})"
                )

            chunk = items[start : start + size]
            translations = await asyncio.gather(
                *(self._translate_one(text, target_lang, source_lang) for text in chunk)
            )
            results.extend(translations)
            log.debug(
                "Translated %d/%d strings to %s", len(results), total, target_lang
            )

            if self._on_chunk is not None:
                self._on_chunk(len(results), total)

            if start + size < total and self._config.inter_chunk_delay_ms > 0:
                await asyncio.sleep(self._config.inter_chunk_delay)

        return results

    async def _translate_one(
        self, text: str, target_lang: str, source_lang: str
    ) -> str:
        try:
            return await self._call_translator(text, target_lang, source_lang)
        except Exception as exc:  # noqa: BLE001 - one string must not sink the batch
            log.warning("Could not translate %r to %s: %s", text, target_lang, exc)
            return error_placeholder(target_lang, exc)

    async def _raw_call(self, text: str, target_lang: str, source_lang: str) -> str:
        """Make the raw translator call (retried through ``_call_translator``)."""
        return str(await self._translator.translate(text, target_lang, source_lang))
