"""Public API functions for json-tree-translator.

Convenience coroutines that wire a ``FallbackTranslationProvider`` and a
``BatchTranslator`` together for one call.  Each call creates (and closes) its
own provider unless one is passed in, so calls never share state.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING

from json_tree_translator.batch import BatchTranslator
from json_tree_translator.config import BatchConfig, ProviderConfig
from json_tree_translator.job import TranslationJob, translate_languages
from json_tree_translator.pipeline import translate_document
from json_tree_translator.provider import FallbackTranslationProvider
from json_tree_translator.types import JsonValue

if TYPE_CHECKING:
    from json_tree_translator.protocols import TranslationBackend

__all__ = ["translate_json", "translate_json_languages", "translate_json_sync"]


async def translate_json(
    content: JsonValue,
    target_lang: str,
    source_lang: str = "en",
    translator: TranslationBackend | None = None,
    batch_config: BatchConfig | None = None,
    provider_config: ProviderConfig | None = None,
) -> JsonValue:
    """Return ``content`` with every string leaf translated into ``target_lang``.

    Args:
        content:         Any JSON value.
        target_lang:     Target language code.
        source_lang:     Source language code.  Defaults to ``"en"``.
        translator:      Translator to use.  Defaults to a fresh
                         ``FallbackTranslationProvider(config=provider_config)``.
        batch_config:    Rate control.  Defaults to ``BatchConfig()``.
        provider_config: Endpoints for the default provider.

    Returns:
        A structurally identical value; strings that could not be translated
        hold an error placeholder.
    """
    if translator is not None:
        batch = BatchTranslator(translator, batch_config)
        return await translate_document(content, target_lang, batch, source_lang)

    async with FallbackTranslationProvider(config=provider_config) as provider:
        batch = BatchTranslator(provider, batch_config)
        return await translate_document(content, target_lang, batch, source_lang)


async def translate_json_languages(
    content: JsonValue,
    languages: Iterable[str],
    source_lang: str = "en",
    translator: TranslationBackend | None = None,
    batch_config: BatchConfig | None = None,
    provider_config: ProviderConfig | None = None,
) -> TranslationJob:
    """Translate ``content`` into several languages as one ``TranslationJob``.

    The returned job is ``completed`` or ``error``; it never raises for
    translation failures.
    """
    if translator is not None:
        batch = BatchTranslator(translator, batch_config)
        return await translate_languages(content, languages, batch, source_lang)

    async with FallbackTranslationProvider(config=provider_config) as provider:
        batch = BatchTranslator(provider, batch_config)
        return await translate_languages(content, languages, batch, source_lang)


def translate_json_sync(
    content: JsonValue,
    target_lang: str,
    source_lang: str = "en",
    translator: TranslationBackend | None = None,
    batch_config: BatchConfig | None = None,
    provider_config: ProviderConfig | None = None,
) -> JsonValue:
    """Blocking wrapper around ``translate_json`` for scripts.

    Must not be called from a running event loop.
    """
    return asyncio.run(
        translate_json(
            content,
            target_lang,
            source_lang,
            translator=translator,
            batch_config=batch_config,
            provider_config=provider_config,
        )
    )
