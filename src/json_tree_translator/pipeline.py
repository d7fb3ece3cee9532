"""Translate every string leaf of a JSON value, keeping its structure.

extract_strings -> BatchTranslator.translate_all -> rebuild.
"""

from __future__ import annotations

import asyncio
import logging

from json_tree_translator.batch import BatchTranslator
from json_tree_translator.document.extract import extract_strings, rebuild
from json_tree_translator.types import JsonValue

__all__ = ["translate_document"]

log = logging.getLogger(__name__)


async def translate_document(
    doc: JsonValue,
    target_lang: str,
    batch: BatchTranslator,
    source_lang: str = "en",
    cancel_event: asyncio.Event | None = None,
) -> JsonValue:
    """Return a copy of ``doc`` whose string leaves are translated.

    Numbers, booleans and null are left untouched.  A document without any
    string is returned as-is and the translator is never called.
    """
    extraction = extract_strings(doc)
    if not extraction:
        log.debug("Nothing to translate to %s", target_lang)
        return doc

    translated = await batch.translate_all(
        extraction.strings, target_lang, source_lang, cancel_event=cancel_event
    )
    return rebuild(doc, translated, extraction.paths)
