"""Shared fake translators for the pipeline tests.

No test talks to a real translation service: HTTP backends are exercised
through ``httpx.MockTransport`` and everything above them through these fakes.
"""

from __future__ import annotations

import asyncio

import pytest

from json_tree_translator.errors import TranslationError


class EchoTranslator:
    """Deterministic translator: ``"hello"`` -> ``"hello [fr]"``.

    Records every call and the maximum number of calls in flight at once.
    """

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self.fail_on = fail_on or set()
        self.in_flight = 0
        self.max_in_flight = 0

    async def translate(self, text: str, target_lang: str, source_lang: str = "en") -> str:
        self.calls.append((text, target_lang, source_lang))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield so every call of a chunk is in flight together.
            await asyncio.sleep(0)
            if text in self.fail_on:
                raise TranslationError(f"Translation failed: cannot translate {text!r}")
            return f"{text} [{target_lang}]"
        finally:
            self.in_flight -= 1


class AlwaysFailingTranslator:
    """Translator whose every call fails as if both backends were down."""

    def __init__(self) -> None:
        self.calls = 0

    async def translate(self, text: str, target_lang: str, source_lang: str = "en") -> str:
        self.calls += 1
        raise TranslationError("Translation failed: service unavailable")


@pytest.fixture
def echo() -> EchoTranslator:
    """A fresh EchoTranslator for each test."""
    return EchoTranslator()


@pytest.fixture
def failing() -> AlwaysFailingTranslator:
    """A fresh AlwaysFailingTranslator for each test."""
    return AlwaysFailingTranslator()
