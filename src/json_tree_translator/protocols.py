"""TranslationBackend Protocol for the json-tree-translator extension point.

Defines the structural interface every translator in the pipeline satisfies:
the HTTP backends, the fallback provider that chains them, and the caching
proxy around a provider.  Users can plug in their own translator without
inheriting from any base class.

Example::

    from json_tree_translator.protocols import TranslationBackend

    class UpperBackend:
        async def translate(
            self, text: str, target_lang: str, source_lang: str = "en"
        ) -> str:
            return text.upper()

    assert isinstance(UpperBackend(), TranslationBackend)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationBackend(Protocol):
    """Structural protocol for anything that translates one string.

    The ``translate`` coroutine must:
    - Return the translation of ``text`` from ``source_lang`` into
      ``target_lang`` as a plain string.
    - Raise (never return a sentinel) when it cannot translate.  HTTP
      backends raise ``BackendError``; providers raise ``TranslationError``.
    """

    async def translate(
        self, text: str, target_lang: str, source_lang: str = "en"
    ) -> str: ...
