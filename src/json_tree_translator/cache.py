"""TranslationCache: LRU-backed caching proxy for any TranslationBackend.

Wraps any TranslationBackend-conformant object and transparently caches
successful translations in memory, keyed by ``(text, target, source)``.
Failures are never cached, so a string that failed once is retried on the
next request.  LRU eviction occurs silently when ``max_size`` is exceeded.

Each ``TranslationCache`` instance maintains its own ``LRUCache``; there is
no class-level shared state, so two separate instances never interfere
with each other.

Example::

    from json_tree_translator.cache import TranslationCache
    from json_tree_translator.provider import FallbackTranslationProvider

    cache = TranslationCache(FallbackTranslationProvider(), max_size=2048)

    # First call hits the provider, the second is served from memory
    await cache.translate("Save", "fr")
    await cache.translate("Save", "fr")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_tree_translator.protocols import TranslationBackend

__all__ = ["TranslationCache"]

_CacheKey = tuple[str, str, str]


class TranslationCache:
    """LRU-backed caching proxy around any TranslationBackend.

    Satisfies the ``TranslationBackend`` Protocol structurally (no
    inheritance required).

    Args:
        translator: Any object satisfying the ``TranslationBackend`` Protocol.
        max_size:   Maximum number of translations to hold in memory.
            Defaults to 512.
    """

    def __init__(self, translator: TranslationBackend, max_size: int = 512) -> None:
        self._translator: Any = translator
        self._cache: LRUCache[_CacheKey, str] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def clear(self) -> None:
        """Drop every cached translation."""
        self._cache.clear()

    # ------------------------------------------------------------------
    # TranslationBackend Protocol surface
    # ------------------------------------------------------------------

    async def translate(
        self, text: str, target_lang: str, source_lang: str = "en"
    ) -> str:
        """Return the cached translation, or translate and cache it.

        Exceptions from the wrapped translator propagate unchanged and
        leave the cache untouched.
        """
        key = (text, target_lang, source_lang)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        translated: str = await self._translator.translate(
            text, target_lang, source_lang
        )
        self._cache[key] = translated
        return translated
