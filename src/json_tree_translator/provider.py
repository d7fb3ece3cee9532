"""FallbackTranslationProvider: one string in, one string out, two backends.

The provider calls its primary backend and, if that fails for any reason
(exception, non-success payload, or timeout), calls the secondary backend.
Only when both fail does it raise ``TranslationError``, carrying the
secondary failure's message.  There are no retries inside a backend; retry
policy belongs to the caller (see ``BatchConfig.max_attempts``).

Example::

    import asyncio
    from json_tree_translator.provider import FallbackTranslationProvider

    async def main() -> None:
        async with FallbackTranslationProvider() as provider:
            print(await provider.translate("hello", "fr"))

    asyncio.run(main())
"""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

import httpx

from json_tree_translator.backends import LibreTranslateBackend, MyMemoryBackend
from json_tree_translator.config import ProviderConfig
from json_tree_translator.errors import TranslationError

if TYPE_CHECKING:
    from json_tree_translator.protocols import TranslationBackend

__all__ = ["FallbackTranslationProvider"]

log = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, TimeoutError):
        return "timed out"
    return str(exc) or type(exc).__name__


class FallbackTranslationProvider:
    """Translate through a primary backend with a secondary fallback.

    Satisfies the ``TranslationBackend`` Protocol structurally.  When no
    backends are passed, a ``LibreTranslateBackend`` and a ``MyMemoryBackend``
    are built from ``config``, sharing one ``httpx.AsyncClient``.  A client
    created here is owned by the provider and closed by ``aclose()`` (or by
    leaving ``async with``); a client passed in is left open.

    Args:
        primary:   Backend tried first.
        secondary: Backend tried when the primary fails.
        config:    Endpoints and per-call timeout.  Defaults to
                   ``ProviderConfig()``.
        client:    HTTP client for the default backends.
    """

    def __init__(
        self,
        primary: TranslationBackend | None = None,
        secondary: TranslationBackend | None = None,
        config: ProviderConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config: ProviderConfig = (
            config if config is not None else ProviderConfig()
        )
        self._owned_client: httpx.AsyncClient | None = None

        if (primary is None or secondary is None) and client is None:
            client = httpx.AsyncClient(timeout=self._config.timeout)
            self._owned_client = client

        self._primary: Any = (
            primary
            if primary is not None
            else LibreTranslateBackend(
                client,  # type: ignore[arg-type]
                url=self._config.primary_url,
                api_key=self._config.api_key,
            )
        )
        self._secondary: Any = (
            secondary
            if secondary is not None
            else MyMemoryBackend(
                client,  # type: ignore[arg-type]
                url=self._config.fallback_url,
            )
        )

    def __repr__(self) -> str:
        return (
            f"FallbackTranslationProvider(primary={self._primary!r}, "
            f"secondary={self._secondary!r}, timeout={self._config.timeout})"
        )

    async def __aenter__(self) -> FallbackTranslationProvider:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None

    async def translate(
        self, text: str, target_lang: str, source_lang: str = "en"
    ) -> str:
        """Return ``text`` translated into ``target_lang``.

        Raises:
            TranslationError: If both backends failed; the message is the
                secondary backend's failure.
        """
        try:
            return await self._call(self._primary, text, target_lang, source_lang)
        except Exception as exc:  # noqa: BLE001 - any primary failure falls back
            log.warning(
                "Primary backend %r failed for %s->%s (%s); falling back",
                self._primary,
                source_lang,
                target_lang,
                _describe(exc),
            )

        try:
            return await self._call(self._secondary, text, target_lang, source_lang)
        except Exception as exc:
            raise TranslationError(f"Translation failed: {_describe(exc)}") from exc

    async def _call(
        self, backend: Any, text: str, target_lang: str, source_lang: str
    ) -> str:
        result = await asyncio.wait_for(
            backend.translate(text, target_lang, source_lang),
            timeout=self._config.timeout,
        )
        return str(result)
