"""LibreTranslateBackend: primary translation backend.

POSTs ``{"q", "source", "target"}`` as JSON to a LibreTranslate-compatible
``/translate`` endpoint and reads ``translatedText`` from the response.

Success requires BOTH a 2xx status and a string ``translatedText`` in the
body; anything else raises ``BackendError`` so the provider can fall back.
The optional API key is sent in the request body and never appears in
``repr()``.
"""

from __future__ import annotations

import httpx

from json_tree_translator.config import DEFAULT_PRIMARY_URL
from json_tree_translator.errors import BackendError


class LibreTranslateBackend:
    """Translate single strings through a LibreTranslate instance.

    Satisfies the ``TranslationBackend`` Protocol structurally.  The HTTP
    client is borrowed, not owned: the caller closes it.

    Args:
        client:  The ``httpx.AsyncClient`` used for requests.
        url:     Full URL of the ``/translate`` endpoint.
        api_key: Optional API key required by some public instances.
    """

    name = "libretranslate"

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = DEFAULT_PRIMARY_URL,
        api_key: str | None = None,
    ) -> None:
        self._client = client
        self._url = url
        self._api_key = api_key

    def __repr__(self) -> str:
        """Return a safe repr that never exposes the API key."""
        return f"LibreTranslateBackend(url={self._url!r})"

    async def translate(
        self, text: str, target_lang: str, source_lang: str = "en"
    ) -> str:
        """Return ``text`` translated into ``target_lang``.

        Raises:
            BackendError: On transport errors, non-2xx responses, undecodable
                bodies, or a body without a string ``translatedText``.
        """
        payload = {"q": text, "source": source_lang, "target": target_lang}
        if self._api_key:
            payload["api_key"] = self._api_key

        try:
            response = await self._client.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise BackendError(f"LibreTranslate request failed: {exc}") from exc

        if not response.is_success:
            raise BackendError(f"LibreTranslate returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise BackendError("LibreTranslate returned a non-JSON body") from exc

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise BackendError("LibreTranslate response has no translatedText")
        return translated
