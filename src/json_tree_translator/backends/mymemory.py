"""MyMemoryBackend: secondary (fallback) translation backend.

GETs ``?q=<text>&langpair=<source>|<target>`` from the MyMemory API.  The
HTTP status alone says nothing: MyMemory reports failures such as quota
exhaustion with HTTP 200, so success is decided by ``responseStatus == 200``
inside the body.
"""

from __future__ import annotations

from typing import Any

import httpx

from json_tree_translator.config import DEFAULT_FALLBACK_URL
from json_tree_translator.errors import BackendError


def _status_ok(status: Any) -> bool:
    # MyMemory has returned the status both as a number and as a string.
    try:
        return int(status) == 200
    except (TypeError, ValueError):
        return False


class MyMemoryBackend:
    """Translate single strings through the MyMemory API.

    Args:
        client: The ``httpx.AsyncClient`` used for requests (borrowed).
        url:    Full URL of the ``/get`` endpoint.
    """

    name = "mymemory"

    def __init__(
        self, client: httpx.AsyncClient, url: str = DEFAULT_FALLBACK_URL
    ) -> None:
        self._client = client
        self._url = url

    def __repr__(self) -> str:
        return f"MyMemoryBackend(url={self._url!r})"

    async def translate(
        self, text: str, target_lang: str, source_lang: str = "en"
    ) -> str:
        """Return ``text`` translated into ``target_lang``.

        Raises:
            BackendError: On transport errors, undecodable bodies, a
                ``responseStatus`` other than 200, or a missing translation.
        """
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        try:
            response = await self._client.get(self._url, params=params)
        except httpx.HTTPError as exc:
            raise BackendError(f"MyMemory request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise BackendError(
                f"MyMemory returned a non-JSON body (HTTP {response.status_code})"
            ) from exc

        if not isinstance(data, dict) or not _status_ok(data.get("responseStatus")):
            status = data.get("responseStatus") if isinstance(data, dict) else None
            details = data.get("responseDetails") if isinstance(data, dict) else None
            raise BackendError(
                f"MyMemory responseStatus {status!r}"
                + (f": {details}" if details else "")
            )

        response_data = data.get("responseData")
        translated = (
            response_data.get("translatedText")
            if isinstance(response_data, dict)
            else None
        )
        if not isinstance(translated, str):
            raise BackendError("MyMemory response has no translatedText")
        return translated
