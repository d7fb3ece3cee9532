"""Unit tests for LibreTranslateBackend and MyMemoryBackend.

All HTTP traffic goes through ``httpx.MockTransport``; no real service is
contacted.  Each backend must check its own success criterion explicitly:
HTTP status plus ``translatedText`` for LibreTranslate, the body's
``responseStatus`` for MyMemory.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from json_tree_translator.backends import LibreTranslateBackend, MyMemoryBackend
from json_tree_translator.errors import BackendError
from json_tree_translator.protocols import TranslationBackend

Handler = Callable[[httpx.Request], httpx.Response]


def _run_libre(handler: Handler, api_key: str | None = None) -> str:
    async def main() -> str:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            backend = LibreTranslateBackend(
                client, url="https://libre.test/translate", api_key=api_key
            )
            return await backend.translate("hello", "fr", "en")

    return asyncio.run(main())


def _run_mymemory(handler: Handler) -> str:
    async def main() -> str:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            backend = MyMemoryBackend(client, url="https://mymemory.test/get")
            return await backend.translate("hello", "fr", "en")

    return asyncio.run(main())


# ---------------------------------------------------------------------------
# LibreTranslate
# ---------------------------------------------------------------------------


class TestLibreTranslateBackend:
    def test_success(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"translatedText": "bonjour"})

        assert _run_libre(handler) == "bonjour"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://libre.test/translate"
        assert json.loads(request.content) == {"q": "hello", "source": "en", "target": "fr"}
        assert request.headers["content-type"] == "application/json"

    def test_api_key_sent_in_body(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"translatedText": "bonjour"})

        _run_libre(handler, api_key="secret")
        assert bodies[0]["api_key"] == "secret"

    def test_repr_hides_api_key(self) -> None:
        backend = LibreTranslateBackend(httpx.AsyncClient(), api_key="secret-key")
        assert "secret-key" not in repr(backend)

    def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"error": "slow down"})

        with pytest.raises(BackendError, match="HTTP 429"):
            _run_libre(handler)

    def test_missing_translated_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "no"})

        with pytest.raises(BackendError, match="translatedText"):
            _run_libre(handler)

    def test_non_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(BackendError, match="non-JSON"):
            _run_libre(handler)

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(BackendError, match="request failed"):
            _run_libre(handler)

    def test_protocol_conformance(self) -> None:
        assert isinstance(LibreTranslateBackend(httpx.AsyncClient()), TranslationBackend)


# ---------------------------------------------------------------------------
# MyMemory
# ---------------------------------------------------------------------------


class TestMyMemoryBackend:
    def test_success(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"responseStatus": 200, "responseData": {"translatedText": "bonjour"}},
            )

        assert _run_mymemory(handler) == "bonjour"
        request = seen[0]
        assert request.method == "GET"
        assert request.url.params["q"] == "hello"
        assert request.url.params["langpair"] == "en|fr"

    def test_string_status_accepted(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"responseStatus": "200", "responseData": {"translatedText": "salut"}},
            )

        assert _run_mymemory(handler) == "salut"

    def test_body_status_failure_despite_http_200(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "responseStatus": 403,
                    "responseDetails": "QUOTA EXCEEDED",
                    "responseData": {"translatedText": "QUOTA EXCEEDED"},
                },
            )

        with pytest.raises(BackendError, match="403: QUOTA EXCEEDED"):
            _run_mymemory(handler)

    def test_missing_response_data(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"responseStatus": 200})

        with pytest.raises(BackendError, match="translatedText"):
            _run_mymemory(handler)

    def test_non_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        with pytest.raises(BackendError, match="HTTP 502"):
            _run_mymemory(handler)

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(BackendError, match="request failed"):
            _run_mymemory(handler)

    def test_protocol_conformance(self) -> None:
        assert isinstance(MyMemoryBackend(httpx.AsyncClient()), TranslationBackend)
