"""Tests for OpenAIHTTPProvider with mocked httpx."""

from __future__ import annotations

import io
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from aigw.core.errors import ProviderResponseError
from aigw.providers.base import CapabilityProvider
from aigw.providers.openai_http import OpenAIHTTPProvider


def _mock_httpx_client(response: httpx.Response) -> AsyncMock:
    client = AsyncMock()
    client.post = AsyncMock(return_value=response)
    client.aclose = AsyncMock()
    return client


class TestLifecycle:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(OpenAIHTTPProvider(), CapabilityProvider)

    async def test_requires_context_manager(self) -> None:
        with pytest.raises(RuntimeError, match="async context manager"):
            await OpenAIHTTPProvider().create_completion({})

    async def test_bearer_header_and_base_url(self) -> None:
        mock = _mock_httpx_client(httpx.Response(200, json={}))
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock) as cls:
            async with OpenAIHTTPProvider(api_key="sk-test", api_base="https://example.test/v1/"):
                pass
        kwargs = cls.call_args.kwargs
        assert kwargs["headers"] == {"Authorization": "Bearer sk-test"}
        assert kwargs["base_url"] == "https://example.test/v1"
        mock.aclose.assert_awaited_once()


class TestJsonEndpoints:
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("create_completion", "/completions"),
            ("create_chat_completion", "/chat/completions"),
            ("create_image", "/images/generations"),
            ("create_edit", "/edits"),
        ],
    )
    async def test_posts_params_as_json(self, method: str, path: str) -> None:
        payload = {"id": "x", "choices": []}
        mock = _mock_httpx_client(httpx.Response(200, json=payload))
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider(api_key="k") as provider:
                response = await getattr(provider, method)({"model": "m"})

        mock.post.assert_awaited_once_with(path, json={"model": "m"})
        assert response.status == 200
        assert response.data == payload

    async def test_error_status_raises_with_body(self) -> None:
        body = {"error": {"message": "Rate limit reached", "code": "rate_limit_exceeded"}}
        mock = _mock_httpx_client(httpx.Response(429, json=body))
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider() as provider:
                with pytest.raises(ProviderResponseError) as excinfo:
                    await provider.create_completion({})

        assert excinfo.value.status == 429
        assert excinfo.value.body == body

    async def test_non_json_body_kept_as_text(self) -> None:
        mock = _mock_httpx_client(httpx.Response(502, text="Bad gateway"))
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider() as provider:
                with pytest.raises(ProviderResponseError) as excinfo:
                    await provider.create_edit({})

        assert excinfo.value.body == "Bad gateway"

    async def test_transport_error_propagates(self) -> None:
        mock = AsyncMock()
        mock.post = AsyncMock(side_effect=httpx.ConnectError("unreachable"))
        mock.aclose = AsyncMock()
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider() as provider:
                with pytest.raises(httpx.ConnectError):
                    await provider.create_image({})


class TestTranscription:
    async def test_multipart_upload(self) -> None:
        mock = _mock_httpx_client(httpx.Response(200, json={"text": "hello"}))
        audio = io.BytesIO(b"RIFF")
        audio.name = "/tmp/example.mp3"
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider() as provider:
                response = await provider.create_transcription(audio, "whisper-1", "p", "json", 0.5)

        assert response.data == {"text": "hello"}
        call = mock.post.await_args
        assert call.args == ("/audio/transcriptions",)
        assert call.kwargs["data"] == {
            "model": "whisper-1",
            "prompt": "p",
            "response_format": "json",
            "temperature": "0.5",
        }
        assert call.kwargs["files"] == {"file": ("example.mp3", audio)}

    async def test_language_sent_only_when_given(self) -> None:
        mock = _mock_httpx_client(httpx.Response(200, json={"text": "hola"}))
        with patch("aigw.providers.openai_http.httpx.AsyncClient", return_value=mock):
            async with OpenAIHTTPProvider() as provider:
                await provider.create_transcription(io.BytesIO(b""), "whisper-1", "p", "json", 0.5, "es")

        assert mock.post.await_args.kwargs["data"]["language"] == "es"
        assert mock.post.await_args.kwargs["files"]["file"][0] == "audio"
