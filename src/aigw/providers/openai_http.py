"""OpenAIHTTPProvider: talks to the OpenAI REST surface over httpx."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, BinaryIO

import httpx

from aigw.core.config import DEFAULT_API_BASE
from aigw.core.errors import ProviderResponseError
from aigw.providers.base import ProviderResponse


class OpenAIHTTPProvider:
    """Direct REST client for the five supported endpoints.

    Satisfies the :class:`~aigw.providers.base.CapabilityProvider` protocol.

    Usage::

        async with OpenAIHTTPProvider(api_key="sk-...") as provider:
            response = await provider.create_completion({"model": "...", "prompt": "hi"})
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 600.0,
    ) -> None:
        self._api_key = api_key
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> OpenAIHTTPProvider:
        headers: dict[str, str] = {}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        self._client = httpx.AsyncClient(
            base_url=self._api_base,
            headers=headers,
            timeout=self._timeout,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "OpenAIHTTPProvider must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def create_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._post_json("/completions", params)

    async def create_chat_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._post_json("/chat/completions", params)

    async def create_image(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._post_json("/images/generations", params)

    async def create_edit(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._post_json("/edits", params)

    async def create_transcription(
        self,
        file: BinaryIO,
        model: str,
        prompt: str | None = None,
        response_format: str | None = None,
        temperature: float | None = None,
        language: str | None = None,
    ) -> ProviderResponse:
        """Upload *file* as multipart form data alongside the scalar options."""
        form: dict[str, str] = {"model": model}
        if prompt is not None:
            form["prompt"] = prompt
        if response_format is not None:
            form["response_format"] = response_format
        if temperature is not None:
            form["temperature"] = str(temperature)
        if language is not None:
            form["language"] = language

        filename = os.path.basename(str(getattr(file, "name", "") or "audio"))
        response = await self._http().post(
            "/audio/transcriptions",
            data=form,
            files={"file": (filename, file)},
        )
        return self._to_provider_response(response)

    async def _post_json(self, path: str, params: Mapping[str, Any]) -> ProviderResponse:
        response = await self._http().post(path, json=dict(params))
        return self._to_provider_response(response)

    @staticmethod
    def _to_provider_response(response: httpx.Response) -> ProviderResponse:
        """Decode the body and raise on non-2xx answers."""
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        if not response.is_success:
            raise ProviderResponseError(response.status_code, body)
        return ProviderResponse(status=response.status_code, data=body)
