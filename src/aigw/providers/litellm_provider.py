"""LiteLLMProvider: routes capability calls through LiteLLM.

LiteLLM speaks many back ends behind OpenAI-shaped responses, which lets the
gateway target non-OpenAI deployments. It does not offer the edit endpoint.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, BinaryIO

import litellm

from aigw.core.errors import ProviderResponseError, UnsupportedOperationError
from aigw.providers.base import ProviderResponse


class LiteLLMProvider:
    """Satisfies :class:`~aigw.providers.base.CapabilityProvider` via LiteLLM."""

    def __init__(self, api_key: str | None = None, api_base: str | None = None) -> None:
        self._api_key = api_key
        self._api_base = api_base

    async def __aenter__(self) -> LiteLLMProvider:
        return self

    async def __aexit__(self, *_: object) -> None:
        return None

    async def create_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._call(litellm.atext_completion, params)  # pyright: ignore[reportUnknownMemberType]

    async def create_chat_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._call(litellm.acompletion, params)  # pyright: ignore[reportUnknownMemberType]

    async def create_image(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._call(litellm.aimage_generation, params)  # pyright: ignore[reportUnknownMemberType]

    async def create_edit(self, params: Mapping[str, Any]) -> ProviderResponse:
        raise UnsupportedOperationError("createEdit", "not offered by LiteLLM")

    async def create_transcription(
        self,
        file: BinaryIO,
        model: str,
        prompt: str | None = None,
        response_format: str | None = None,
        temperature: float | None = None,
        language: str | None = None,
    ) -> ProviderResponse:
        params: dict[str, Any] = {"file": file, "model": model}
        if prompt is not None:
            params["prompt"] = prompt
        if response_format is not None:
            params["response_format"] = response_format
        if temperature is not None:
            params["temperature"] = temperature
        if language is not None:
            params["language"] = language
        return await self._call(litellm.atranscription, params)  # pyright: ignore[reportUnknownMemberType]

    async def _call(
        self,
        fn: Callable[..., Awaitable[Any]],
        params: Mapping[str, Any],
    ) -> ProviderResponse:
        kwargs: dict[str, Any] = dict(params)
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._api_base:
            kwargs["api_base"] = self._api_base

        try:
            response = await fn(**kwargs)
        except Exception as exc:
            # LiteLLM exceptions mirror the upstream HTTP status when one exists.
            status = getattr(exc, "status_code", None)
            if isinstance(status, int):
                raise ProviderResponseError(status, _error_body(exc)) from exc
            raise

        return ProviderResponse(status=200, data=_to_payload(response))


def _to_payload(response: Any) -> Any:
    """Convert a LiteLLM response object to its plain JSON-like payload."""
    if hasattr(response, "model_dump"):
        return response.model_dump()
    if hasattr(response, "to_dict"):
        return response.to_dict()
    return response


def _error_body(exc: Exception) -> dict[str, Any]:
    return {
        "error": {
            "message": str(getattr(exc, "message", "") or exc),
            "type": type(exc).__name__,
        }
    }
