"""CapabilityProvider protocol: the remote service as the gateway sees it.

Every concrete provider (direct OpenAI HTTP, LiteLLM) satisfies this protocol
so the :class:`~aigw.dispatch.dispatcher.RequestDispatcher` can bind operations
without knowing the transport. Application failures are raised as
:class:`~aigw.core.errors.ProviderResponseError`; anything else raised is a
transport/unexpected failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, BinaryIO, Protocol, runtime_checkable

from pydantic import BaseModel


class ProviderResponse(BaseModel):
    """Successful provider answer: status code plus the native JSON-like payload."""

    status: int = 200
    data: Any = None


@runtime_checkable
class CapabilityProvider(Protocol):
    """Named remote operations taking one options object, or a positional stream call."""

    async def create_completion(self, params: Mapping[str, Any]) -> ProviderResponse: ...

    async def create_chat_completion(self, params: Mapping[str, Any]) -> ProviderResponse: ...

    async def create_image(self, params: Mapping[str, Any]) -> ProviderResponse: ...

    async def create_edit(self, params: Mapping[str, Any]) -> ProviderResponse: ...

    async def create_transcription(
        self,
        file: BinaryIO,
        model: str,
        prompt: str | None = None,
        response_format: str | None = None,
        temperature: float | None = None,
        language: str | None = None,
    ) -> ProviderResponse:
        """Positional call shape: ``(stream, model, opt0, opt1, opt2, opt3?)``."""
        ...
