"""Gateway: one entry point per capability over a shared dispatcher.

Usage::

    async with Gateway.from_config(GatewayConfig.from_env()) as gateway:
        payload = await gateway.text_completion("this is a letter for my mom")
        print(payload["choices"][0]["text"])

Every method returns the provider's native payload on success, or the
normalized failure body on failure, under the same return value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import AsyncExitStack
from pathlib import Path
from typing import Any

from aigw.artifacts.fetcher import HTTPArtifactFetcher
from aigw.artifacts.processor import ArtifactProcessor, OutcomeObserver
from aigw.capabilities.chat import chat_completion
from aigw.capabilities.completion import text_completion
from aigw.capabilities.edit import edit
from aigw.capabilities.images import image_generation
from aigw.capabilities.transcription import transcription
from aigw.capabilities.models import ChatFunction, ChatMessage
from aigw.core.config import GatewayConfig
from aigw.dispatch.dispatcher import RequestDispatcher
from aigw.providers import build_provider
from aigw.providers.base import CapabilityProvider


class Gateway:
    """Capability adapters bound to one provider and one artifact processor.

    The provider is injected, so tests can pass a mock without touching
    process state. Resources that support ``async with`` (the HTTP provider,
    the artifact fetcher) are opened and closed with the gateway.
    """

    def __init__(
        self,
        provider: CapabilityProvider,
        *,
        artifacts: ArtifactProcessor | None = None,
    ) -> None:
        self._dispatcher = RequestDispatcher(provider)
        if artifacts is None:
            artifacts = ArtifactProcessor(HTTPArtifactFetcher())
        self._artifacts = artifacts
        self._resources: list[Any] = [provider, self._artifacts.fetcher]
        self._stack: AsyncExitStack | None = None

    @classmethod
    def from_config(
        cls,
        config: GatewayConfig,
        *,
        observer: OutcomeObserver | None = None,
    ) -> Gateway:
        """Wire the configured provider and an HTTP artifact fetcher."""
        artifacts = ArtifactProcessor(
            HTTPArtifactFetcher(),
            output_dir=config.output_dir,
            basename=config.image_basename,
            extension=config.image_extension,
            observer=observer,
        )
        return cls(build_provider(config), artifacts=artifacts)

    async def __aenter__(self) -> Gateway:
        stack = AsyncExitStack()
        try:
            for resource in self._resources:
                if hasattr(resource, "__aenter__"):
                    await stack.enter_async_context(resource)
        except BaseException:
            await stack.aclose()
            raise
        self._stack = stack
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._stack is not None:
            await self._stack.aclose()
            self._stack = None

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def text_completion(
        self,
        prompt: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return await text_completion(self._dispatcher, prompt, options)

    async def chat_completion(
        self,
        messages: Sequence[ChatMessage | Mapping[str, Any]],
        functions: Sequence[ChatFunction | Mapping[str, Any]] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return await chat_completion(self._dispatcher, messages, functions, options)

    async def image_generation(
        self,
        prompt: str,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return await image_generation(self._dispatcher, self._artifacts, prompt, options)

    async def transcription(
        self,
        file_path: str | Path,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return await transcription(self._dispatcher, file_path, options)

    async def edit(
        self,
        instruction: str,
        input: str = "",
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return await edit(self._dispatcher, instruction, input, options)
