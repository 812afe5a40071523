"""Shared fixtures: an in-memory provider that echoes its input back."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, BinaryIO

import pytest

from aigw.artifacts.processor import ArtifactProcessor
from aigw.capabilities.gateway import Gateway
from aigw.providers.base import ProviderResponse


class EchoProvider:
    """Satisfies CapabilityProvider; every call returns its own parameters."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    async def _echo(self, name: str, params: Mapping[str, Any]) -> ProviderResponse:
        self.calls.append((name, dict(params)))
        return ProviderResponse(status=200, data=dict(params))

    async def create_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._echo("create_completion", params)

    async def create_chat_completion(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._echo("create_chat_completion", params)

    async def create_image(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._echo("create_image", params)

    async def create_edit(self, params: Mapping[str, Any]) -> ProviderResponse:
        return await self._echo("create_edit", params)

    async def create_transcription(self, file: BinaryIO, model: str, *options: Any) -> ProviderResponse:
        self.calls.append(("create_transcription", (file.read(), model, *options)))
        return ProviderResponse(status=200, data={"text": "transcribed", "model": model})


class RecordingFetcher:
    """ArtifactFetcher stub: returns canned bytes, or raises for listed URLs."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.fetched: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.fetched.append(url)
        if url in self.failing:
            msg = f"fetch failed for {url}"
            raise OSError(msg)
        return url.encode()


@pytest.fixture
def echo_provider() -> EchoProvider:
    return EchoProvider()


@pytest.fixture
def fetcher() -> RecordingFetcher:
    return RecordingFetcher()


@pytest.fixture
def gateway(echo_provider: EchoProvider, fetcher: RecordingFetcher, tmp_path: Any) -> Gateway:
    artifacts = ArtifactProcessor(fetcher, output_dir=tmp_path)
    return Gateway(echo_provider, artifacts=artifacts)
