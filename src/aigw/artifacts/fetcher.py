"""Byte-fetch transport for externally hosted artifacts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class ArtifactFetcher(Protocol):
    """Retrieves the full body at a URL as raw bytes."""

    async def fetch(self, url: str) -> bytes: ...


class HTTPArtifactFetcher:
    """Fetch artifacts over HTTP with a shared :class:`httpx.AsyncClient`.

    Usage::

        async with HTTPArtifactFetcher() as fetcher:
            content = await fetcher.fetch("https://.../image.png")
    """

    def __init__(self, timeout: float = 60.0) -> None:
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HTTPArtifactFetcher:
        self._client = httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> bytes:
        if self._client is None:
            msg = "HTTPArtifactFetcher must be used as an async context manager"
            raise RuntimeError(msg)
        response = await self._client.get(url)
        response.raise_for_status()
        return response.content
