"""ArtifactProcessor: concurrent, failure-isolated fetch-and-persist.

Each artifact runs its own fetch-then-write task. A failure in one task is
captured as that artifact's :class:`ArtifactOutcome` and never cancels or
corrupts its siblings. Files are named by ordinal index, not completion
order, which is what keeps concurrent writes collision-free.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from aigw.artifacts.fetcher import ArtifactFetcher
from aigw.artifacts.models import ArtifactOutcome, ArtifactReference, extract_references
from aigw.core.errors import ArtifactError
from aigw.utils.telemetry import ATTR_ARTIFACT_COUNT, ATTR_ARTIFACT_FAILED, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

OutcomeObserver = Callable[[list[ArtifactOutcome]], None]


class ArtifactProcessor:
    """Persist every artifact referenced by a generation payload."""

    def __init__(
        self,
        fetcher: ArtifactFetcher,
        *,
        output_dir: Path = Path("."),
        basename: str = "image",
        extension: str = ".jpg",
        observer: OutcomeObserver | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._output_dir = output_dir
        self._basename = basename
        self._extension = extension
        self._observer = observer

    @property
    def fetcher(self) -> ArtifactFetcher:
        return self._fetcher

    def path_for(self, index: int) -> Path:
        """``<output_dir>/<basename><index><extension>``, e.g. ``./image0.jpg``."""
        return self._output_dir / f"{self._basename}{index}{self._extension}"

    async def process(self, payload: Any) -> list[ArtifactOutcome]:
        """Fetch and write every artifact in *payload*; return outcomes by index."""
        return await self.persist_all(extract_references(payload))

    async def persist_all(self, refs: Sequence[ArtifactReference]) -> list[ArtifactOutcome]:
        with _tracer.start_as_current_span("aigw.artifacts") as span:
            span.set_attribute(ATTR_ARTIFACT_COUNT, len(refs))
            outcomes = list(await asyncio.gather(*[self._persist_one(ref) for ref in refs]))
            outcomes.sort(key=lambda o: o.index)
            failed = [o for o in outcomes if not o.ok]
            span.set_attribute(ATTR_ARTIFACT_FAILED, len(failed))

        for outcome in failed:
            logger.error("artifact %d failed: %s", outcome.index, outcome.error)
        logger.info("artifacts persisted: %d/%d", len(outcomes) - len(failed), len(outcomes))

        if self._observer is not None:
            try:
                self._observer(outcomes)
            except Exception:
                logger.exception("artifact observer failed")
        return outcomes

    async def _persist_one(self, ref: ArtifactReference) -> ArtifactOutcome:
        try:
            content = await self._load(ref)
            path = self.path_for(ref.index)
            await asyncio.to_thread(_write_bytes, path, content)
        except Exception as exc:
            return ArtifactOutcome(index=ref.index, error=str(exc) or type(exc).__name__)
        return ArtifactOutcome(index=ref.index, path=path)

    async def _load(self, ref: ArtifactReference) -> bytes:
        if ref.b64_json:
            return base64.b64decode(ref.b64_json)
        if not ref.url:
            raise ArtifactError(ref.index, "no locator")
        return await self._fetcher.fetch(ref.url)


def _write_bytes(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
