"""Artifact references found in a generation payload, and per-artifact outcomes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator


class ArtifactReference(BaseModel):
    """Pointer to generated content: a URL to fetch, or inline base64 bytes."""

    index: int
    url: str | None = None
    b64_json: str | None = None

    @model_validator(mode="after")
    def _has_locator(self) -> ArtifactReference:
        if not self.url and not self.b64_json:
            msg = f"artifact {self.index} has neither 'url' nor 'b64_json'"
            raise ValueError(msg)
        return self


class ArtifactOutcome(BaseModel):
    """What happened to one artifact: where it was written, or why it was not."""

    index: int
    path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_references(payload: Any) -> list[ArtifactReference]:
    """Collect the artifact references in an image payload's ``data`` array.

    The ordinal of each item in the array becomes its ``index``; items that
    carry no locator are skipped.
    """
    if not isinstance(payload, dict):
        return []
    items = payload.get("data")
    if not isinstance(items, list):
        return []

    refs: list[ArtifactReference] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict) or not (item.get("url") or item.get("b64_json")):
            continue
        refs.append(ArtifactReference(index=index, url=item.get("url"), b64_json=item.get("b64_json")))
    return refs
