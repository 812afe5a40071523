"""Fixed models and default options per capability, and the option merge."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

COMPLETION_MODEL = "text-davinci-003"
CHAT_MODEL = "gpt-3.5-turbo"
EDIT_MODEL = "text-davinci-edit-001"
TRANSCRIPTION_MODEL = "whisper-1"

COMPLETION_DEFAULTS: Mapping[str, Any] = MappingProxyType({"temperature": 0.6, "max_tokens": 356})
CHAT_DEFAULTS: Mapping[str, Any] = MappingProxyType({"temperature": 0.6})
IMAGE_DEFAULTS: Mapping[str, Any] = MappingProxyType({"n": 2, "size": "1024x1024"})
EDIT_DEFAULTS: Mapping[str, Any] = MappingProxyType({"temperature": 1})

# Order matters: the provider takes these positionally after (file, model).
TRANSCRIPTION_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "prompt": "Your optional prompt text",
        "response_format": "json",
        "temperature": 0.5,
    }
)


def merge_options(
    defaults: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Shallow merge: caller keys win over defaults, key by key."""
    return {**defaults, **(options or {})}
