"""Text completion adapter."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from aigw.capabilities.defaults import COMPLETION_DEFAULTS, COMPLETION_MODEL, merge_options
from aigw.core.errors import MissingContentError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher


async def text_completion(
    dispatcher: RequestDispatcher,
    prompt: str | Sequence[str],
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Complete *prompt* (one string or an ordered batch of strings)."""
    if not _has_prompt(prompt):
        raise MissingContentError("prompt", "text completion")

    params = {
        "model": COMPLETION_MODEL,
        "prompt": prompt if isinstance(prompt, str) else list(prompt),
        **merge_options(COMPLETION_DEFAULTS, options),
    }
    envelope = await dispatcher.send(Operation.CREATE_COMPLETION, params)
    return envelope.data


def _has_prompt(prompt: str | Sequence[str]) -> bool:
    if isinstance(prompt, str):
        return bool(prompt.strip())
    return len(prompt) > 0
