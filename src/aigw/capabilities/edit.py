"""Text edit adapter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aigw.capabilities.defaults import EDIT_DEFAULTS, EDIT_MODEL, merge_options
from aigw.core.errors import MissingContentError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher


async def edit(
    dispatcher: RequestDispatcher,
    instruction: str,
    input: str = "",
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Apply *instruction* to *input* (empty input is allowed)."""
    if not instruction or not instruction.strip():
        raise MissingContentError("instruction", "edit")

    params = {
        "model": EDIT_MODEL,
        "instruction": instruction,
        "input": input,
        **merge_options(EDIT_DEFAULTS, options),
    }
    envelope = await dispatcher.send(Operation.CREATE_EDIT, params)
    return envelope.data
