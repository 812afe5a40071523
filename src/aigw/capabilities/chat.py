"""Chat completion adapter."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from aigw.capabilities.defaults import CHAT_DEFAULTS, CHAT_MODEL, merge_options
from aigw.capabilities.models import ChatFunction, ChatMessage
from aigw.core.errors import MissingContentError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher


async def chat_completion(
    dispatcher: RequestDispatcher,
    messages: Sequence[ChatMessage | Mapping[str, Any]],
    functions: Sequence[ChatFunction | Mapping[str, Any]] | None = None,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Send a conversation to the chat model.

    Raises:
        MissingContentError: If *messages* is empty; nothing is dispatched.
    """
    if not messages:
        raise MissingContentError("messages", "chat completion")

    params: dict[str, Any] = {
        "model": CHAT_MODEL,
        "messages": [_to_payload(m) for m in messages],
    }
    if functions:
        params["functions"] = [_to_payload(f) for f in functions]
    params.update(merge_options(CHAT_DEFAULTS, options))

    envelope = await dispatcher.send(Operation.CREATE_CHAT_COMPLETION, params)
    return envelope.data


def _to_payload(item: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", exclude_none=True)
    return dict(item)
