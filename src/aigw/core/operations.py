"""Closed enumeration of the provider operations the gateway can dispatch."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any


def _first_choice(payload: Any) -> dict[str, Any] | None:
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    return choices[0]


def _choice_text(payload: Any) -> Any:
    choice = _first_choice(payload)
    return choice.get("text") if choice else None


def _choice_message_content(payload: Any) -> Any:
    choice = _first_choice(payload)
    if not choice or not isinstance(choice.get("message"), dict):
        return None
    return choice["message"].get("content")


def _data_array(payload: Any) -> Any:
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    return data if isinstance(data, list) else None


def _transcript_text(payload: Any) -> Any:
    if not isinstance(payload, dict):
        return None
    return payload.get("text")


class Operation(str, Enum):
    """Provider operations, each bound to one provider coroutine method."""

    CREATE_COMPLETION = "createCompletion"
    CREATE_CHAT_COMPLETION = "createChatCompletion"
    CREATE_IMAGE = "createImage"
    CREATE_TRANSCRIPTION = "createTranscription"
    CREATE_EDIT = "createEdit"

    @property
    def method_name(self) -> str:
        return _METHOD_NAMES[self]

    @property
    def file_bearing(self) -> bool:
        """Whether the provider takes this operation's arguments positionally with a stream."""
        return self is Operation.CREATE_TRANSCRIPTION

    def extract_result(self, payload: Any) -> Any:
        """Pull the short result for this operation out of *payload*, or ``None``."""
        return _EXTRACTORS[self](payload)


_METHOD_NAMES: dict[Operation, str] = {
    Operation.CREATE_COMPLETION: "create_completion",
    Operation.CREATE_CHAT_COMPLETION: "create_chat_completion",
    Operation.CREATE_IMAGE: "create_image",
    Operation.CREATE_TRANSCRIPTION: "create_transcription",
    Operation.CREATE_EDIT: "create_edit",
}

_EXTRACTORS: dict[Operation, Callable[[Any], Any]] = {
    Operation.CREATE_COMPLETION: _choice_text,
    Operation.CREATE_CHAT_COMPLETION: _choice_message_content,
    Operation.CREATE_IMAGE: _data_array,
    Operation.CREATE_TRANSCRIPTION: _transcript_text,
    Operation.CREATE_EDIT: _choice_text,
}
