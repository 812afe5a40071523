"""Chat message and function schemas accepted by the chat adapter."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatFunction(BaseModel):
    """A function the chat model may ask to call."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})


class ChatMessage(BaseModel):
    """A role-tagged chat message.

    Roles are restricted to system, user and assistant here; the chat adapter
    itself also forwards plain dicts untouched.
    """

    role: ChatRole
    content: str
    name: str | None = None
    function_call: dict[str, Any] | None = None

    @classmethod
    def system(cls, content: str) -> ChatMessage:
        return cls(role=ChatRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> ChatMessage:
        return cls(role=ChatRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> ChatMessage:
        return cls(role=ChatRole.ASSISTANT, content=content)

    @classmethod
    def parse(cls, spec: str) -> ChatMessage:
        """Build a message from ``"role:content"`` text, e.g. ``"user:hello"``."""
        role, sep, content = spec.partition(":")
        if not sep:
            msg = f"expected 'role:content', got {spec!r}"
            raise ValueError(msg)
        return cls(role=ChatRole(role.strip().lower()), content=content.strip())
