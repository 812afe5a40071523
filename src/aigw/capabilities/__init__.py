"""Capability adapters and the Gateway facade."""

from aigw.capabilities.chat import chat_completion
from aigw.capabilities.completion import text_completion
from aigw.capabilities.defaults import merge_options
from aigw.capabilities.edit import edit
from aigw.capabilities.gateway import Gateway
from aigw.capabilities.images import image_generation
from aigw.capabilities.models import ChatFunction, ChatMessage, ChatRole
from aigw.capabilities.transcription import transcription, transcription_options

__all__ = [
    "ChatFunction",
    "ChatMessage",
    "ChatRole",
    "Gateway",
    "chat_completion",
    "edit",
    "image_generation",
    "merge_options",
    "text_completion",
    "transcription",
    "transcription_options",
]
