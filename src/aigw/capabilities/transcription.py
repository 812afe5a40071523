"""Audio transcription adapter (file-bearing dispatch)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from aigw.capabilities.defaults import TRANSCRIPTION_DEFAULTS, TRANSCRIPTION_MODEL
from aigw.core.errors import MissingContentError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher
from aigw.dispatch.models import FileRequest


def transcription_options(options: Mapping[str, Any] | None = None) -> list[Any]:
    """Ordered ``[prompt, response_format, temperature]`` plus ``language`` if given.

    A default fills a slot only when the caller left it out (or passed ``None``).
    """
    options = options or {}
    merged = [
        options[key] if options.get(key) is not None else default
        for key, default in TRANSCRIPTION_DEFAULTS.items()
    ]
    if options.get("language"):
        merged.append(options["language"])
    return merged


async def transcription(
    dispatcher: RequestDispatcher,
    file_path: str | Path,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Transcribe the audio file at *file_path*."""
    path = Path(file_path)
    if not path.is_file():
        raise MissingContentError("file", "transcription")

    with path.open("rb") as audio:
        request = FileRequest(
            file=audio,
            model=TRANSCRIPTION_MODEL,
            options=tuple(transcription_options(options)),
        )
        envelope = await dispatcher.send_with_file(Operation.CREATE_TRANSCRIPTION, request)
    return envelope.data
