"""Image generation adapter with artifact post-processing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aigw.artifacts.processor import ArtifactProcessor
from aigw.capabilities.defaults import IMAGE_DEFAULTS, merge_options
from aigw.core.errors import MissingContentError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher


async def image_generation(
    dispatcher: RequestDispatcher,
    artifacts: ArtifactProcessor,
    prompt: str,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Generate images for *prompt* and persist each one locally.

    The raw provider payload is returned whatever happens to the individual
    artifacts; their outcomes are logged and reported by *artifacts*.
    """
    if not prompt or not prompt.strip():
        raise MissingContentError("prompt", "image generation")

    params = {"prompt": prompt, **merge_options(IMAGE_DEFAULTS, options)}
    envelope = await dispatcher.send(Operation.CREATE_IMAGE, params)

    if envelope.ok:
        await artifacts.process(envelope.data)
    return envelope.data
