"""``aigw complete|chat|image|transcribe|edit``: one command per capability."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import click

from aigw.capabilities.gateway import Gateway
from aigw.capabilities.models import ChatMessage
from aigw.cli_commands._output import console, print_artifact_outcomes, print_payload
from aigw.core.config import GatewayConfig, load_config
from aigw.core.errors import ConfigError, MissingContentError
from aigw.utils.telemetry import configure_telemetry

GatewayCall = Callable[[Gateway], Awaitable[Any]]


def _resolve_config(ctx: click.Context) -> GatewayConfig:
    config_path = (ctx.obj or {}).get("config_path")
    try:
        if config_path:
            return load_config(Path(config_path))
        return GatewayConfig.from_env()
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def _run(ctx: click.Context, call: GatewayCall) -> None:
    """Open a gateway from config, run *call*, print the returned payload."""
    config = _resolve_config(ctx)
    try:
        configure_telemetry(config.telemetry)
    except ImportError as exc:
        console.print(f"[red]Telemetry error:[/red] {exc}")
        sys.exit(1)

    async def _invoke() -> Any:
        async with Gateway.from_config(config, observer=print_artifact_outcomes) as gateway:
            return await call(gateway)

    try:
        payload = asyncio.run(_invoke())
    except MissingContentError as exc:
        console.print(f"[red]Invalid request:[/red] {exc}")
        sys.exit(1)

    print_payload(payload)


def _options(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@click.command()
@click.argument("prompt")
@click.option("--temperature", type=float, default=None)
@click.option("--max-tokens", type=int, default=None)
@click.pass_context
def complete(ctx: click.Context, prompt: str, temperature: float | None, max_tokens: int | None) -> None:
    """Complete PROMPT with the text completion model."""
    options = _options(temperature=temperature, max_tokens=max_tokens)
    _run(ctx, lambda gw: gw.text_completion(prompt, options))


@click.command()
@click.option(
    "--message",
    "-m",
    "messages",
    multiple=True,
    help="A 'role:content' message; repeat for a conversation.",
)
@click.option("--temperature", type=float, default=None)
@click.pass_context
def chat(ctx: click.Context, messages: tuple[str, ...], temperature: float | None) -> None:
    """Send a conversation to the chat model."""
    try:
        parsed = [ChatMessage.parse(m) for m in messages]
    except ValueError as exc:
        console.print(f"[red]Invalid message:[/red] {exc}")
        sys.exit(1)
    options = _options(temperature=temperature)
    _run(ctx, lambda gw: gw.chat_completion(parsed, options=options))


@click.command()
@click.argument("prompt")
@click.option("-n", "count", type=int, default=None, help="Number of images.")
@click.option("--size", default=None, help="e.g. 256x256, 512x512, 1024x1024.")
@click.pass_context
def image(ctx: click.Context, prompt: str, count: int | None, size: str | None) -> None:
    """Generate images for PROMPT and save them locally."""
    options = _options(n=count, size=size)
    _run(ctx, lambda gw: gw.image_generation(prompt, options))


@click.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--language", default=None, help="ISO-639-1 language of the audio.")
@click.option("--prompt", default=None)
@click.pass_context
def transcribe(ctx: click.Context, file: str, language: str | None, prompt: str | None) -> None:
    """Transcribe the audio FILE."""
    options = _options(language=language, prompt=prompt)
    _run(ctx, lambda gw: gw.transcription(file, options))


@click.command()
@click.argument("instruction")
@click.argument("input_text", default="")
@click.option("--temperature", type=float, default=None)
@click.pass_context
def edit(ctx: click.Context, instruction: str, input_text: str, temperature: float | None) -> None:
    """Apply INSTRUCTION to INPUT_TEXT."""
    options = _options(temperature=temperature)
    _run(ctx, lambda gw: gw.edit(instruction, input_text, options))
