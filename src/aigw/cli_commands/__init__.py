"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from aigw.cli_commands.capabilities import chat, complete, edit, image, transcribe

    cli.add_command(complete)
    cli.add_command(chat)
    cli.add_command(image)
    cli.add_command(transcribe)
    cli.add_command(edit)
