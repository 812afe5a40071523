"""aigw CLI entrypoint."""

from __future__ import annotations

import logging

import click

from aigw import __version__


@click.group()
@click.version_option(version=__version__, prog_name="aigw")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file (defaults to environment variables).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log dispatch start/end lines.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """aigw: uniform access to completion, chat, image, transcription and edit."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path}


# Register subcommands
from aigw.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
