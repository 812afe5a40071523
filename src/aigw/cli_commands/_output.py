"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from aigw.artifacts.models import ArtifactOutcome  # noqa: TC001

console = Console()


def print_payload(payload: Any) -> None:
    """Print a provider payload (or normalized failure body) as JSON."""
    if isinstance(payload, (dict, list)):
        console.print_json(json.dumps(payload, default=str))
    else:
        console.print(payload)


def print_artifact_outcomes(outcomes: list[ArtifactOutcome]) -> None:
    """Pretty-print per-artifact results as a table."""
    if not outcomes:
        return

    table = Table(title="Artifacts")
    table.add_column("Index", style="cyan")
    table.add_column("File")
    table.add_column("Error", style="red")

    for outcome in outcomes:
        table.add_row(
            str(outcome.index),
            str(outcome.path) if outcome.path else "-",
            _truncate(outcome.error or ""),
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
