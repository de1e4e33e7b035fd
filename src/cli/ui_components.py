"""Rich UI components for the CLI.

Keeps command functions free of presentation details.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import Outcome, PipelineResult

_OUTCOME_STYLES: dict[Outcome, str] = {
    Outcome.PUBLISHED: "green",
    Outcome.NO_CHANGE: "yellow",
    Outcome.POLICY_CANCELLED: "dim",
    Outcome.DECLINED: "dim",
}


def print_result(result: PipelineResult, *, console: Console, err_console: Console) -> None:
    """Print the closing line of a run (errors go to stderr)."""

    if not result.message:
        return
    if result.outcome is Outcome.FAILED:
        err_console.print(Text.assemble(("Error: ", "bold red"), result.message))
        return
    style = _OUTCOME_STYLES.get(result.outcome, "white")
    console.print(Text(result.message, style=style))


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
