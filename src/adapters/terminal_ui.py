"""Terminal UI adapters (Rich): diff rendering and prompts.

Cancelling a prompt (Ctrl-C / Ctrl-D) is the same as answering "no": the
gate returns an `Abort` value and never exits the process itself.
"""

from __future__ import annotations

import difflib

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.text import Text

from core.domain.models import Abort, AccessPolicy

_LINE_STYLES = (
    ("@@", "cyan"),
    ("+", "green"),
    ("-", "red"),
)


def build_diff_text(prev_text: str, next_text: str, *, context: int = 3) -> Text | None:
    """Line-level unified diff as styled Rich text, or None if nothing differs."""

    lines = list(
        difflib.unified_diff(
            prev_text.splitlines(),
            next_text.splitlines(),
            fromfile="remote",
            tofile="edited",
            n=context,
            lineterm="",
        )
    )
    if not lines:
        return None

    text = Text()
    for index, line in enumerate(lines):
        if index < 2:
            style = "bold"  # ---/+++ file headers
        else:
            style = next((s for prefix, s in _LINE_STYLES if line.startswith(prefix)), "dim")
        text.append(line + "\n", style=style)
    return text


class RichDiffPresenter:
    """DiffPresenter printing a two-color unified diff."""

    def __init__(self, console: Console | None = None, *, context: int = 3) -> None:
        self._console = console or Console()
        self._context = context

    def show(self, prev_text: str, next_text: str) -> None:
        diff = build_diff_text(prev_text, next_text, context=self._context)
        if diff is None:
            self._console.print("[dim](no textual differences)[/dim]")
            return
        self._console.print(diff, end="")


class RichConfirmationGate:
    """ConfirmationGate using Rich prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def select_policy(
        self,
        choices: list[AccessPolicy],
        default: AccessPolicy,
    ) -> AccessPolicy | Abort:
        try:
            answer = Prompt.ask(
                "Access policy (ACL)",
                console=self._console,
                choices=[c.value for c in choices],
                default=default.value,
            )
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return Abort("policy selection cancelled")
        return AccessPolicy(answer)

    def confirm(self, message: str) -> bool | Abort:
        try:
            return Confirm.ask(Text(message), console=self._console, default=False)
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return Abort("confirmation cancelled")
