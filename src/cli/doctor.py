"""Doctor command for environment diagnostics."""

from __future__ import annotations

import boto3
import typer
from rich.console import Console

from adapters.editor import resolve_editor_command
from cli.ui_components import build_checks_table
from core.config import AppSettings

app = typer.Typer(add_completion=False, help="Environment diagnostics for s3vim.")

_console = Console()


def _check_editor(settings: AppSettings) -> tuple[bool, str]:
    command = resolve_editor_command(settings.editor)
    if not command:
        return False, "Set $EDITOR / $VISUAL or install vim, vi or nano"
    return True, " ".join(command)


def _check_credentials(settings: AppSettings) -> tuple[bool, str]:
    """Ask boto3 for credentials without making any network call."""

    try:
        session = boto3.Session(profile_name=settings.aws_profile)
        credentials = session.get_credentials()
    except Exception as exc:
        return False, str(exc)
    if credentials is None:
        return False, "No AWS credentials found (env, shared config or instance role)"
    return True, f"method={credentials.method}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    table = build_checks_table("s3vim Doctor")

    ok_editor, detail_editor = _check_editor(settings)
    table.add_row("Editor", "OK" if ok_editor else "FAIL", detail_editor)

    ok_creds, detail_creds = _check_credentials(settings)
    table.add_row("AWS credentials", "OK" if ok_creds else "FAIL", detail_creds)

    table.add_row("AWS profile", "OK", settings.aws_profile or "(default)")
    table.add_row("AWS region", "OK", settings.aws_region or "(boto3 default)")
    table.add_row("Endpoint", "OK", settings.endpoint_url or "(AWS S3)")

    _console.print(table)

    if not ok_creds:
        _console.print(
            "\n[yellow]Note:[/yellow] configure credentials with `aws configure` "
            "or set S3VIM_AWS_PROFILE."
        )
    if not (ok_editor and ok_creds):
        raise typer.Exit(code=1)
