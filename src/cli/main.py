"""s3vim CLI.

Usage:
    s3vim [--verbose] [scheme://]bucket/key[.ext]

Exit codes:
- 0: published, no-op, or cancelled by the operator
- 1: user-facing error (bad location, missing bucket, binary object, invalid JSON)
- 70: unexpected fault (credentials, network, editor crash), shown with its traceback
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.editor import ExternalEditor
from adapters.s3_store import S3ObjectStore, build_s3_client
from adapters.terminal_ui import RichConfirmationGate, RichDiffPresenter
from core import __version__
from core.config import AppSettings
from core.services.edit_pipeline import EditPipeline
from core.services.remote_objects import ObjectFetcher, ObjectPublisher
from cli.ui_components import print_result

app = typer.Typer(
    add_completion=False,
    help="Edit a single S3 object in your editor, review the diff and publish it.",
)

_console = Console()
_err_console = Console(stderr=True)

# EX_SOFTWARE (sysexits.h): internal or environment fault.
EXIT_FAULT = 70


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # botocore is very chatty at DEBUG.
    for name in ("botocore", "boto3", "urllib3", "s3transfer"):
        logging.getLogger(name).setLevel(logging.WARNING)


def build_pipeline(settings: AppSettings | None = None) -> EditPipeline:
    """Wire the production adapters into the pipeline."""

    settings = settings or AppSettings()
    store = S3ObjectStore(build_s3_client(settings))
    return EditPipeline(
        fetcher=ObjectFetcher(store),
        editor=ExternalEditor(settings.editor),
        diff=RichDiffPresenter(_console, context=settings.diff_context_lines),
        gate=RichConfirmationGate(_console),
        publisher=ObjectPublisher(store),
        json_indent=settings.json_indent,
    )


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"s3vim {__version__}")
        raise typer.Exit()


@app.command()
def edit(
    location: Optional[str] = typer.Argument(
        None,
        metavar="LOCATION",
        help="Object to edit: [s3://]bucket/key (a .json key is validated as JSON).",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Fetch LOCATION, open it in your editor and publish the result."""

    configure_logging(verbose)
    result = build_pipeline().run(location)
    print_result(result, console=_console, err_console=_err_console)
    raise typer.Exit(code=result.exit_code)


def run() -> None:
    """Console-script entry point.

    Unexpected faults keep their full traceback but exit with `EXIT_FAULT`,
    so they never look like a user-facing error (exit code 1).
    """

    try:
        app()
    except Exception:
        _err_console.print_exception()
        sys.exit(EXIT_FAULT)
