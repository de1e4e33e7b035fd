"""External editor adapter.

Seeds a transient file, hands it to an editor program and reads it back.

Editor resolution order:
1) explicit command (settings `S3VIM_EDITOR`)
2) $VISUAL
3) $EDITOR
4) first of vim / vi / nano found on PATH
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path

from core.domain.errors import EditorError

logger = logging.getLogger(__name__)

FALLBACK_EDITORS = ("vim", "vi", "nano")
SEED_FILENAME = "s3vim"
TEXT_ENCODING = "utf-8"


def resolve_editor_command(explicit: str | None = None) -> list[str] | None:
    """Editor argv prefix, or None when nothing usable is configured/installed."""

    for raw in (explicit, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if raw and raw.strip():
            return shlex.split(raw)

    for candidate in FALLBACK_EDITORS:
        if shutil.which(candidate):
            return [candidate]
    return None


class ExternalEditor:
    """InteractiveEditor backed by a program such as vim."""

    def __init__(self, command: str | None = None) -> None:
        self._command = command

    def edit(self, initial_text: str, *, suffix: str = "") -> str:
        editor_cmd = resolve_editor_command(self._command)
        if not editor_cmd:
            raise EditorError("No editor found. Set $EDITOR or $VISUAL.")

        # The directory (and the seed file in it) is removed on every exit path,
        # KeyboardInterrupt included.
        with tempfile.TemporaryDirectory(prefix="s3vim-") as tmp_dir:
            path = Path(tmp_dir) / f"{SEED_FILENAME}{suffix}"
            path.write_text(initial_text, encoding=TEXT_ENCODING)

            logger.debug("Launching editor: %s", editor_cmd[0])
            try:
                subprocess.run([*editor_cmd, str(path)], check=True)
            except FileNotFoundError as exc:
                raise EditorError(f"Editor not found: {editor_cmd[0]}") from exc
            except subprocess.CalledProcessError as exc:
                raise EditorError(
                    f"Editor '{editor_cmd[0]}' exited with status {exc.returncode}"
                ) from exc

            return path.read_text(encoding=TEXT_ENCODING)
