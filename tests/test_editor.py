"""Tests for the external editor adapter (subprocess is faked)."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from adapters.editor import ExternalEditor, resolve_editor_command
from core.domain.errors import EditorError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


class _FakeEditorRun:
    """Stands in for `subprocess.run`: records the call and rewrites the file."""

    def __init__(self, new_text: str | None = None, exc: BaseException | None = None) -> None:
        self.new_text = new_text
        self.exc = exc
        self.argv: list[str] = []
        self.seed: str | None = None

    @property
    def path(self) -> Path:
        return Path(self.argv[-1])

    def __call__(self, argv, **kwargs):
        self.argv = list(argv)
        self.seed = self.path.read_text(encoding="utf-8")
        if self.exc is not None:
            raise self.exc
        if self.new_text is not None:
            self.path.write_text(self.new_text, encoding="utf-8")
        return subprocess.CompletedProcess(argv, 0)


class TestResolveEditor:
    def test_explicit_command_wins(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "nano")

        assert resolve_editor_command("code --wait") == ["code", "--wait"]

    def test_visual_before_editor(self, monkeypatch):
        monkeypatch.setenv("VISUAL", "emacs -nw")
        monkeypatch.setenv("EDITOR", "nano")

        assert resolve_editor_command() == ["emacs", "-nw"]

    def test_fallback_to_path(self, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/vi" if name == "vi" else None)

        assert resolve_editor_command() == ["vi"]

    def test_nothing_available(self, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda name: None)

        assert resolve_editor_command() is None


class TestExternalEditor:
    def test_round_trip(self, monkeypatch):
        fake = _FakeEditorRun(new_text='{"a": 1}\n')
        monkeypatch.setattr(subprocess, "run", fake)

        result = ExternalEditor("myeditor -f").edit("seed text", suffix=".json")

        assert result == '{"a": 1}\n'
        assert fake.seed == "seed text"
        assert fake.argv[:2] == ["myeditor", "-f"]
        assert fake.path.suffix == ".json"
        assert not fake.path.parent.exists()

    def test_untouched_file_returns_seed(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeEditorRun())

        assert ExternalEditor("ed").edit("same") == "same"

    def test_nonzero_exit_raises_and_cleans_up(self, monkeypatch):
        fake = _FakeEditorRun(exc=subprocess.CalledProcessError(2, ["ed"]))
        monkeypatch.setattr(subprocess, "run", fake)

        with pytest.raises(EditorError, match="status 2"):
            ExternalEditor("ed").edit("x")

        assert not fake.path.parent.exists()

    def test_missing_binary_raises(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", _FakeEditorRun(exc=FileNotFoundError("nope")))

        with pytest.raises(EditorError, match="Editor not found"):
            ExternalEditor("does-not-exist").edit("x")

    def test_interrupt_still_cleans_up(self, monkeypatch):
        fake = _FakeEditorRun(exc=KeyboardInterrupt())
        monkeypatch.setattr(subprocess, "run", fake)

        with pytest.raises(KeyboardInterrupt):
            ExternalEditor("ed").edit("x")

        assert not fake.path.parent.exists()

    def test_no_editor_configured(self, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda name: None)

        with pytest.raises(EditorError, match="No editor found"):
            ExternalEditor().edit("x")
