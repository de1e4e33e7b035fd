"""Contracts of the pluggable pipeline steps.

Each step is a narrow capability so that the orchestration never depends on
a particular store, editor or terminal UI. None of them may terminate the
process: cancellations come back as `Abort` values.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Abort, AccessPolicy, Coordinate


@runtime_checkable
class RemoteFetcher(Protocol):
    def fetch(self, coord: Coordinate) -> str | None:
        """Current text of the object, or None when it does not exist yet."""

        ...


@runtime_checkable
class InteractiveEditor(Protocol):
    def edit(self, initial_text: str, *, suffix: str = "") -> str:
        """Blocking human edit session; returns whatever text is left behind.

        `suffix` is a file-name hint (e.g. ".json") for syntax highlighting.
        """

        ...


@runtime_checkable
class DiffPresenter(Protocol):
    def show(self, prev_text: str, next_text: str) -> None:
        ...


@runtime_checkable
class ConfirmationGate(Protocol):
    def select_policy(
        self,
        choices: list[AccessPolicy],
        default: AccessPolicy,
    ) -> AccessPolicy | Abort:
        ...

    def confirm(self, message: str) -> bool | Abort:
        ...


@runtime_checkable
class RemotePublisher(Protocol):
    def publish(self, coord: Coordinate, text: str, policy: AccessPolicy) -> None:
        ...
