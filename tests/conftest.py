"""Pytest configuration and shared fakes for s3vim tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is importable
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from core.domain.errors import NoSuchContainer, ObjectNotFound  # noqa: E402
from core.domain.models import Abort, AccessPolicy, Coordinate, StoredObject  # noqa: E402


class FakeStore:
    """In-memory ObjectStore."""

    def __init__(self, buckets: dict[str, dict[str, StoredObject]] | None = None) -> None:
        self.buckets = buckets if buckets is not None else {}
        self.puts: list[dict] = []

    def get(self, container: str, item: str) -> StoredObject:
        if container not in self.buckets:
            raise NoSuchContainer(container)
        if item not in self.buckets[container]:
            raise ObjectNotFound(container, item)
        return self.buckets[container][item]

    def put(self, container, item, body, *, content_type, content_encoding, policy) -> None:
        self.puts.append(
            {
                "container": container,
                "item": item,
                "body": body,
                "content_type": content_type,
                "content_encoding": content_encoding,
                "policy": policy,
            }
        )


class FakeFetcher:
    def __init__(self, text: str | None = None, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[Coordinate] = []

    def fetch(self, coord: Coordinate) -> str | None:
        self.calls.append(coord)
        if self.error is not None:
            raise self.error
        return self.text


class FakeEditor:
    def __init__(self, result: str | None = None) -> None:
        self.result = result
        self.seeds: list[tuple[str, str]] = []

    def edit(self, initial_text: str, *, suffix: str = "") -> str:
        self.seeds.append((initial_text, suffix))
        return initial_text if self.result is None else self.result


class FakeDiff:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def show(self, prev_text: str, next_text: str) -> None:
        self.calls.append((prev_text, next_text))


class FakeGate:
    def __init__(
        self,
        policy: AccessPolicy | Abort = AccessPolicy.PRIVATE,
        answer: bool | Abort = True,
    ) -> None:
        self.policy = policy
        self.answer = answer
        self.selections = 0
        self.offered: list[tuple[list, AccessPolicy]] = []
        self.questions: list[str] = []

    def select_policy(self, choices, default):
        self.selections += 1
        self.offered.append((list(choices), default))
        return self.policy

    def confirm(self, message: str):
        self.questions.append(message)
        return self.answer


class FakePublisher:
    def __init__(self) -> None:
        self.calls: list[tuple[Coordinate, str, AccessPolicy]] = []

    def publish(self, coord: Coordinate, text: str, policy: AccessPolicy) -> None:
        self.calls.append((coord, text, policy))


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore({"mybucket": {}})


@pytest.fixture
def diff() -> FakeDiff:
    return FakeDiff()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()
