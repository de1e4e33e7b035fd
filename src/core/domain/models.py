"""Domain models (Pydantic v2).

Notes:
- These models describe *what* is being edited (coordinate, policy, outcome),
  not *how* it is fetched or published.
- Everything here is immutable once built: one object in flight per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Coordinate(BaseModel):
    """Address of a single remote object.

    Built once per invocation from the command-line location and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    container: str = Field(
        ...,
        min_length=1,
        description="Bucket / container name.",
    )
    item: str = Field(
        ...,
        min_length=1,
        description="Object key inside the container (may contain '/').",
    )
    extension: str = Field(
        default="",
        description="Lower-cased suffix after the last '.' of the item, or empty.",
    )

    def __str__(self) -> str:
        return f"{self.container}/{self.item}"


class AccessPolicy(str, Enum):
    """Closed set of visibility settings applied on publish (canned ACLs)."""

    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AUTHENTICATED_READ = "authenticated-read"
    AWS_EXEC_READ = "aws-exec-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"

    @classmethod
    def default(cls) -> "AccessPolicy":
        """Policy pre-selected in the prompt."""

        return cls.PRIVATE


class StoredObject(BaseModel):
    """Raw object as returned by an `ObjectStore`, before any text decoding."""

    model_config = ConfigDict(frozen=True)

    body: bytes | None = Field(
        default=None,
        description="Payload bytes (None when the store returned no body).",
    )
    content_encoding: str | None = Field(
        default=None,
        description="Declared Content-Encoding header, if any.",
    )
    content_type: str | None = Field(
        default=None,
        description="Declared Content-Type header, if any.",
    )


@dataclass(frozen=True)
class Abort:
    """Benign termination requested by the operator (cancel / Ctrl-C)."""

    reason: str = "cancelled"


class Outcome(str, Enum):
    """Terminal state reached by the edit pipeline."""

    PUBLISHED = "published"
    NO_CHANGE = "no_change"
    POLICY_CANCELLED = "policy_cancelled"
    DECLINED = "declined"
    FAILED = "failed"


class PipelineResult(BaseModel):
    """What the pipeline hands back to the CLI layer."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    exit_code: int = Field(default=0, ge=0)
    message: str | None = None
    coordinate: Coordinate | None = None
    policy: AccessPolicy | None = None
