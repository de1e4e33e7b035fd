"""Application settings.

Notes:
- Environment variables only (pydantic-settings); no config file is read.
- Settings configure adapters (store client, editor, diff); the core services
  take plain arguments.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central configuration, validated at the edge (env vars)."""

    model_config = SettingsConfigDict(
        env_prefix="S3VIM_",
        extra="ignore",
        case_sensitive=False,
    )

    aws_profile: str | None = Field(
        default=None,
        description="Named AWS profile for the boto3 session.",
    )
    aws_region: str | None = Field(
        default=None,
        description="Region for the S3 client (falls back to boto3's own resolution).",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint (MinIO or any S3-compatible store).",
    )

    editor: str | None = Field(
        default=None,
        description="Editor command; takes precedence over $VISUAL / $EDITOR.",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when canonicalizing JSON objects.",
    )
    diff_context_lines: int = Field(
        default=3,
        ge=0,
        le=20,
        description="Unchanged lines shown around each hunk of the diff.",
    )
