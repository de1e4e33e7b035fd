"""S3 implementation of the `ObjectStore` port (boto3).

Error mapping:
- `NoSuchKey` / `404` / `NotFound` -> `ObjectNotFound` (absent snapshot).
- `NoSuchBucket` -> `NoSuchContainer` (user-facing).
- Anything else (AccessDenied, throttling, transport) is re-raised as-is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import ClientError

from core.config import AppSettings
from core.domain.errors import NoSuchContainer, ObjectNotFound
from core.domain.models import AccessPolicy, StoredObject

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}
_NO_BUCKET_CODES = {"NoSuchBucket"}


def error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))


def build_s3_client(settings: AppSettings | None = None) -> "S3Client":
    """Create the boto3 S3 client from settings (profile, region, endpoint)."""

    settings = settings or AppSettings()
    session = boto3.Session(profile_name=settings.aws_profile)
    kwargs: dict[str, Any] = {}
    if settings.aws_region:
        kwargs["region_name"] = settings.aws_region
    if settings.endpoint_url:
        kwargs["endpoint_url"] = settings.endpoint_url
    return session.client("s3", **kwargs)


class S3ObjectStore:
    """Bucket/key store backed by an S3 client."""

    def __init__(self, client: "S3Client") -> None:
        self._client = client

    def get(self, container: str, item: str) -> StoredObject:
        logger.debug("GetObject s3://%s/%s", container, item)
        try:
            response = self._client.get_object(Bucket=container, Key=item)
        except ClientError as e:
            code = error_code(e)
            if code in _NOT_FOUND_CODES:
                raise ObjectNotFound(container, item) from e
            if code in _NO_BUCKET_CODES:
                raise NoSuchContainer(container, e) from e
            raise

        stream = response.get("Body")
        body = stream.read() if stream is not None else None
        return StoredObject(
            body=body,
            content_encoding=response.get("ContentEncoding"),
            content_type=response.get("ContentType"),
        )

    def put(
        self,
        container: str,
        item: str,
        body: bytes,
        *,
        content_type: str,
        content_encoding: str,
        policy: AccessPolicy,
    ) -> None:
        logger.debug(
            "PutObject s3://%s/%s",
            container,
            item,
            extra={"size": len(body), "content_type": content_type, "acl": policy.value},
        )
        try:
            self._client.put_object(
                Bucket=container,
                Key=item,
                Body=body,
                ContentType=content_type,
                ContentEncoding=content_encoding,
                ACL=policy.value,
            )
        except ClientError as e:
            if error_code(e) in _NO_BUCKET_CODES:
                raise NoSuchContainer(container, e) from e
            raise
