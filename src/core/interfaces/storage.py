"""Object store contract.

The pipeline only needs "get object by coordinate" and "put object at
coordinate with access policy"; any bucket-style backend (S3, MinIO,
an in-memory fake) can satisfy it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AccessPolicy, StoredObject


@runtime_checkable
class ObjectStore(Protocol):
    """Minimal bucket/key store."""

    def get(self, container: str, item: str) -> StoredObject:
        """Return the stored object.

        Raises:
            ObjectNotFound: the container exists but the item does not.
            NoSuchContainer: the container itself does not exist.
        """

        ...

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
        """Write `body` at `container/item`; succeeds or raises."""

        ...
