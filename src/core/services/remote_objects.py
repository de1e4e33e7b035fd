"""Fetch and publish steps, written against the `ObjectStore` port.

Text policy (fetch):
- An object is text only when it is *declared* UTF-8: Content-Encoding is
  `utf-8`, or Content-Type carries `charset=utf-8`.
- A declared body that still fails strict UTF-8 decoding is rejected too.
- A missing body is the empty string.
"""

from __future__ import annotations

import logging

from core.domain.errors import BinaryContent, ObjectNotFound
from core.domain.models import AccessPolicy, Coordinate, StoredObject
from core.interfaces.storage import ObjectStore
from core.services.content_validator import TEXT_ENCODING, content_type_for

logger = logging.getLogger(__name__)


def _normalize(token: str) -> str:
    return token.strip().strip('"').lower().replace("_", "-")


def is_declared_text(obj: StoredObject) -> bool:
    """True when the stored object declares a UTF-8 text payload."""

    if obj.content_encoding and _normalize(obj.content_encoding) == TEXT_ENCODING:
        return True

    if obj.content_type:
        for param in obj.content_type.split(";")[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "charset" and _normalize(value) == TEXT_ENCODING:
                return True
    return False


class ObjectFetcher:
    """RemoteFetcher over an `ObjectStore`."""

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def fetch(self, coord: Coordinate) -> str | None:
        try:
            obj = self._store.get(coord.container, coord.item)
        except ObjectNotFound:
            logger.debug("No prior object at %s", coord)
            return None

        if not is_declared_text(obj):
            raise BinaryContent(str(coord))

        if obj.body is None:
            return ""
        try:
            text = obj.body.decode(TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise BinaryContent(str(coord), exc) from exc

        logger.debug("Fetched %s (%d bytes)", coord, len(obj.body))
        return text


class ObjectPublisher:
    """RemotePublisher over an `ObjectStore`; a plain write, last write wins."""

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def publish(self, coord: Coordinate, text: str, policy: AccessPolicy) -> None:
        body = text.encode(TEXT_ENCODING)
        self._store.put(
            coord.container,
            coord.item,
            body,
            content_type=content_type_for(coord.extension),
            content_encoding=TEXT_ENCODING,
            policy=policy,
        )
        logger.debug("Published %s (%d bytes, %s)", coord, len(body), policy.value)
