"""Location string -> `Coordinate`.

Accepted form: `[scheme://][/]container/item[.ext]`.
"""

from __future__ import annotations

import re

from core.domain.errors import InvalidArgument, InvalidFormat
from core.domain.models import Coordinate

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def extension_of(item: str) -> str:
    """Lower-cased text after the last '.' of the item's final segment, or ''."""

    name = item.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def parse_location(raw: object) -> Coordinate:
    """Parse the single CLI argument into a coordinate.

    Pure function: no I/O.

    Raises:
        InvalidArgument: `raw` is missing or not a string.
        InvalidFormat: no container or no item portion after stripping.
    """

    if not isinstance(raw, str):
        raise InvalidArgument(raw)

    path = _SCHEME_RE.sub("", raw, count=1)
    if path.startswith("/"):
        path = path[1:]

    container, _, item = path.partition("/")
    if not container or not item:
        raise InvalidFormat(raw)

    return Coordinate(container=container, item=item, extension=extension_of(item))
