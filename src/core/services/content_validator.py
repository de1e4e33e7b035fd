"""Content validation and canonicalization.

Rules:
- Structured formats (registry below) are parsed leniently and written back
  in strict canonical form with fixed indentation.
- Every other extension passes through untouched.
- Output is deterministic: `ensure_content(ensure_content(t, e), e)` equals
  `ensure_content(t, e)`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

import json5

from core.domain.errors import ContentValidationError

TEXT_ENCODING = "utf-8"
PLAIN_TEXT_MIME = "text/plain"


@dataclass(frozen=True)
class StructuredFormat:
    """A format whose content is validated before publishing."""

    name: str
    mime_type: str
    parse: Callable[[str], Any]
    dump: Callable[[Any, int], str]


def _dump_json(value: Any, indent: int) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


STRUCTURED_FORMATS: dict[str, StructuredFormat] = {
    "json": StructuredFormat(
        name="json",
        mime_type="application/json",
        parse=json5.loads,
        dump=_dump_json,
    ),
}


def ensure_content(text: str, extension: str, *, indent: int = 2) -> str:
    """Return the canonical form of `text` for the given extension hint.

    Raises:
        ContentValidationError: the extension names a structured format and
            `text` does not parse (or cannot be written back strictly).
    """

    fmt = STRUCTURED_FORMATS.get(extension.lower())
    if fmt is None:
        return text

    try:
        value = fmt.parse(text)
        out = fmt.dump(value, indent)
        # Escaped surrogate pairs become real characters; a lone surrogate
        # (e.g. "\ud800") fails here since it cannot be published as UTF-8.
        out = out.encode("utf-16", "surrogatepass").decode("utf-16")
        out.encode(TEXT_ENCODING)
    except ValueError as exc:
        raise ContentValidationError(fmt.name, exc) from exc
    return out


def content_type_for(extension: str) -> str:
    """MIME type (with charset) used when publishing an object."""

    fmt = STRUCTURED_FORMATS.get(extension.lower())
    mime = fmt.mime_type if fmt else PLAIN_TEXT_MIME
    return f"{mime}; charset={TEXT_ENCODING}"
