"""Error taxonomy of the edit pipeline.

Two families:
- `UserFacingError`: expected failures. The pipeline catches them, prints
  the message and exits with code 1.
- Everything else (credentials, transport, editor crashes, bugs) is never
  caught and reaches the process boundary with its traceback.

`ObjectNotFound` is neither: it is a signal from store adapters that the
fetcher turns into an absent snapshot.
"""

from __future__ import annotations


class UserFacingError(Exception):
    """Base class for failures reported to the operator without a traceback."""


class InvalidArgument(UserFacingError):
    """Raised when the location argument is missing or not a string."""

    def __init__(self, value: object = None):
        self.value = value
        super().__init__("a location of the form [scheme://]bucket/key is required")


class InvalidFormat(UserFacingError):
    """Raised when the location has no container or no item portion."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"invalid location '{raw}': expected bucket/key")


class NoSuchContainer(UserFacingError):
    """Raised when the addressed bucket does not exist."""

    def __init__(self, container: str, cause: Exception | None = None):
        self.container = container
        self.cause = cause
        super().__init__(f"bucket '{container}' does not exist")


class BinaryContent(UserFacingError):
    """Raised when the remote object is not declared/decodable as UTF-8 text."""

    def __init__(self, location: str, cause: Exception | None = None):
        self.location = location
        self.cause = cause
        super().__init__(f"cannot handle binary object '{location}'")


class ContentValidationError(UserFacingError):
    """Raised when edited content does not parse as its structured format."""

    def __init__(self, format_name: str, cause: Exception | None = None):
        self.format_name = format_name
        self.cause = cause
        super().__init__(f"content must conform to {format_name}")


class ObjectNotFound(Exception):
    """Store signal: the container exists but the item does not."""

    def __init__(self, container: str, item: str):
        self.container = container
        self.item = item
        super().__init__(f"object '{container}/{item}' not found")


class EditorError(RuntimeError):
    """The external editor could not be launched or exited abnormally."""
