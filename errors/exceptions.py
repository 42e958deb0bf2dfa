"""Domain-specific exceptions for the study generation core.

``ClassifiedError`` is the only failure callers see: it carries a closed
``kind`` to branch on and a ``message`` fit for direct display.  The other
exceptions are raw failures raised inside the pipeline and mapped to a
``ClassifiedError`` by :func:`models.errors.classify_error`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.errors import ErrorKind


class ClassifiedError(Exception):
    """A failure with a closed kind and a user-facing message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}

    def __repr__(self) -> str:
        return f"ClassifiedError(kind={self.kind.value!r}, message={self.message!r})"


class MalformedOutputError(ValueError):
    """The oracle reply could not be turned into a valid record array.

    Raised by the response normalizer when no array span exists, the span
    is not valid JSON, the JSON is not an array, or no element survives
    shape validation.
    """

    def __init__(self, reason: str, preview: str = "") -> None:
        self.reason = reason
        self.preview = preview
        super().__init__(reason)
