"""Error taxonomy and classifier for LLM-backed study tasks.

Every failure that leaves the core is a :class:`ClassifiedError` whose
``kind`` is one of :class:`ErrorKind`.  Callers branch on ``kind`` only;
``message`` is for display.
"""

from __future__ import annotations

from enum import Enum

from errors.exceptions import ClassifiedError, MalformedOutputError


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to callers."""

    MISSING_CREDENTIAL = "MissingCredential"
    QUOTA_EXCEEDED = "QuotaExceeded"
    RATE_LIMITED = "RateLimited"
    CONTENT_BLOCKED = "ContentBlocked"
    FORBIDDEN = "Forbidden"
    MALFORMED_OUTPUT = "MalformedOutput"
    EMPTY_INPUT = "EmptyInput"
    EMPTY_OUTPUT = "EmptyOutput"
    UNKNOWN = "Unknown"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_CREDENTIAL: (
        "The AI API key is missing or invalid. "
        "Set GEMINI_API_KEY (or the key for your provider) in .env."
    ),
    ErrorKind.QUOTA_EXCEEDED: (
        "Daily API quota exceeded (the free tier allows about 20 requests per day). "
        "Please try again tomorrow or use a different API key "
        "from https://aistudio.google.com/apikey"
    ),
    ErrorKind.RATE_LIMITED: "Too many requests. Please wait a moment and try again.",
    ErrorKind.CONTENT_BLOCKED: (
        "The content was blocked by the provider's safety filters. "
        "Try different material."
    ),
    ErrorKind.FORBIDDEN: (
        "API access forbidden. Check that your API key has the necessary permissions."
    ),
    ErrorKind.MALFORMED_OUTPUT: (
        "The AI returned a response that could not be read. Please try again."
    ),
    ErrorKind.EMPTY_INPUT: "The text is too short. Please provide more content.",
    ErrorKind.EMPTY_OUTPUT: "The AI returned an empty or very short response.",
    ErrorKind.UNKNOWN: "Something went wrong while generating a response. Please try again.",
}

# HTTP status used by the API layer for each kind.
HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.CONTENT_BLOCKED: 422,
    ErrorKind.QUOTA_EXCEEDED: 429,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.UNKNOWN: 500,
    ErrorKind.MALFORMED_OUTPUT: 502,
    ErrorKind.EMPTY_OUTPUT: 502,
    ErrorKind.MISSING_CREDENTIAL: 503,
}


def make_error(kind: ErrorKind, message: str | None = None) -> ClassifiedError:
    """Build a :class:`ClassifiedError` with the kind's default message."""
    return ClassifiedError(kind, message or DEFAULT_MESSAGES[kind])


def _error_status(exc: BaseException) -> int | None:
    for attr in ("status", "status_code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def _error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def classify_error(exc: BaseException) -> ClassifiedError:
    """Map a raw failure into exactly one :class:`ClassifiedError`.

    Classification order (first match wins, case-insensitive):
        1. Already classified — returned unchanged.
        2. "api key" in message → MissingCredential.
        3. status 429, "quota" or "429" in message → QuotaExceeded.
        4. "rate limit" / "too many requests" in message → RateLimited.
        5. status 403 or "forbidden" in message → Forbidden.
        6. "blocked" in message → ContentBlocked.
        7. Normalizer failure → MalformedOutput.
        8. Fallback — Unknown, carrying the raw message when there is one.
    """
    if isinstance(exc, ClassifiedError):
        return exc

    status = _error_status(exc)
    raw_message = _error_message(exc)
    lowered = raw_message.lower()

    if "api key" in lowered:
        return make_error(ErrorKind.MISSING_CREDENTIAL)
    if status == 429 or "quota" in lowered or "429" in lowered:
        return make_error(ErrorKind.QUOTA_EXCEEDED)
    if "rate limit" in lowered or "too many requests" in lowered:
        return make_error(ErrorKind.RATE_LIMITED)
    if status == 403 or "forbidden" in lowered:
        return make_error(ErrorKind.FORBIDDEN)
    if "blocked" in lowered:
        return make_error(ErrorKind.CONTENT_BLOCKED)
    if isinstance(exc, MalformedOutputError):
        return make_error(ErrorKind.MALFORMED_OUTPUT)

    return make_error(ErrorKind.UNKNOWN, raw_message.strip() or None)
