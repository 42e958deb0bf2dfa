"""Custom exception hierarchy for the study generation core."""

from errors.exceptions import ClassifiedError, MalformedOutputError

__all__ = ["ClassifiedError", "MalformedOutputError"]
