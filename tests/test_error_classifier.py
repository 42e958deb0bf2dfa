"""Tests for models.errors — classification precedence and messages."""

from __future__ import annotations

import asyncio

import pytest

from errors.exceptions import ClassifiedError, MalformedOutputError
from models.errors import DEFAULT_MESSAGES, HTTP_STATUS, ErrorKind, classify_error, make_error
from tests.conftest import ProviderError


class StatusCodeError(Exception):
    """LiteLLM-style error exposing ``status_code``."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message)


class TestClassificationOrder:
    def test_api_key_message(self):
        err = classify_error(ProviderError("API key not valid. Please pass a valid API key."))
        assert err.kind == ErrorKind.MISSING_CREDENTIAL

    def test_credential_wins_over_status_429(self):
        err = classify_error(ProviderError("API key invalid", status=429))
        assert err.kind == ErrorKind.MISSING_CREDENTIAL

    def test_status_429_is_quota(self):
        err = classify_error(ProviderError("Resource exhausted", status=429))
        assert err.kind == ErrorKind.QUOTA_EXCEEDED
        assert "free tier" in err.message

    def test_status_code_attribute_is_read(self):
        err = classify_error(StatusCodeError("Resource exhausted", status_code=429))
        assert err.kind == ErrorKind.QUOTA_EXCEEDED

    @pytest.mark.parametrize(
        "message",
        ["You exceeded your current quota", "[429 Too Many Requests] slow down", "QUOTA reached"],
    )
    def test_quota_messages(self, message):
        assert classify_error(ProviderError(message)).kind == ErrorKind.QUOTA_EXCEEDED

    def test_rate_limit_message(self):
        err = classify_error(ProviderError("Rate limit reached for requests"))
        assert err.kind == ErrorKind.RATE_LIMITED

    def test_status_403_is_forbidden(self):
        assert classify_error(ProviderError("Permission denied", status=403)).kind == ErrorKind.FORBIDDEN

    def test_forbidden_message(self):
        assert classify_error(ProviderError("403 Forbidden")).kind == ErrorKind.FORBIDDEN

    def test_blocked_message(self):
        err = classify_error(ProviderError("Response was blocked due to SAFETY"))
        assert err.kind == ErrorKind.CONTENT_BLOCKED

    def test_normalizer_failure(self):
        err = classify_error(MalformedOutputError("no JSON array found in response"))
        assert err.kind == ErrorKind.MALFORMED_OUTPUT
        assert err.message == DEFAULT_MESSAGES[ErrorKind.MALFORMED_OUTPUT]

    def test_unknown_passes_message_through(self):
        err = classify_error(RuntimeError("Connection reset by peer"))
        assert err.kind == ErrorKind.UNKNOWN
        assert err.message == "Connection reset by peer"

    def test_unknown_without_message_uses_fallback(self):
        err = classify_error(asyncio.TimeoutError())
        assert err.kind == ErrorKind.UNKNOWN
        assert err.message == DEFAULT_MESSAGES[ErrorKind.UNKNOWN]

    def test_already_classified_is_unchanged(self):
        original = make_error(ErrorKind.EMPTY_OUTPUT)
        assert classify_error(original) is original


class TestClassifiedError:
    def test_to_dict(self):
        err = ClassifiedError(ErrorKind.FORBIDDEN, "nope")
        assert err.to_dict() == {"kind": "Forbidden", "message": "nope"}

    def test_every_kind_has_message_and_status(self):
        for kind in ErrorKind:
            assert DEFAULT_MESSAGES[kind]
            assert 400 <= HTTP_STATUS[kind] < 600
