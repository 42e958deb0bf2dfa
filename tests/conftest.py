"""Shared pytest fixtures for the study generation core.

Provides:
- ``FakeOracle``: scripted completion oracle that records every prompt
- ``settings``: Settings with a test credential and default budgets
- ``oracle``: fresh FakeOracle per test
- ``gateway``: ModelGateway over ``oracle``
"""

from __future__ import annotations

import pytest

from config.settings import Settings
from services.llm_service import CompletionOracle
from services.model_gateway import ModelGateway


class FakeOracle(CompletionOracle):
    """Returns queued replies (or raises queued exceptions) in order."""

    def __init__(self, *replies: str | BaseException, default: str | None = None) -> None:
        self.replies: list[str | BaseException] = list(replies)
        self.default = default
        self.prompts: list[str] = []

    def queue(self, *replies: str | BaseException) -> None:
        self.replies.extend(replies)

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt_text: str) -> str:
        self.prompts.append(prompt_text)
        if self.replies:
            reply = self.replies.pop(0)
        elif self.default is not None:
            reply = self.default
        else:
            raise AssertionError("FakeOracle has no reply queued")
        if isinstance(reply, BaseException):
            raise reply
        return reply


class ProviderError(Exception):
    """Provider-style error exposing ``status`` and ``message``."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.message = message
        self.status = status
        super().__init__(message)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def gateway(oracle: FakeOracle, settings: Settings) -> ModelGateway:
    return ModelGateway(oracle=oracle, api_key="test-key", settings=settings)
