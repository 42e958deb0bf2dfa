"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from config.llm_config import LLMConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    service_port: int = 5000
    cors_origins: list[str] = ["*"]
    debug: bool = False

    # ── LLM ──────────────────────────────────────────────────
    default_model: str = "gemini/gemini-2.5-flash"
    llm_backend: Literal["pydantic_ai", "litellm"] = "pydantic_ai"
    max_tokens: int = 8192
    temperature: float | None = 0.7
    top_p: float | None = None
    seed: int | None = None
    stop: list[str] | None = None
    request_timeout: float = 60.0  # seconds, applied by callers, not the gateway

    # Provider API keys
    gemini_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # ── Prompt budgets (characters) ──────────────────────────
    summary_char_budget: int = 30000
    quiz_char_budget: int = 20000
    flashcard_char_budget: int = 15000
    code_char_budget: int = 20000

    # ── Input / output guards ────────────────────────────────
    min_input_chars: int = 10
    min_output_chars: int = 10

    # ── Conversation ─────────────────────────────────────────
    conversation_window_turns: int = 6

    # ── Helpers ───────────────────────────────────────────────

    def get_default_llm_config(self) -> LLMConfig:
        """Build an :class:`LLMConfig` from global .env defaults."""
        return LLMConfig(
            model=self.default_model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
            seed=self.seed,
            stop=self.stop,
        )

    def api_key_for(self, model_name: str | None = None) -> str:
        """Return the credential for the provider prefix of *model_name*.

        ``gemini*/*`` → ``gemini_api_key``, ``anthropic/*`` →
        ``anthropic_api_key``, anything else → ``openai_api_key``.
        """
        name = model_name or self.default_model
        prefix = name.split("/", 1)[0] if "/" in name else "openai"
        if prefix.startswith("gemini"):
            return self.gemini_api_key
        if prefix == "anthropic":
            return self.anthropic_api_key
        return self.openai_api_key


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
