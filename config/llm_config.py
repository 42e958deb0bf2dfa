"""Reusable LLM generation parameters.

Settings builds the global LLMConfig from .env; each oracle serializes it
for its backend.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM generation parameters shared by both oracle backends.

    All fields are optional.  ``None`` means "use the model's default".
    """

    model: str | None = Field(default=None, description="provider/model identifier")
    max_tokens: int | None = Field(default=None, description="Max tokens to generate")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    seed: int | None = Field(default=None, description="Random seed for reproducibility")
    stop: list[str] | None = Field(default=None, description="Stop sequences")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _generation_kwargs(self) -> dict:
        kw: dict = {}
        for field in ("max_tokens", "temperature", "top_p", "seed"):
            val = getattr(self, field)
            if val is not None:
                kw[field] = val
        return kw

    def to_litellm_kwargs(self) -> dict:
        """Convert to ``litellm.acompletion()``-compatible keyword arguments."""
        kw = self._generation_kwargs()
        if self.stop:
            kw["stop"] = self.stop
        return kw

    def to_model_settings(self) -> dict:
        """Convert to a PydanticAI ``ModelSettings`` dict."""
        kw = self._generation_kwargs()
        if self.stop:
            kw["stop_sequences"] = self.stop
        return kw
