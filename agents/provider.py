"""Model provider — builds PydanticAI model instances from ``provider/model`` names."""

from __future__ import annotations

import logging

from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Provider prefix → (base_url, settings_key_attr) for OpenAI-compatible endpoints
_PROVIDER_MAP: dict[str, tuple[str, str]] = {
    "gemini-openai": (
        "https://generativelanguage.googleapis.com/v1beta/openai/",
        "gemini_api_key",
    ),
}


def create_model(model_name: str | None = None, settings: Settings | None = None):
    """Build a PydanticAI model instance.

    Parses the ``"provider/model"`` format (e.g. ``"gemini/gemini-2.5-flash"``,
    ``"anthropic/claude-sonnet-4-20250514"``) and creates the matching model.

    - ``gemini/*`` → native :class:`GoogleModel`
    - ``anthropic/*`` → native :class:`AnthropicModel`
    - ``gemini-openai/*`` → Gemini through its OpenAI-compatible endpoint
    - ``openai/*`` or bare name → :class:`OpenAIChatModel` with OpenAI API

    Args:
        model_name: Model identifier in ``"provider/model"`` format.
                    Defaults to ``settings.default_model``.
        settings: Source of provider credentials; defaults to :func:`get_settings`.
    """
    settings = settings or get_settings()
    name = model_name or settings.default_model

    if "/" in name:
        prefix, model_id = name.split("/", 1)

        if prefix == "gemini":
            from pydantic_ai.models.google import GoogleModel
            from pydantic_ai.providers.google import GoogleProvider

            provider = GoogleProvider(api_key=settings.gemini_api_key)
            return GoogleModel(model_id, provider=provider)

        if prefix == "anthropic":
            from pydantic_ai.models.anthropic import AnthropicModel
            from pydantic_ai.providers.anthropic import AnthropicProvider

            provider = AnthropicProvider(api_key=settings.anthropic_api_key)
            return AnthropicModel(model_id, provider=provider)

        if prefix in _PROVIDER_MAP:
            base_url, key_attr = _PROVIDER_MAP[prefix]
            api_key = getattr(settings, key_attr, "")
            provider = OpenAIProvider(api_key=api_key, base_url=base_url)
            return OpenAIChatModel(model_id, provider=provider)

    # Fallback: OpenAI with OPENAI_API_KEY; strip "openai/" prefix if present
    model_id = name.split("/", 1)[1] if "/" in name else name
    logger.debug("Using OpenAI provider for model %s", model_id)
    provider = OpenAIProvider(api_key=settings.openai_api_key)
    return OpenAIChatModel(model_id, provider=provider)
