"""Completion oracles — text in, text out, over PydanticAI or LiteLLM.

The study core treats the model as an opaque ``generate(prompt) -> text``
function.  Two interchangeable backends implement it:

    - :class:`AgentOracle`   — PydanticAI ``Agent(output_type=str)``
    - :class:`LiteLLMOracle` — ``litellm.acompletion()``

Provider exceptions propagate untouched; classification happens in the
gateway via :func:`models.errors.classify_error`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import litellm
from pydantic_ai import Agent

from agents.provider import create_model
from config.llm_config import LLMConfig
from config.settings import Settings, get_settings


class CompletionOracle(ABC):
    """Opaque text-completion backend."""

    @abstractmethod
    async def generate(self, prompt_text: str) -> str:
        """Return the model's reply to *prompt_text*; raise on provider failure."""


class AgentOracle(CompletionOracle):
    """PydanticAI-backed oracle.

    ``model`` may be a ``provider/model`` name or a ready model instance
    (tests pass ``TestModel`` / ``FunctionModel``).  ``config`` defaults to
    the global generation parameters from settings.
    """

    def __init__(self, model=None, config: LLMConfig | None = None) -> None:
        self._config = config or get_settings().get_default_llm_config()
        if model is None or isinstance(model, str):
            model = create_model(model or self._config.model)
        self._agent = Agent(model=model, output_type=str, defer_model_check=True)

    async def generate(self, prompt_text: str) -> str:
        result = await self._agent.run(
            prompt_text, model_settings=self._config.to_model_settings()
        )
        return str(result.output)


class LiteLLMOracle(CompletionOracle):
    """LiteLLM-backed oracle — any provider LiteLLM supports by model prefix."""

    def __init__(self, config: LLMConfig | None = None, api_key: str | None = None) -> None:
        settings = get_settings()
        self._config = config or settings.get_default_llm_config()
        self._api_key = api_key if api_key is not None else settings.api_key_for(self._config.model)

    @property
    def model(self) -> str | None:
        return self._config.model

    async def generate(self, prompt_text: str) -> str:
        kwargs: dict = {
            "model": self._config.model,
            "messages": [{"role": "user", "content": prompt_text}],
            **self._config.to_litellm_kwargs(),
        }
        if self._api_key:
            kwargs["api_key"] = self._api_key
        response = await litellm.acompletion(**kwargs)
        return response.choices[0].message.content or ""


def create_oracle(settings: Settings | None = None) -> CompletionOracle:
    """Build the oracle selected by ``settings.llm_backend``.

    Generation parameters and the credential come from *settings*.
    """
    settings = settings or get_settings()
    config = settings.get_default_llm_config()
    if settings.llm_backend == "litellm":
        return LiteLLMOracle(config=config, api_key=settings.api_key_for(config.model))
    return AgentOracle(model=create_model(config.model, settings), config=config)
