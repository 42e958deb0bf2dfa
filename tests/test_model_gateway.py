"""Tests for the model gateway and the oracle backends."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic_ai.exceptions import ModelHTTPError
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel

from errors.exceptions import ClassifiedError
from models.errors import ErrorKind
from models.prompt import PromptEnvelope
from models.tasks import ChatTurnTask, SummarizeTask
from config.llm_config import LLMConfig
from services.llm_service import AgentOracle, LiteLLMOracle, create_oracle
from services.model_gateway import ModelGateway
from services.prompt_builder import build_envelope
from tests.conftest import ProviderError

SOURCE = "The French Revolution began in 1789 and reshaped European politics."


@pytest.fixture
def envelope(settings) -> PromptEnvelope:
    return build_envelope(SummarizeTask(), SOURCE, settings=settings)


class TestPreconditions:
    @pytest.mark.asyncio
    async def test_missing_credential(self, oracle, settings, envelope):
        gateway = ModelGateway(oracle=oracle, api_key="", settings=settings)
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.MISSING_CREDENTIAL
        assert oracle.calls == 0

    @pytest.mark.asyncio
    async def test_short_payload_rechecked(self, settings):
        oracle = AsyncMock()
        gateway = ModelGateway(oracle=oracle, api_key="k", settings=settings)
        # Built directly, bypassing the builder's own validation.
        envelope = PromptEnvelope(instruction_text="Summarize: ", payload="short", task=SummarizeTask())
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.EMPTY_INPUT
        oracle.generate.assert_not_called()


class TestDispatch:
    @pytest.mark.asyncio
    async def test_returns_raw_text(self, gateway, oracle, envelope):
        oracle.queue("  A concise summary of the revolution.  ")
        result = await gateway.complete(envelope)
        assert result.raw_text == "  A concise summary of the revolution.  "
        assert oracle.prompts == [envelope.prompt_text]

    @pytest.mark.asyncio
    async def test_short_reply_is_empty_output(self, gateway, oracle, envelope):
        oracle.queue("   ok   ")
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.EMPTY_OUTPUT

    @pytest.mark.asyncio
    async def test_provider_failure_is_classified(self, gateway, oracle, envelope):
        failure = ProviderError("You exceeded your current quota", status=429)
        oracle.queue(failure)
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.QUOTA_EXCEEDED
        assert exc_info.value.__cause__ is failure

    @pytest.mark.asyncio
    async def test_no_retry(self, gateway, oracle, envelope):
        oracle.queue(RuntimeError("socket closed"), "A perfectly fine summary.")
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.UNKNOWN
        assert exc_info.value.message == "socket closed"
        assert oracle.calls == 1


class TestAgentOracle:
    @pytest.mark.asyncio
    async def test_generate_with_test_model(self):
        oracle = AgentOracle(model=TestModel(custom_output_text="Here is your summary text."))
        assert await oracle.generate("Summarize this") == "Here is your summary text."

    @pytest.mark.asyncio
    async def test_http_error_is_classified_through_gateway(self, settings):
        def _fail(messages, info: AgentInfo):
            raise ModelHTTPError(status_code=403, model_name="gemini-2.5-flash", body="denied")

        gateway = ModelGateway(
            oracle=AgentOracle(model=FunctionModel(_fail)), api_key="k", settings=settings
        )
        envelope = build_envelope(ChatTurnTask(), "Hello tutor", settings=settings)
        with pytest.raises(ClassifiedError) as exc_info:
            await gateway.complete(envelope)
        assert exc_info.value.kind == ErrorKind.FORBIDDEN


class TestLiteLLMOracle:
    @pytest.mark.asyncio
    async def test_generate_calls_acompletion(self):
        response = MagicMock()
        response.choices[0].message.content = "Reply from the model."
        with patch(
            "services.llm_service.litellm.acompletion",
            new_callable=AsyncMock,
            return_value=response,
        ) as acompletion:
            oracle = LiteLLMOracle(api_key="k")
            reply = await oracle.generate("Explain recursion")

        assert reply == "Reply from the model."
        kwargs = acompletion.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "Explain recursion"}]
        assert kwargs["api_key"] == "k"
        assert kwargs["max_tokens"] == 8192

    @pytest.mark.asyncio
    async def test_explicit_config_is_used(self):
        response = MagicMock()
        response.choices[0].message.content = "Reply from the model."
        config = LLMConfig(model="openai/gpt-4o-mini", temperature=0.1, stop=["END"])
        with patch(
            "services.llm_service.litellm.acompletion",
            new_callable=AsyncMock,
            return_value=response,
        ) as acompletion:
            await LiteLLMOracle(config=config, api_key="k").generate("Explain recursion")

        kwargs = acompletion.call_args.kwargs
        assert kwargs["model"] == "openai/gpt-4o-mini"
        assert kwargs["temperature"] == 0.1
        assert kwargs["stop"] == ["END"]
        assert "max_tokens" not in kwargs


class TestCreateOracle:
    @pytest.mark.asyncio
    async def test_litellm_backend_uses_given_settings(self, settings):
        tuned = settings.model_copy(
            update={
                "llm_backend": "litellm",
                "default_model": "anthropic/claude-sonnet-4-5",
                "anthropic_api_key": "a-key",
                "temperature": 0.2,
                "max_tokens": 512,
            }
        )
        oracle = create_oracle(tuned)
        assert isinstance(oracle, LiteLLMOracle)
        assert oracle.model == "anthropic/claude-sonnet-4-5"

        response = MagicMock()
        response.choices[0].message.content = "Reply from the model."
        with patch(
            "services.llm_service.litellm.acompletion",
            new_callable=AsyncMock,
            return_value=response,
        ) as acompletion:
            await oracle.generate("Explain recursion")

        kwargs = acompletion.call_args.kwargs
        assert kwargs["api_key"] == "a-key"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 512

    def test_pydantic_ai_backend_builds_agent_oracle(self, settings):
        tuned = settings.model_copy(
            update={"default_model": "openai/gpt-4o", "openai_api_key": "o-key"}
        )
        with patch("services.llm_service.create_model", return_value=TestModel()) as factory:
            oracle = create_oracle(tuned)
        assert isinstance(oracle, AgentOracle)
        factory.assert_called_once_with("openai/gpt-4o", tuned)
