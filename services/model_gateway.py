"""Model gateway — the single choke point for every completion oracle call.

Checks preconditions (credential, payload), dispatches the envelope's
prompt text once, and checks the reply is non-trivial.  Any oracle
failure is handed to :func:`classify_error` untouched; the gateway never
retries.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from config.settings import Settings, get_settings
from errors.exceptions import ClassifiedError
from models.errors import ErrorKind, classify_error, make_error
from models.prompt import CompletionResult, PromptEnvelope
from services.llm_service import CompletionOracle, create_oracle
from services.prompt_builder import validate_payload

logger = logging.getLogger(__name__)


class ModelGateway:
    """Send assembled prompts to a :class:`CompletionOracle`.

    Args:
        oracle: Text-completion backend.
        api_key: Credential for the configured provider; empty means missing.
        settings: Thresholds (``min_input_chars``, ``min_output_chars``).
    """

    def __init__(
        self,
        oracle: CompletionOracle,
        api_key: str | None,
        settings: Settings | None = None,
    ) -> None:
        self._oracle = oracle
        self._api_key = api_key or ""
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    async def complete(self, envelope: PromptEnvelope) -> CompletionResult:
        """Dispatch *envelope* and return the raw reply.

        Raises:
            ClassifiedError: MissingCredential / EmptyInput before dispatch,
                EmptyOutput after, or the classified oracle failure.
        """
        if not self._api_key.strip():
            raise make_error(ErrorKind.MISSING_CREDENTIAL)
        validate_payload(envelope.task, envelope.payload, self._settings)

        prompt_text = envelope.prompt_text
        logger.info(
            "Dispatching %s prompt (%d chars, payload=%d chars)",
            envelope.task.kind, len(prompt_text), len(envelope.payload),
        )
        logger.debug("Prompt preview: %s", prompt_text[:200])

        try:
            raw_text = await self._oracle.generate(prompt_text)
        except ClassifiedError:
            raise
        except Exception as e:
            classified = classify_error(e)
            logger.warning(
                "Oracle call failed for %s: %s (%s: %s)",
                envelope.task.kind, classified.kind.value, type(e).__name__, e,
            )
            raise classified from e

        raw_text = raw_text or ""
        if len(raw_text.strip()) < self._settings.min_output_chars:
            logger.warning(
                "Oracle returned %d chars for %s", len(raw_text.strip()), envelope.task.kind
            )
            raise make_error(ErrorKind.EMPTY_OUTPUT)

        logger.info("Oracle reply received for %s (%d chars)", envelope.task.kind, len(raw_text))
        logger.debug("Reply preview: %s", raw_text[:200])
        return CompletionResult(raw_text=raw_text)


@lru_cache
def get_gateway() -> ModelGateway:
    """Process-wide gateway built from settings."""
    settings = get_settings()
    return ModelGateway(
        oracle=create_oracle(settings),
        api_key=settings.api_key_for(settings.default_model),
        settings=settings,
    )
