"""Per-call prompt and completion values passed through the gateway."""

from __future__ import annotations

from models.base import FrozenCamelModel
from models.tasks import GenerationTask


class PromptEnvelope(FrozenCamelModel):
    """Fully assembled prompt for one oracle call.

    ``payload`` is the bounded caller input (already truncated); the text
    actually sent is ``instruction_text + payload + suffix``.
    """

    instruction_text: str
    payload: str
    task: GenerationTask
    suffix: str = ""

    @property
    def prompt_text(self) -> str:
        return f"{self.instruction_text}{self.payload}{self.suffix}"


class CompletionResult(FrozenCamelModel):
    """Raw oracle reply — no structure assumed until normalized."""

    raw_text: str
