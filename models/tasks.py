"""Generation tasks — the closed set of things the study core can ask an LLM.

Each variant carries the parameters its template needs and a ``kind``
discriminator.  ``GenerationTask`` is the tagged union over all of them,
so an unknown task or chat mode cannot be represented.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from models.base import FrozenCamelModel


class SummaryMode(str, Enum):
    SHORT = "short"
    LONG = "long"
    BULLETS = "bullets"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ChatMode(str, Enum):
    """Tutor persona selector."""

    STUDY = "study"
    CODING = "coding"
    NOTES = "notes"
    DOUBT = "doubt"
    EXAM = "exam"


# ── Free-text tasks ──────────────────────────────────────────


class SummarizeTask(FrozenCamelModel):
    kind: Literal["summarize"] = "summarize"
    mode: SummaryMode = SummaryMode.SHORT


class ExplainCodeTask(FrozenCamelModel):
    kind: Literal["explain_code"] = "explain_code"
    language: str = "python"


class DebugCodeTask(FrozenCamelModel):
    kind: Literal["debug_code"] = "debug_code"
    language: str = "python"
    error: str | None = None


class ConvertCodeTask(FrozenCamelModel):
    kind: Literal["convert_code"] = "convert_code"
    from_language: str
    to_language: str


class ComplexityTask(FrozenCamelModel):
    kind: Literal["analyze_complexity"] = "analyze_complexity"
    language: str = "python"


class ChatTurnTask(FrozenCamelModel):
    kind: Literal["chat_turn"] = "chat_turn"
    mode: ChatMode = ChatMode.STUDY


# ── Structured tasks ─────────────────────────────────────────


class QuizTask(FrozenCamelModel):
    kind: Literal["generate_quiz"] = "generate_quiz"
    count: int = Field(default=10, ge=1, le=50)
    difficulty: Difficulty = Difficulty.MEDIUM


class FlashcardTask(FrozenCamelModel):
    kind: Literal["generate_flashcards"] = "generate_flashcards"
    count: int = Field(default=10, ge=1, le=50)


class ScheduleTask(FrozenCamelModel):
    kind: Literal["generate_schedule"] = "generate_schedule"
    preferences: str | None = None


class SuggestTasksTask(FrozenCamelModel):
    kind: Literal["suggest_tasks"] = "suggest_tasks"
    level: str = "intermediate"


GenerationTask = Annotated[
    Union[
        SummarizeTask,
        QuizTask,
        FlashcardTask,
        ExplainCodeTask,
        DebugCodeTask,
        ConvertCodeTask,
        ComplexityTask,
        ChatTurnTask,
        ScheduleTask,
        SuggestTasksTask,
    ],
    Field(discriminator="kind"),
]

# Tasks whose payload is extracted source text (minimum-length rule applies).
SOURCE_TEXT_TASKS = (SummarizeTask, QuizTask, FlashcardTask)

# Tasks whose reply must be a JSON array of records.
STRUCTURED_TASKS = (QuizTask, FlashcardTask, ScheduleTask, SuggestTasksTask)

CODE_TASKS = (ExplainCodeTask, DebugCodeTask, ConvertCodeTask, ComplexityTask)
