"""API request / response models."""

from __future__ import annotations

from pydantic import Field

from models.base import CamelModel
from models.study_output import Flashcard, QuizItem, ScheduleEntry, TaskSuggestion
from models.tasks import ChatMode, Difficulty, SummaryMode
from services.conversation import ConversationTurn


# ── Study materials ──────────────────────────────────────────


class SummaryRequest(CamelModel):
    """POST /api/summaries — request body."""

    text: str
    mode: SummaryMode = SummaryMode.SHORT


class SummaryAllRequest(CamelModel):
    """POST /api/summaries/all — request body."""

    text: str


class SummaryResponse(CamelModel):
    summary: str
    mode: SummaryMode


class QuizRequest(CamelModel):
    """POST /api/quizzes — request body."""

    text: str
    count: int = Field(default=10, ge=1, le=50)
    difficulty: Difficulty = Difficulty.MEDIUM


class QuizResponse(CamelModel):
    questions: list[QuizItem]


class FlashcardRequest(CamelModel):
    """POST /api/flashcards — request body."""

    text: str
    count: int = Field(default=10, ge=1, le=50)


class FlashcardResponse(CamelModel):
    flashcards: list[Flashcard]


# ── Coding assistant ─────────────────────────────────────────


class CodeRequest(CamelModel):
    """POST /api/code/{explain,complexity} — request body."""

    code: str
    language: str = "python"


class DebugRequest(CodeRequest):
    """POST /api/code/debug — request body."""

    error: str | None = None


class ConvertRequest(CamelModel):
    """POST /api/code/convert — request body."""

    code: str
    from_language: str
    to_language: str


class CodeResponse(CamelModel):
    result: str


# ── Tutor ─────────────────────────────────────────────────────


class TutorChatRequest(CamelModel):
    """POST /api/tutor/chat — request body."""

    message: str
    mode: ChatMode = ChatMode.STUDY
    history: list[ConversationTurn] = Field(default_factory=list)


class TutorRegenerateRequest(CamelModel):
    """POST /api/tutor/regenerate — request body."""

    message_index: int
    mode: ChatMode = ChatMode.STUDY
    history: list[ConversationTurn]


class TutorResponse(CamelModel):
    reply: str
    history: list[ConversationTurn]


# ── Planner ───────────────────────────────────────────────────


class ScheduleRequest(CamelModel):
    """POST /api/planner/schedule — request body."""

    subjects: list[str]
    preferences: str | None = None


class ScheduleResponse(CamelModel):
    schedule: list[ScheduleEntry]


class TaskSuggestionRequest(CamelModel):
    """POST /api/planner/tasks — request body."""

    subject: str
    level: str = "intermediate"


class TaskSuggestionResponse(CamelModel):
    tasks: list[TaskSuggestion]
