"""Study material skills — summaries, quizzes, flashcards, planner.

Each skill is a single oracle call.  Structured skills return validated
records; any failure surfaces as a :class:`ClassifiedError`.
"""

from __future__ import annotations

import asyncio
import logging

from models.study_output import (
    Flashcard,
    QuizItem,
    ScheduleEntry,
    SummaryBundle,
    TaskSuggestion,
)
from models.tasks import (
    Difficulty,
    FlashcardTask,
    QuizTask,
    ScheduleTask,
    SuggestTasksTask,
    SummarizeTask,
    SummaryMode,
)
from services.model_gateway import ModelGateway, get_gateway
from skills.base import run_structured_task, run_text_task

logger = logging.getLogger(__name__)


async def summarize(
    text: str,
    mode: SummaryMode = SummaryMode.SHORT,
    gateway: ModelGateway | None = None,
) -> str:
    """Summarize extracted document text in the requested style."""
    logger.info("Summary requested: mode=%s, text=%d chars", mode.value, len(text or ""))
    return await run_text_task(SummarizeTask(mode=mode), text, gateway)


async def summarize_all(text: str, gateway: ModelGateway | None = None) -> SummaryBundle:
    """Produce short, long and bullet summaries concurrently.

    The three calls are independent; the first failure is raised.
    """
    gateway = gateway or get_gateway()
    short, long, bullets = await asyncio.gather(
        summarize(text, SummaryMode.SHORT, gateway),
        summarize(text, SummaryMode.LONG, gateway),
        summarize(text, SummaryMode.BULLETS, gateway),
    )
    return SummaryBundle(short=short, long=long, bullets=bullets)


async def generate_quiz(
    text: str,
    count: int = 10,
    difficulty: Difficulty = Difficulty.MEDIUM,
    gateway: ModelGateway | None = None,
) -> list[QuizItem]:
    """Generate multiple-choice questions from source text."""
    task = QuizTask(count=count, difficulty=difficulty)
    items = await run_structured_task(task, text, QuizItem, gateway)
    if len(items) != count:
        logger.warning("Quiz count mismatch: requested=%d, parsed=%d", count, len(items))
    return items


async def generate_flashcards(
    text: str,
    count: int = 10,
    gateway: ModelGateway | None = None,
) -> list[Flashcard]:
    """Generate front/back flashcards from source text."""
    return await run_structured_task(FlashcardTask(count=count), text, Flashcard, gateway)


async def generate_schedule(
    subjects: list[str],
    preferences: str | None = None,
    gateway: ModelGateway | None = None,
) -> list[ScheduleEntry]:
    """Plan a daily study schedule covering *subjects*."""
    payload = ", ".join(s.strip() for s in subjects if s and s.strip())
    task = ScheduleTask(preferences=preferences or None)
    return await run_structured_task(task, payload, ScheduleEntry, gateway)


async def suggest_tasks(
    subject: str,
    level: str = "intermediate",
    gateway: ModelGateway | None = None,
) -> list[TaskSuggestion]:
    """Suggest study tasks for a subject at a given level."""
    return await run_structured_task(SuggestTasksTask(level=level), subject, TaskSuggestion, gateway)
