"""Prompt builder — render a PromptEnvelope from a task and caller input.

Pure: the envelope depends only on the task, the payload, the rendered
conversation history and the configured budgets.  Input checks fail fast
with ``EmptyInput``; truncation to the task budget is silent.
"""

from __future__ import annotations

from config.prompts.code import (
    complexity_template,
    convert_template,
    debug_template,
    explain_template,
)
from config.prompts.study import (
    SCHEDULE_PREFIX,
    TASKS_PREFIX,
    build_flashcard_prefix,
    build_quiz_prefix,
    build_schedule_suffix,
    build_summary_prefix,
    build_tasks_suffix,
)
from config.prompts.tutor import TUTOR_SUFFIX, build_tutor_prefix
from config.settings import Settings, get_settings
from models.errors import ErrorKind, make_error
from models.prompt import PromptEnvelope
from models.tasks import (
    CODE_TASKS,
    SOURCE_TEXT_TASKS,
    ChatTurnTask,
    ComplexityTask,
    ConvertCodeTask,
    DebugCodeTask,
    ExplainCodeTask,
    FlashcardTask,
    GenerationTask,
    QuizTask,
    ScheduleTask,
    SuggestTasksTask,
    SummarizeTask,
)


def input_budget(task: GenerationTask, settings: Settings | None = None) -> int | None:
    """Character budget for the task's payload; ``None`` means unrestricted."""
    settings = settings or get_settings()
    if isinstance(task, SummarizeTask):
        return settings.summary_char_budget
    if isinstance(task, QuizTask):
        return settings.quiz_char_budget
    if isinstance(task, FlashcardTask):
        return settings.flashcard_char_budget
    if isinstance(task, CODE_TASKS):
        return settings.code_char_budget
    return None


def validate_payload(
    task: GenerationTask, payload: str | None, settings: Settings | None = None
) -> str:
    """Reject absent or too-short input before anything is sent.

    Source-text tasks need at least ``min_input_chars`` meaningful
    characters; every other task needs a non-blank payload.
    """
    settings = settings or get_settings()
    text = (payload or "").strip()
    if isinstance(task, SOURCE_TEXT_TASKS):
        if len(text) < settings.min_input_chars:
            raise make_error(ErrorKind.EMPTY_INPUT)
    elif not text:
        raise make_error(ErrorKind.EMPTY_INPUT, "Please provide some input first.")
    return payload or ""


def truncate_payload(
    task: GenerationTask, payload: str, settings: Settings | None = None
) -> str:
    budget = input_budget(task, settings)
    if budget is None:
        return payload
    return payload[:budget]


def _template_for(task: GenerationTask, history: str) -> tuple[str, str]:
    """Return the ``(prefix, suffix)`` pair surrounding the payload."""
    if isinstance(task, SummarizeTask):
        return build_summary_prefix(task.mode.value), ""
    if isinstance(task, QuizTask):
        return build_quiz_prefix(task.count, task.difficulty.value), ""
    if isinstance(task, FlashcardTask):
        return build_flashcard_prefix(task.count), ""
    if isinstance(task, ExplainCodeTask):
        return explain_template(task.language)
    if isinstance(task, DebugCodeTask):
        return debug_template(task.language, task.error)
    if isinstance(task, ConvertCodeTask):
        return convert_template(task.from_language, task.to_language)
    if isinstance(task, ComplexityTask):
        return complexity_template(task.language)
    if isinstance(task, ChatTurnTask):
        return build_tutor_prefix(task.mode.value, history), TUTOR_SUFFIX
    if isinstance(task, ScheduleTask):
        return SCHEDULE_PREFIX, build_schedule_suffix(task.preferences)
    if isinstance(task, SuggestTasksTask):
        return TASKS_PREFIX, build_tasks_suffix(task.level)
    raise TypeError(f"Unsupported generation task: {type(task).__name__}")


def build_envelope(
    task: GenerationTask,
    payload: str | None,
    *,
    history: str = "",
    settings: Settings | None = None,
) -> PromptEnvelope:
    """Validate, truncate and wrap *payload* in the task's fixed template.

    Args:
        task: The generation task variant; selects the template.
        payload: Source text, code, chat message, or subject list.
        history: Rendered conversation window (chat turns only).
        settings: Override for budgets and thresholds.

    Raises:
        ClassifiedError: ``EmptyInput`` when the payload is missing or too short.
    """
    settings = settings or get_settings()
    text = validate_payload(task, payload, settings)
    bounded = truncate_payload(task, text, settings)
    prefix, suffix = _template_for(task, history)
    return PromptEnvelope(instruction_text=prefix, payload=bounded, task=task, suffix=suffix)
