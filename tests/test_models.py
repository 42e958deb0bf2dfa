"""Tests for task and study record models."""

import pytest
from pydantic import ValidationError

from models.prompt import PromptEnvelope
from models.study_output import Flashcard, QuizItem, ScheduleEntry, TaskSuggestion
from models.tasks import ChatTurnTask, QuizTask, SummarizeTask, SummaryMode

OPTIONS = ["Paris", "Rome", "Berlin", "Madrid"]


# ── QuizItem ──────────────────────────────────────────────────


def test_quiz_item_accepts_camel_case():
    item = QuizItem.model_validate(
        {
            "question": "Capital of France?",
            "options": OPTIONS,
            "correctAnswer": "Paris",
            "explanation": "Paris is the capital.",
        }
    )
    assert item.correct_answer == "Paris"
    assert item.model_dump(by_alias=True)["correctAnswer"] == "Paris"


def test_quiz_item_requires_explanation():
    with pytest.raises(ValidationError):
        QuizItem.model_validate(
            {"question": "Capital of France?", "options": OPTIONS, "correctAnswer": "Paris"}
        )


def test_quiz_item_requires_four_options():
    with pytest.raises(ValidationError):
        QuizItem(question="Capital?", options=OPTIONS[:3], correct_answer="Paris", explanation="x")


def test_quiz_item_rejects_duplicate_options():
    with pytest.raises(ValidationError):
        QuizItem(
            question="Capital?",
            options=["Paris", "Paris", "Rome", "Berlin"],
            correct_answer="Paris",
            explanation="x",
        )


def test_quiz_item_rejects_blank_option():
    with pytest.raises(ValidationError):
        QuizItem(
            question="Capital?",
            options=["Paris", " ", "Rome", "Berlin"],
            correct_answer="Paris",
            explanation="x",
        )


def test_quiz_item_answer_must_be_an_option():
    with pytest.raises(ValidationError):
        QuizItem(question="Capital?", options=OPTIONS, correct_answer="Lyon", explanation="x")


def test_quiz_item_keeps_surrounding_whitespace():
    item = QuizItem(
        question="  Capital?  ", options=OPTIONS, correct_answer="Paris", explanation=" Because. "
    )
    assert item.question == "  Capital?  "
    assert item.explanation == " Because. "


# ── Other records ────────────────────────────────────────────


def test_flashcard_sides_must_not_be_blank():
    with pytest.raises(ValidationError):
        Flashcard(front="Term", back="   ")


def test_flashcard_rejects_numbers():
    with pytest.raises(ValidationError):
        Flashcard.model_validate({"front": 1, "back": "One"})


def test_schedule_duration_positive():
    with pytest.raises(ValidationError):
        ScheduleEntry(time="09:00 AM", duration=0, subject="Math", activity="Review")


@pytest.mark.parametrize("duration", [True, "60", 60.5, None])
def test_schedule_duration_is_strict_int(duration):
    with pytest.raises(ValidationError):
        ScheduleEntry.model_validate(
            {"time": "09:00 AM", "duration": duration, "subject": "Math", "activity": "Review"}
        )


def test_schedule_duration_whole_minutes():
    entry = ScheduleEntry.model_validate(
        {"time": "09:00 AM", "duration": 60, "subject": "Math", "activity": "Review"}
    )
    assert entry.duration == 60
    assert entry.model_dump()["duration"] == 60
    assert isinstance(entry.model_dump()["duration"], int)


def test_task_priority_vocabulary():
    with pytest.raises(ValidationError):
        TaskSuggestion(title="Review", description="Ch. 1", priority="urgent", estimated_time=30)


@pytest.mark.parametrize("missing", ["description", "priority", "estimatedTime"])
def test_task_suggestion_fields_required(missing):
    data = {"title": "Review", "description": "Ch. 1", "priority": "low", "estimatedTime": 30}
    del data[missing]
    with pytest.raises(ValidationError):
        TaskSuggestion.model_validate(data)


def test_task_estimated_time_rejects_string():
    with pytest.raises(ValidationError):
        TaskSuggestion.model_validate(
            {"title": "Review", "description": "Ch. 1", "priority": "low", "estimatedTime": "30"}
        )


# ── Tasks and envelopes ──────────────────────────────────────


def test_quiz_count_bounds():
    with pytest.raises(ValidationError):
        QuizTask(count=0)
    with pytest.raises(ValidationError):
        QuizTask(count=51)


def test_tasks_are_frozen():
    task = SummarizeTask(mode=SummaryMode.LONG)
    with pytest.raises(ValidationError):
        task.mode = SummaryMode.SHORT


def test_envelope_discriminates_task_kind():
    env = PromptEnvelope.model_validate(
        {"instructionText": "Hi ", "payload": "there", "task": {"kind": "chat_turn", "mode": "exam"}}
    )
    assert isinstance(env.task, ChatTurnTask)
    assert env.prompt_text == "Hi there"
