"""Structured study records recovered from LLM output.

Each record model is the shape one element of a normalized JSON array must
satisfy.  Validation is strict and every field is required: validators
reject elements outright and nothing is coerced or trimmed into shape, so
an invalid element is dropped by the normalizer and a valid one keeps its
content exactly.

Includes:
- QuizItem: four-option multiple choice with the answer among the options
- Flashcard: front/back pair
- ScheduleEntry: one block of a daily study plan
- TaskSuggestion: suggested study task with priority and time estimate
- SummaryBundle: the three summary variants for one document
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from models.base import CamelModel

QUIZ_OPTION_COUNT = 4


class _RecordModel(CamelModel):
    """LLM records: camelCase on the wire, strict types, no blank strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
    )

    @field_validator("*")
    @classmethod
    def _not_blank(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be blank")
        return value


class QuizItem(_RecordModel):
    """Single multiple-choice question."""

    question: str
    options: list[str]
    correct_answer: str
    explanation: str

    @field_validator("options")
    @classmethod
    def _four_unique_options(cls, options: list[str]) -> list[str]:
        if len(options) != QUIZ_OPTION_COUNT:
            raise ValueError(f"expected {QUIZ_OPTION_COUNT} options, got {len(options)}")
        if len(set(options)) != len(options):
            raise ValueError("options must be unique")
        if any(not option.strip() for option in options):
            raise ValueError("options must not be blank")
        return options

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> QuizItem:
        if self.correct_answer not in self.options:
            raise ValueError("correctAnswer must be one of the options")
        return self


class Flashcard(_RecordModel):
    front: str
    back: str


class ScheduleEntry(_RecordModel):
    time: str
    duration: int = Field(gt=0, description="Minutes")
    subject: str
    activity: str


class TaskSuggestion(_RecordModel):
    title: str
    description: str
    priority: Literal["low", "medium", "high"]
    estimated_time: int = Field(gt=0, description="Minutes")


class SummaryBundle(CamelModel):
    short: str
    long: str
    bullets: str
