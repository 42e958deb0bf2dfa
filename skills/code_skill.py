"""Coding assistant skills — free-text analyses of a student's code."""

from __future__ import annotations

from models.tasks import ComplexityTask, ConvertCodeTask, DebugCodeTask, ExplainCodeTask
from services.model_gateway import ModelGateway
from skills.base import run_text_task


async def explain_code(code: str, language: str, gateway: ModelGateway | None = None) -> str:
    return await run_text_task(ExplainCodeTask(language=language), code, gateway)


async def debug_code(
    code: str,
    language: str,
    error: str | None = None,
    gateway: ModelGateway | None = None,
) -> str:
    """Find and fix bugs, optionally guided by the error the student saw."""
    task = DebugCodeTask(language=language, error=(error or "").strip() or None)
    return await run_text_task(task, code, gateway)


async def convert_code(
    code: str,
    from_language: str,
    to_language: str,
    gateway: ModelGateway | None = None,
) -> str:
    task = ConvertCodeTask(from_language=from_language, to_language=to_language)
    return await run_text_task(task, code, gateway)


async def analyze_complexity(code: str, language: str, gateway: ModelGateway | None = None) -> str:
    return await run_text_task(ComplexityTask(language=language), code, gateway)
