"""Shared task-flow plumbing: build → complete → (normalize) → classify."""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel

from errors.exceptions import MalformedOutputError
from models.errors import classify_error
from models.tasks import GenerationTask
from services.model_gateway import ModelGateway, get_gateway
from services.prompt_builder import build_envelope
from services.response_normalizer import normalize_records

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


async def run_text_task(
    task: GenerationTask,
    payload: str | None,
    gateway: ModelGateway | None = None,
    *,
    history: str = "",
) -> str:
    """Run a free-text task and return the oracle's reply."""
    gateway = gateway or get_gateway()
    envelope = build_envelope(task, payload, history=history, settings=gateway.settings)
    result = await gateway.complete(envelope)
    return result.raw_text


async def run_structured_task(
    task: GenerationTask,
    payload: str | None,
    record_type: type[RecordT],
    gateway: ModelGateway | None = None,
) -> list[RecordT]:
    """Run a structured task and return the validated record array.

    Raises:
        ClassifiedError: any stage failure, ``MalformedOutput`` when the
            reply cannot be normalized.
    """
    raw_text = await run_text_task(task, payload, gateway)
    try:
        records = normalize_records(raw_text, record_type)
    except MalformedOutputError as e:
        logger.warning(
            "Could not normalize %s reply: %s | preview=%r",
            task.kind, e.reason, e.preview or raw_text[:200],
        )
        raise classify_error(e) from e
    logger.info("Parsed %d %s records for %s", len(records), record_type.__name__, task.kind)
    return records
