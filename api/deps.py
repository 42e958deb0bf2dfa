"""Shared route helpers — gateway injection and request timeouts."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

from config.settings import get_settings
from models.errors import ErrorKind, make_error
from services.model_gateway import ModelGateway, get_gateway

T = TypeVar("T")

TIMEOUT_MESSAGE = "The AI took too long to respond. Please try again."


def gateway_dependency() -> ModelGateway:
    """FastAPI dependency; tests override it with a fake-oracle gateway."""
    return get_gateway()


async def with_timeout(awaitable: Awaitable[T]) -> T:
    """Await *awaitable* within ``settings.request_timeout``.

    Expiry surfaces as an ``Unknown`` :class:`ClassifiedError`.
    """
    timeout = get_settings().request_timeout
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise make_error(ErrorKind.UNKNOWN, TIMEOUT_MESSAGE) from e
