"""AI tutor skill — multi-turn chat over a bounded conversation window.

The window is owned by the caller's session and passed in explicitly.
A turn appends the user message optimistically and the tutor reply only on
success, so a failed turn leaves exactly one unanswered user turn behind.
Retrying the same message reuses that turn instead of adding another.
"""

from __future__ import annotations

import logging

from models.tasks import ChatMode, ChatTurnTask
from services.conversation import ConversationWindow
from services.model_gateway import ModelGateway, get_gateway
from services.prompt_builder import build_envelope
from skills.base import run_text_task

logger = logging.getLogger(__name__)


async def chat_turn(
    window: ConversationWindow,
    message: str,
    mode: ChatMode = ChatMode.STUDY,
    gateway: ModelGateway | None = None,
) -> str:
    """Send *message* to the tutor persona for *mode* and record the exchange.

    Raises:
        ClassifiedError: on any failure.  An ``EmptyInput`` failure leaves
            the window untouched; later failures leave the user turn in place.
    """
    gateway = gateway or get_gateway()
    is_retry = window.has_pending_user_turn(message)
    history = window.render(upto=len(window.turns) - 1) if is_retry else window.render()

    envelope = build_envelope(
        ChatTurnTask(mode=mode), message, history=history, settings=gateway.settings
    )
    if is_retry:
        logger.info("Retrying pending tutor turn (mode=%s)", mode.value)
    else:
        window.add_user_turn(message)

    result = await gateway.complete(envelope)
    window.add_assistant_turn(result.raw_text)
    logger.info("Tutor replied (mode=%s, history=%d turns)", mode.value, len(window.turns))
    return result.raw_text


async def regenerate_reply(
    window: ConversationWindow,
    assistant_index: int,
    mode: ChatMode = ChatMode.STUDY,
    gateway: ModelGateway | None = None,
) -> str:
    """Produce a fresh reply for the user turn before *assistant_index*.

    History is not modified; apply the result with
    :meth:`ConversationWindow.replace_reply` once the caller accepts it.

    Raises:
        ValueError: if *assistant_index* does not point at a reply.
        ClassifiedError: on any generation failure.
    """
    message, history = window.prompt_for_reply(assistant_index)
    logger.info("Regenerating tutor reply %d (mode=%s)", assistant_index, mode.value)
    return await run_text_task(ChatTurnTask(mode=mode), message, gateway, history=history)
