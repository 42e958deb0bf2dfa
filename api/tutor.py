"""AI tutor endpoints — stateless: the client sends its history each turn."""

from fastapi import APIRouter, Depends

from api.deps import gateway_dependency, with_timeout
from models.errors import ErrorKind, make_error
from models.request import TutorChatRequest, TutorRegenerateRequest, TutorResponse
from services.conversation import ConversationWindow
from services.model_gateway import ModelGateway
from skills.tutor_skill import chat_turn, regenerate_reply

router = APIRouter(prefix="/api/tutor", tags=["tutor"])


@router.post("/chat", response_model=TutorResponse)
async def chat(req: TutorChatRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    """One tutor exchange; returns the reply and the updated history."""
    window = ConversationWindow(turns=list(req.history))
    reply = await with_timeout(chat_turn(window, req.message, req.mode, gateway))
    return TutorResponse(reply=reply, history=window.turns)


@router.post("/regenerate", response_model=TutorResponse)
async def regenerate(
    req: TutorRegenerateRequest, gateway: ModelGateway = Depends(gateway_dependency)
):
    """Replace the reply at ``messageIndex`` with a freshly generated one.

    An index that does not point at a tutor reply is an ``EmptyInput``
    failure: there is no student message to answer again.
    """
    window = ConversationWindow(turns=list(req.history))
    try:
        reply = await with_timeout(
            regenerate_reply(window, req.message_index, req.mode, gateway)
        )
    except ValueError as e:
        raise make_error(ErrorKind.EMPTY_INPUT, str(e)) from e
    window.replace_reply(req.message_index, reply)
    return TutorResponse(reply=reply, history=window.turns)
