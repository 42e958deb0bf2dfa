"""Study material endpoints — summaries, quizzes, flashcards."""

from fastapi import APIRouter, Depends

from api.deps import gateway_dependency, with_timeout
from models.request import (
    FlashcardRequest,
    FlashcardResponse,
    QuizRequest,
    QuizResponse,
    SummaryAllRequest,
    SummaryRequest,
    SummaryResponse,
)
from models.study_output import SummaryBundle
from services.model_gateway import ModelGateway
from skills.study_skill import generate_flashcards, generate_quiz, summarize, summarize_all

router = APIRouter(prefix="/api", tags=["study"])


@router.post("/summaries", response_model=SummaryResponse)
async def create_summary(req: SummaryRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    summary = await with_timeout(summarize(req.text, req.mode, gateway))
    return SummaryResponse(summary=summary, mode=req.mode)


@router.post("/summaries/all", response_model=SummaryBundle)
async def create_all_summaries(
    req: SummaryAllRequest, gateway: ModelGateway = Depends(gateway_dependency)
):
    """Short, long and bullet summaries generated concurrently."""
    return await with_timeout(summarize_all(req.text, gateway))


@router.post("/quizzes", response_model=QuizResponse)
async def create_quiz(req: QuizRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    questions = await with_timeout(generate_quiz(req.text, req.count, req.difficulty, gateway))
    return QuizResponse(questions=questions)


@router.post("/flashcards", response_model=FlashcardResponse)
async def create_flashcards(
    req: FlashcardRequest, gateway: ModelGateway = Depends(gateway_dependency)
):
    flashcards = await with_timeout(generate_flashcards(req.text, req.count, gateway))
    return FlashcardResponse(flashcards=flashcards)
