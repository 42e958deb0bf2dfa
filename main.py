"""FastAPI entry point for the study assistant AI service."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import get_settings
from errors.exceptions import ClassifiedError
from models.errors import HTTP_STATUS

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="StudyMate AI",
    description="Study assistant service: summaries, quizzes, flashcards, code help and tutoring",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ClassifiedError)
async def classified_error_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
    """Render a classified failure as ``{"error": {"kind", "message"}}``."""
    status_code = HTTP_STATUS[exc.kind]
    logger.info("%s %s failed: %s", request.method, request.url.path, exc.kind.value)
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


# ── Register routers ────────────────────────────────────────
from api.code import router as code_router  # noqa: E402
from api.health import router as health_router  # noqa: E402
from api.planner import router as planner_router  # noqa: E402
from api.study import router as study_router  # noqa: E402
from api.tutor import router as tutor_router  # noqa: E402

app.include_router(health_router)
app.include_router(study_router)
app.include_router(code_router)
app.include_router(tutor_router)
app.include_router(planner_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.service_port,
        reload=settings.debug,
    )
