"""Health check and model info endpoints."""

from fastapi import APIRouter

from config.settings import get_settings

router = APIRouter()


@router.get("/api/health")
async def health():
    settings = get_settings()
    return {
        "status": "healthy",
        "model": settings.default_model,
        "backend": settings.llm_backend,
        "credentialConfigured": bool(settings.api_key_for(settings.default_model)),
    }
