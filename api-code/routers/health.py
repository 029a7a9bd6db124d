from __future__ import annotations

from fastapi import APIRouter

from schemas import HealthResponse
from services import ChatProxyService


def build_health_router(chat_service: ChatProxyService) -> APIRouter:
    router = APIRouter()

    @router.get("/healthz", response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        issues = []
        if not chat_service.api_key_configured:
            issues.append("GEMINI_API_KEY is missing or still the placeholder value.")

        return HealthResponse(
            status="ok" if not issues else "degraded",
            api_key_configured=chat_service.api_key_configured,
            model=chat_service.model_name,
            company=chat_service.profile.name,
            issues=issues,
        )

    return router
