from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from models import CompanyProfile, load_company_profile
from routers import build_chat_router, build_health_router, chat_validation_exception_handler
from services import ChatProxyService, CompletionProvider, GeminiCompletionProvider
from settings import Settings


logger = logging.getLogger("chat-widget")


def create_app(
    settings: Settings,
    provider: Optional[CompletionProvider] = None,
    profile: Optional[CompanyProfile] = None,
) -> FastAPI:
    """Build the chat proxy app; provider and profile may be injected for tests."""
    if profile is None:
        profile = load_company_profile(settings.company_content_path)
    if provider is None:
        provider = GeminiCompletionProvider(
            api_key=settings.gemini_api_key, model_name=settings.gemini_model
        )

    app = FastAPI(
        title="Company Chat Widget API",
        version="0.1.0",
        description="Gemini-backed chat proxy for the embeddable company chat widget.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    chat_service = ChatProxyService(provider, profile, api_key=settings.gemini_api_key)
    app.include_router(build_chat_router(chat_service))
    app.include_router(build_health_router(chat_service))
    app.add_exception_handler(RequestValidationError, chat_validation_exception_handler)

    if not settings.api_key_configured:
        logger.warning("GEMINI_API_KEY missing or placeholder; /api/chat will answer 500.")
    logger.info("Chat proxy ready for %s (model=%s).", profile.name, chat_service.model_name)
    return app
