from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain import ChatErrorKind, ChatProxyError
from schemas import ChatErrorResponse, ChatRequest, ChatResponse
from services import ChatProxyService


CHAT_PATH = "/api/chat"


def build_chat_router(chat_service: ChatProxyService) -> APIRouter:
    """Create the chat router wired to the provided chat service."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post(
        "/chat",
        response_model=ChatResponse,
        responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
        summary="Answer a single message grounded in the company profile.",
    )
    async def chat_endpoint(payload: Optional[ChatRequest] = Body(default=None)):
        message = payload.message if payload is not None else None
        try:
            reply = await chat_service.handle(message)
        except ChatProxyError as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

        return ChatResponse(response=reply)

    return router


async def chat_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed chat bodies (bad JSON, non-object, non-string message) with the 400 body."""
    if request.url.path != CHAT_PATH:
        return await request_validation_exception_handler(request, exc)
    error = ChatProxyError(ChatErrorKind.BAD_REQUEST)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())
