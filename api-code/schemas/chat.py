from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    # left optional so an absent message is answered with the 400 error body
    message: Optional[str] = Field(default=None, description="User message for the chatbot.")


class ChatResponse(BaseModel):
    response: str = Field(..., description="Chatbot-generated response.")


class ChatErrorResponse(BaseModel):
    error: str = Field(..., description="Error kind, e.g. 'Message is required'.")
    message: Optional[str] = Field(default=None, description="Operator remediation hint.")
    details: Optional[str] = Field(default=None, description="Provider diagnostics.")


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' or 'degraded'.")
    api_key_configured: bool
    model: str
    company: str
    issues: List[str] = Field(default_factory=list)
