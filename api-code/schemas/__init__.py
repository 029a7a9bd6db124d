from .chat import ChatErrorResponse, ChatRequest, ChatResponse, HealthResponse

__all__ = [
    "ChatErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
]
