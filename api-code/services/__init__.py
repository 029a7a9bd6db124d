from .chat_service import ChatProxyService
from .completion_provider import (
    CompletionProvider,
    GeminiCompletionProvider,
    ProviderError,
    mask_api_key,
    redact_api_key,
)
from .prompt_builder import build_prompt

__all__ = [
    "ChatProxyService",
    "CompletionProvider",
    "GeminiCompletionProvider",
    "ProviderError",
    "build_prompt",
    "mask_api_key",
    "redact_api_key",
]
