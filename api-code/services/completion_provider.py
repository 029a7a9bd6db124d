from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Optional, Protocol

try:
    import google.generativeai as genai
except ImportError as exc:  # pragma: no cover - dependency managed via pyproject.toml
    raise RuntimeError(
        "The google-generativeai package must be installed. Check pyproject.toml."
    ) from exc


logger = logging.getLogger("chat-widget.provider")

GEMINI_MODEL_NAME = "gemini-2.0-flash"

_sdk_lock = threading.Lock()
_configured_key: Optional[str] = None


class ProviderError(RuntimeError):
    """Raised when the completion provider fails to produce text."""


class CompletionProvider(Protocol):
    model_name: str

    async def complete(self, prompt: str) -> str:
        ...


def mask_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        return "Not set"
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"


def redact_api_key(text: str, api_key: Optional[str]) -> str:
    if api_key and api_key in text:
        return text.replace(api_key, mask_api_key(api_key))
    return text


def _configure_sdk(api_key: str) -> None:
    # genai.configure swaps the process-wide default client
    global _configured_key
    with _sdk_lock:
        if _configured_key == api_key:
            return
        genai.configure(api_key=api_key)
        _configured_key = api_key


class GeminiCompletionProvider:
    """Single-shot, non-streaming text completion backed by Google Gemini."""

    def __init__(self, api_key: Optional[str], model_name: str = GEMINI_MODEL_NAME):
        self.api_key = api_key
        self.model_name = model_name
        if api_key:
            _configure_sdk(api_key)

    async def complete(self, prompt: str) -> str:
        if not self.api_key:
            raise ProviderError("Gemini API key is not set.")

        try:
            response_text = await asyncio.to_thread(self._call_gemini, prompt)
        except Exception as exc:  # pylint: disable=broad-except
            details = redact_api_key(str(exc), self.api_key)
            logger.error("Gemini call failed (model=%s): %s", self.model_name, details)
            raise ProviderError(details) from exc

        if not response_text:
            logger.warning("Gemini returned an empty response (model=%s).", self.model_name)
            raise ProviderError("Gemini returned an empty response.")

        return response_text

    def _call_gemini(self, prompt: str) -> str:
        model = genai.GenerativeModel(self.model_name)
        response: Any = model.generate_content(prompt)
        return extract_text(response)


def extract_text(response: Any) -> str:
    try:
        text = getattr(response, "text", None)
    except ValueError:
        # .text raises when the candidate was blocked or has no parts
        text = None
    if text:
        return text.strip()

    # walk candidates/parts directly
    candidates = getattr(response, "candidates", None) or []
    for candidate in candidates:
        parts = getattr(candidate, "content", None)
        if not parts:
            continue
        for part in getattr(parts, "parts", []):
            part_text = getattr(part, "text", None)
            if part_text:
                return part_text.strip()

    return ""
