from __future__ import annotations

import logging
from typing import Optional

from domain import REMEDIATION_MESSAGE, ChatErrorKind, ChatProxyError, RequestState, is_valid_transition
from models import CompanyProfile
from settings import is_usable_api_key

from .completion_provider import CompletionProvider, mask_api_key, redact_api_key
from .prompt_builder import build_prompt


logger = logging.getLogger("chat-widget.chat")


class _RequestTrace:
    """Per-request lifecycle, logged at each transition."""

    def __init__(self) -> None:
        self.state = RequestState.IDLE

    def advance(self, new_state: RequestState) -> None:
        if not is_valid_transition(self.state, new_state):
            raise RuntimeError(f"Invalid request transition {self.state.value} -> {new_state.value}")
        logger.debug("chat request %s -> %s", self.state.value, new_state.value)
        self.state = new_state


class ChatProxyService:
    """Validates a chat message, grounds it in the company profile and relays the completion."""

    def __init__(
        self,
        provider: CompletionProvider,
        profile: CompanyProfile,
        api_key: Optional[str],
    ):
        self.provider = provider
        self.profile = profile
        self._api_key = api_key

    @property
    def model_name(self) -> str:
        return self.provider.model_name

    @property
    def api_key_configured(self) -> bool:
        return is_usable_api_key(self._api_key)

    async def handle(self, message: Optional[str]) -> str:
        trace = _RequestTrace()
        trace.advance(RequestState.HANDLING)

        if not message:
            trace.advance(RequestState.FAILED)
            raise ChatProxyError(ChatErrorKind.BAD_REQUEST)

        if not self.api_key_configured:
            logger.error("ERROR: API key not configured!")
            trace.advance(RequestState.FAILED)
            raise ChatProxyError(ChatErrorKind.UNCONFIGURED, message=REMEDIATION_MESSAGE)

        prompt = build_prompt(self.profile, message)
        logger.info(
            "Generating content (model=%s, key=%s, prompt_chars=%d)",
            self.model_name,
            mask_api_key(self._api_key),
            len(prompt),
        )

        try:
            response = await self.provider.complete(prompt)
        except Exception as exc:  # pylint: disable=broad-except
            details = redact_api_key(str(exc), self._api_key)
            logger.error("Gemini error: %s: %s", type(exc).__name__, details)
            trace.advance(RequestState.FAILED)
            raise ChatProxyError(ChatErrorKind.GENERATION_FAILED, details=details) from exc

        trace.advance(RequestState.RESPONDED)
        return response
