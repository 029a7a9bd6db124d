from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


REMEDIATION_MESSAGE = (
    "Please set a valid Gemini API key in your .env file. "
    "Get your API key from https://aistudio.google.com/app/apikey"
)


class ChatErrorKind(str, Enum):
    """Failure kinds of the chat endpoint; values are the wire ``error`` strings."""

    BAD_REQUEST = "Message is required"
    UNCONFIGURED = "API key not configured"
    GENERATION_FAILED = "Failed to generate response"

    @property
    def status_code(self) -> int:
        if self is ChatErrorKind.BAD_REQUEST:
            return 400
        return 500

    @classmethod
    def from_wire(cls, value: Any) -> Optional["ChatErrorKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


class ChatProxyError(Exception):
    def __init__(
        self,
        kind: ChatErrorKind,
        *,
        message: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_payload(self) -> Dict[str, str]:
        payload = {"error": self.kind.value}
        if self.message is not None:
            payload["message"] = self.message
        if self.details is not None:
            payload["details"] = self.details
        return payload
