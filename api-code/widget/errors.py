from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import BaseModel

from domain import ChatErrorKind


GENERIC_ERROR_TEXT = "Sorry, something went wrong. Please try again."
CONFIGURATION_ERROR_TEXT = "API key error: Please check server configuration."


class WidgetError(BaseModel):
    """A failed round trip, decoded once from whatever the transport produced."""

    kind: Optional[ChatErrorKind] = None
    message: Optional[str] = None
    details: Optional[str] = None
    status_code: Optional[int] = None

    def display_text(self) -> str:
        if self.kind in (ChatErrorKind.UNCONFIGURED, ChatErrorKind.GENERATION_FAILED):
            return self.message or CONFIGURATION_ERROR_TEXT
        return GENERIC_ERROR_TEXT


def _text_field(body: dict, name: str) -> Optional[str]:
    value = body.get(name)
    return value if isinstance(value, str) else None


def decode_error(response: Optional[httpx.Response] = None) -> WidgetError:
    """Map a failed response (or None for a transport fault) to a WidgetError."""
    if response is None:
        return WidgetError()

    try:
        body: Any = response.json()
    except ValueError:
        return WidgetError(status_code=response.status_code)
    if not isinstance(body, dict):
        return WidgetError(status_code=response.status_code)

    return WidgetError(
        kind=ChatErrorKind.from_wire(body.get("error")),
        message=_text_field(body, "message"),
        details=_text_field(body, "details"),
        status_code=response.status_code,
    )
