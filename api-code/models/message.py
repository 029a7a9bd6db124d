from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    sender: Sender = Field(..., description="Who authored the message.")
    text: str = Field(..., description="Message body as displayed.")
    timestamp: datetime = Field(default_factory=utc_now, description="Creation instant.")

    model_config = {"frozen": True}
