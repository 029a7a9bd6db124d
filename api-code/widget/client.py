from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

import httpx

from models import Message, Sender, utc_now

from .config import WidgetConfig
from .errors import WidgetError, decode_error
from .render import render_widget


logger = logging.getLogger("chat-widget.widget")

SUBMIT_KEY = "Enter"
DEFAULT_TIMEOUT_SECONDS = 30.0


class TypingIndicator:
    """Transient bot placeholder shown while a request is outstanding."""

    sender = Sender.BOT
    text = ""

    def __repr__(self) -> str:
        return "TypingIndicator()"


TYPING = TypingIndicator()

DisplayItem = Union[Message, TypingIndicator]
UpdateListener = Callable[["ChatWidget"], None]


class ChatWidget:
    """Toggleable chat panel with an in-memory message log and single-flight sending.

    A second ``submit`` while a request is outstanding is dropped, not queued.
    """

    def __init__(
        self,
        config: Optional[WidgetConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or WidgetConfig()
        self._http_client = http_client
        self.is_open = False
        self.input_text = ""
        self.busy = False
        self.scroll_index = -1
        self._messages: List[Message] = []
        self._listeners: List[UpdateListener] = []

    @property
    def messages(self) -> List[Message]:
        return list(self._messages)

    @property
    def input_disabled(self) -> bool:
        return self.busy

    @property
    def send_disabled(self) -> bool:
        return self.busy or not self.input_text.strip()

    def on_update(self, listener: UpdateListener) -> None:
        self._listeners.append(listener)

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def set_input(self, text: str) -> None:
        self.input_text = text

    def display_items(self) -> List[DisplayItem]:
        items: List[DisplayItem] = list(self._messages)
        if self.busy:
            items.append(TYPING)
        return items

    async def handle_key(self, key: str, shift: bool = False) -> None:
        if key != SUBMIT_KEY or self.busy:
            return
        if shift:
            self.input_text += "\n"
            return
        await self.submit()

    async def submit(self, text: Optional[str] = None) -> None:
        from_buffer = text is None
        if from_buffer:
            text = self.input_text
        if not text.strip() or self.busy:
            return

        try:
            self._append(Message(sender=Sender.USER, text=text, timestamp=utc_now()))
            if from_buffer:
                self.input_text = ""
            self._set_busy(True)
            reply_text = await self._send(text)
        except _RoundTripFailed as exc:
            reply_text = exc.error.display_text()
        finally:
            self._set_busy(False)
        self._append(Message(sender=Sender.BOT, text=reply_text, timestamp=utc_now()))

    def render(self) -> str:
        return render_widget(self)

    async def _send(self, text: str) -> str:
        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.config.api_url, json={"message": text})
            else:
                async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS) as client:
                    response = await client.post(self.config.api_url, json={"message": text})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Chat error: %s", exc)
            raise _RoundTripFailed(decode_error(None)) from exc

        if not response.is_success:
            error = decode_error(response)
            logger.error("Chat error: HTTP %s (%s)", response.status_code, error.kind)
            raise _RoundTripFailed(error)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Chat error: malformed response body")
            raise _RoundTripFailed(WidgetError(status_code=response.status_code)) from exc

        reply = body.get("response") if isinstance(body, dict) else None
        if not isinstance(reply, str):
            logger.error("Chat error: response field missing")
            raise _RoundTripFailed(WidgetError(status_code=response.status_code))
        return reply

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        self._after_mutation()

    def _set_busy(self, busy: bool) -> None:
        self.busy = busy
        self._after_mutation()

    def _after_mutation(self) -> None:
        # keep the newest item in view
        self.scroll_index = len(self.display_items()) - 1
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # pylint: disable=broad-except
                logger.exception("Widget update listener failed")


class _RoundTripFailed(Exception):
    def __init__(self, error: WidgetError) -> None:
        super().__init__(error.display_text())
        self.error = error
