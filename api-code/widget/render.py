from __future__ import annotations

from datetime import datetime
from html import escape
from typing import TYPE_CHECKING, Dict, List

from models import Message

if TYPE_CHECKING:  # pragma: no cover
    from .client import ChatWidget


TYPING_INDICATOR_HTML = (
    '<div class="message bot"><div class="message-content">'
    '<div class="typing-indicator"><span></span><span></span><span></span></div>'
    "</div></div>"
)


def format_time(timestamp: datetime) -> str:
    """Local time of day as HH:MM."""
    return timestamp.astimezone().strftime("%H:%M")


def _style_attribute(styles: Dict[str, str]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in styles.items())


def _render_message(message: Message, show_timestamp: bool) -> str:
    parts = [
        f'<div class="message {message.sender.value}">',
        f'<div class="message-content">{escape(message.text)}</div>',
    ]
    if show_timestamp:
        parts.append(f'<div class="message-time">{format_time(message.timestamp)}</div>')
    parts.append("</div>")
    return "".join(parts)


def render_widget(widget: "ChatWidget") -> str:
    """Render the widget's current state as an HTML fragment."""
    config = widget.config
    styles = {**config.position_styles(), **config.theme_variables()}
    toggle_class = "chat-toggle active" if widget.is_open else "chat-toggle"
    toggle_icon = config.close_icon if widget.is_open else config.button_icon

    html: List[str] = [
        f'<div class="chatbot-container" style="{escape(_style_attribute(styles))}">',
        f'<button class="{toggle_class}" aria-label="Toggle chat">{escape(toggle_icon)}</button>',
    ]

    if widget.is_open:
        html.append('<div class="chat-popup">')
        html.append(
            '<div class="chat-header">'
            f"<h3>{escape(config.header_title)}</h3>"
            f"<p>{escape(config.header_subtitle)}</p>"
            "</div>"
        )

        html.append('<div class="chat-messages">')
        if not widget.messages:
            html.append(f'<div class="welcome-message"><p>{escape(config.welcome_message)}</p></div>')
        for item in widget.display_items():
            if isinstance(item, Message):
                html.append(_render_message(item, config.show_timestamp))
            else:
                html.append(TYPING_INDICATOR_HTML)
        html.append("</div>")

        input_disabled = " disabled" if widget.input_disabled else ""
        send_disabled = " disabled" if widget.send_disabled else ""
        send_icon = "⏳" if widget.busy else "➤"
        html.append(
            '<div class="chat-input">'
            f'<input type="text" value="{escape(widget.input_text)}" '
            f'placeholder="{escape(config.placeholder_text)}"{input_disabled}>'
            f'<button class="send-button"{send_disabled}>{send_icon}</button>'
            "</div>"
        )
        html.append("</div>")

    html.append("</div>")
    return "".join(html)
