from .client import TYPING, ChatWidget, TypingIndicator
from .config import WidgetConfig, WidgetPosition, WidgetTheme
from .errors import CONFIGURATION_ERROR_TEXT, GENERIC_ERROR_TEXT, WidgetError, decode_error
from .render import format_time, render_widget

__all__ = [
    "TYPING",
    "ChatWidget",
    "TypingIndicator",
    "WidgetConfig",
    "WidgetPosition",
    "WidgetTheme",
    "CONFIGURATION_ERROR_TEXT",
    "GENERIC_ERROR_TEXT",
    "WidgetError",
    "decode_error",
    "format_time",
    "render_widget",
]
