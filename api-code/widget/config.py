from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class WidgetPosition(str, Enum):
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"


class WidgetTheme(str, Enum):
    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
    CUSTOM = "custom"


DEFAULT_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

THEME_PALETTES: Dict[WidgetTheme, Dict[str, str]] = {
    WidgetTheme.DEFAULT: {
        "--primary-gradient": DEFAULT_GRADIENT,
        "--button-color": "#667eea",
        "--chat-bg": "#ffffff",
        "--user-message-bg": DEFAULT_GRADIENT,
        "--bot-message-bg": "#ffffff",
        "--input-bg": "#f7fafc",
        "--text-color": "#1a202c",
        "--placeholder-color": "#718096",
    },
    WidgetTheme.DARK: {
        "--primary-gradient": "linear-gradient(135deg, #2d3748 0%, #1a202c 100%)",
        "--button-color": "#2d3748",
        "--chat-bg": "#1a202c",
        "--user-message-bg": "#4a5568",
        "--bot-message-bg": "#2d3748",
        "--input-bg": "#2d3748",
        "--text-color": "#ffffff",
        "--placeholder-color": "#a0aec0",
    },
    WidgetTheme.LIGHT: {
        "--primary-gradient": "linear-gradient(135deg, #e2e8f0 0%, #cbd5e0 100%)",
        "--button-color": "#4a5568",
        "--chat-bg": "#ffffff",
        "--user-message-bg": "#4a5568",
        "--bot-message-bg": "#edf2f7",
        "--input-bg": "#edf2f7",
        "--text-color": "#1a202c",
        "--placeholder-color": "#718096",
    },
}

POSITION_STYLES: Dict[WidgetPosition, Dict[str, str]] = {
    WidgetPosition.BOTTOM_RIGHT: {"bottom": "20px", "right": "20px"},
    WidgetPosition.BOTTOM_LEFT: {"bottom": "20px", "left": "20px"},
    WidgetPosition.TOP_RIGHT: {"top": "20px", "right": "20px"},
    WidgetPosition.TOP_LEFT: {"top": "20px", "left": "20px"},
}


class WidgetConfig(BaseModel):
    """Presentation options of the chat widget.

    Accepts the camelCase option names used when embedding the widget
    (``apiUrl``, ``headerTitle``...) as well as the snake_case attributes.
    None of these options change how requests are sent.
    """

    api_url: str = Field(default="/api/chat", alias="apiUrl", description="Chat endpoint URL.")
    position: WidgetPosition = Field(default=WidgetPosition.BOTTOM_RIGHT, alias="position")
    theme: WidgetTheme = Field(default=WidgetTheme.DEFAULT, alias="theme")
    primary_color: str = Field(default="#667eea", alias="primaryColor")
    secondary_color: str = Field(default="#764ba2", alias="secondaryColor")
    header_title: str = Field(default="AI Assistant", alias="headerTitle")
    header_subtitle: str = Field(default="How can I help you today?", alias="headerSubtitle")
    welcome_message: str = Field(
        default="👋 Hi! I'm your AI assistant. Ask me anything!", alias="welcomeMessage"
    )
    placeholder_text: str = Field(default="Type your message...", alias="placeholderText")
    show_timestamp: bool = Field(default=True, alias="showTimestamp")
    button_icon: str = Field(default="💬", alias="buttonIcon")
    close_icon: str = Field(default="✕", alias="closeIcon")

    model_config = {"populate_by_name": True, "frozen": True}

    def theme_variables(self) -> Dict[str, str]:
        if self.theme is WidgetTheme.CUSTOM:
            return {
                "--primary-gradient": (
                    f"linear-gradient(135deg, {self.primary_color} 0%, {self.secondary_color} 100%)"
                ),
                "--button-color": self.primary_color,
                "--chat-bg": "#ffffff",
                "--user-message-bg": self.primary_color,
                "--bot-message-bg": "#ffffff",
                "--input-bg": "#f7fafc",
                "--text-color": "#1a202c",
                "--placeholder-color": "#718096",
            }
        return dict(THEME_PALETTES[self.theme])

    def position_styles(self) -> Dict[str, str]:
        return dict(POSITION_STYLES[self.position])
