from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


PLACEHOLDER_API_KEY = "your_valid_gemini_api_key_here"
DEFAULT_COMPANY_CONTENT_PATH = Path(__file__).resolve().parent / "models" / "company_content.json"


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    gemini_api_key: Optional[str] = Field(
        default=None, alias="GEMINI_API_KEY", description="Google Gemini API key"
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash",
        alias="GEMINI_MODEL",
        description="Generative model used to answer chat messages.",
    )
    company_content_path: str = Field(
        default=str(DEFAULT_COMPANY_CONTENT_PATH),
        alias="COMPANY_CONTENT_PATH",
        description="JSON document describing the company injected into prompts.",
    )
    cors_allow_origins: str = Field(
        default="*",
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of origins allowed to embed the widget.",
    )
    host: str = Field(default="0.0.0.0", alias="HOST", description="Bind address for uvicorn.")
    port: int = Field(default=5000, alias="PORT", description="Listening port for uvicorn.")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Root logging level.")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(os.environ)

    @property
    def api_key_configured(self) -> bool:
        return is_usable_api_key(self.gemini_api_key)

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


def is_usable_api_key(api_key: Optional[str]) -> bool:
    """False when the key is unset, blank or still the env.example placeholder."""
    if not api_key or not api_key.strip():
        return False
    return api_key.strip() != PLACEHOLDER_API_KEY


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()
