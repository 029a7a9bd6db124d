from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field, ValidationError


class CompanyProfileError(RuntimeError):
    """Raised when the company content document cannot be loaded."""


class CompanyProfile(BaseModel):
    """Static business context injected into every prompt."""

    name: str = Field(..., min_length=1, description="Company display name.")
    about: str = Field(default="", description="Free-form company description.")
    services: List[str] = Field(default_factory=list, description="Offered services, in order.")
    faq: Dict[str, str] = Field(default_factory=dict, description="Question key to answer.")
    contact: Dict[str, str] = Field(default_factory=dict, description="Contact field to value.")

    model_config = {"frozen": True}


def load_company_profile(path: Path | str) -> CompanyProfile:
    profile_path = Path(path)
    try:
        raw = profile_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CompanyProfileError(f"Cannot read company content at {profile_path}: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CompanyProfileError(f"Company content at {profile_path} is not valid JSON: {exc}") from exc

    try:
        return CompanyProfile.model_validate(document)
    except ValidationError as exc:
        raise CompanyProfileError(f"Company content at {profile_path} is invalid: {exc}") from exc
