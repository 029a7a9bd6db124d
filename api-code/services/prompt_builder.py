from __future__ import annotations

from typing import Dict

from models import CompanyProfile


SERVICE_SEPARATOR = ", "


def _render_mapping(entries: Dict[str, str]) -> str:
    return "\n".join(f"- {key}: {value}" for key, value in entries.items())


def build_prompt(profile: CompanyProfile, message: str) -> str:
    """Assemble the company-grounded prompt for a single user turn.

    The output depends only on ``profile`` and ``message``.
    """
    sections = [
        f"You are an AI assistant for {profile.name}.",
        f"About the company:\n{profile.about}",
        f"Services offered:\n{SERVICE_SEPARATOR.join(profile.services)}",
        f"FAQ information:\n{_render_mapping(profile.faq)}",
        f"Contact information:\n{_render_mapping(profile.contact)}",
        f"User: {message}\nAssistant:",
    ]
    return "\n\n".join(sections)
