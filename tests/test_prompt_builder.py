from __future__ import annotations

import unittest

from stubs import acme_profile

from models import CompanyProfile
from services import build_prompt


class BuildPromptTest(unittest.TestCase):
    def test_sections_are_concatenated_in_order(self) -> None:
        profile = CompanyProfile(
            name="MyTech Solutions",
            about="We build web apps.",
            services=["Web development", "Cloud migration"],
            faq={"Hours?": "9 to 6", "Free consult?": "Yes"},
            contact={"email": "hi@example.com", "phone": "555"},
        )

        prompt = build_prompt(profile, "Do you do mobile apps?")

        self.assertEqual(
            prompt,
            "You are an AI assistant for MyTech Solutions.\n\n"
            "About the company:\nWe build web apps.\n\n"
            "Services offered:\nWeb development, Cloud migration\n\n"
            "FAQ information:\n- Hours?: 9 to 6\n- Free consult?: Yes\n\n"
            "Contact information:\n- email: hi@example.com\n- phone: 555\n\n"
            "User: Do you do mobile apps?\nAssistant:",
        )

    def test_prompt_ends_with_assistant_cue(self) -> None:
        prompt = build_prompt(acme_profile(), "What are your services?")

        self.assertIn("Consulting, Support", prompt)
        self.assertTrue(prompt.endswith("User: What are your services?\nAssistant:"))
        self.assertTrue(prompt.startswith("You are an AI assistant for Acme."))

    def test_construction_is_deterministic(self) -> None:
        profile = acme_profile()

        first = build_prompt(profile, "hello")
        second = build_prompt(profile, "hello")

        self.assertEqual(first.encode("utf-8"), second.encode("utf-8"))

    def test_empty_mappings_render_empty_sections(self) -> None:
        prompt = build_prompt(acme_profile(), "hi")

        self.assertIn("FAQ information:\n\n\nContact information:\n\n\nUser: hi", prompt)


if __name__ == "__main__":
    unittest.main()
