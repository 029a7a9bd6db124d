from __future__ import annotations

import unittest

from stubs import VALID_KEY, StubProvider, acme_profile

from domain import REMEDIATION_MESSAGE, ChatErrorKind, ChatProxyError
from services import ChatProxyService, ProviderError
from settings import PLACEHOLDER_API_KEY


class ChatProxyServiceTest(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:  # noqa: N802
        self.provider = StubProvider(reply="We offer Consulting and Support.")
        self.service = ChatProxyService(self.provider, acme_profile(), api_key=VALID_KEY)

    async def test_returns_provider_text(self) -> None:
        reply = await self.service.handle("What are your services?")

        self.assertEqual(reply, "We offer Consulting and Support.")
        self.assertEqual(len(self.provider.prompts), 1)
        self.assertIn("Consulting, Support", self.provider.prompts[0])
        self.assertTrue(self.provider.prompts[0].endswith("User: What are your services?\nAssistant:"))

    async def test_missing_message_is_bad_request(self) -> None:
        for message in (None, ""):
            with self.subTest(message=message):
                with self.assertRaises(ChatProxyError) as ctx:
                    await self.service.handle(message)
                self.assertIs(ctx.exception.kind, ChatErrorKind.BAD_REQUEST)
                self.assertEqual(ctx.exception.status_code, 400)
                self.assertEqual(ctx.exception.to_payload(), {"error": "Message is required"})
        self.assertEqual(self.provider.prompts, [])

    async def test_bad_request_wins_over_missing_key(self) -> None:
        service = ChatProxyService(self.provider, acme_profile(), api_key=None)

        with self.assertRaises(ChatProxyError) as ctx:
            await service.handle("")

        self.assertIs(ctx.exception.kind, ChatErrorKind.BAD_REQUEST)

    async def test_unset_or_placeholder_key_is_unconfigured(self) -> None:
        for api_key in (None, "", PLACEHOLDER_API_KEY):
            with self.subTest(api_key=api_key):
                service = ChatProxyService(self.provider, acme_profile(), api_key=api_key)
                with self.assertRaises(ChatProxyError) as ctx:
                    await service.handle("What are your services?")
                self.assertIs(ctx.exception.kind, ChatErrorKind.UNCONFIGURED)
                self.assertEqual(ctx.exception.status_code, 500)
                self.assertEqual(
                    ctx.exception.to_payload(),
                    {"error": "API key not configured", "message": REMEDIATION_MESSAGE},
                )
        self.assertEqual(self.provider.prompts, [])

    async def test_provider_failure_is_generation_failed(self) -> None:
        self.provider.error = ProviderError("quota exceeded")

        with self.assertRaises(ChatProxyError) as ctx:
            await self.service.handle("hello")

        self.assertIs(ctx.exception.kind, ChatErrorKind.GENERATION_FAILED)
        self.assertEqual(
            ctx.exception.to_payload(),
            {"error": "Failed to generate response", "details": "quota exceeded"},
        )

    async def test_unexpected_provider_exception_is_wrapped(self) -> None:
        self.provider.error = ConnectionError("socket closed")

        with self.assertRaises(ChatProxyError) as ctx:
            await self.service.handle("hello")

        self.assertIs(ctx.exception.kind, ChatErrorKind.GENERATION_FAILED)
        self.assertEqual(ctx.exception.details, "socket closed")

    async def test_failure_details_never_contain_the_key(self) -> None:
        self.provider.error = ProviderError(f"API key {VALID_KEY} not valid")

        with self.assertRaises(ChatProxyError) as ctx:
            await self.service.handle("hello")

        details = ctx.exception.details or ""
        self.assertNotIn(VALID_KEY, details)
        self.assertIn(f"{VALID_KEY[:4]}...{VALID_KEY[-4:]}", details)

    async def test_failure_log_never_contains_the_key(self) -> None:
        self.provider.error = ProviderError(f"400 API key not valid. key={VALID_KEY}")

        with self.assertLogs("chat-widget", level="DEBUG") as logs:
            with self.assertRaises(ChatProxyError):
                await self.service.handle("hello")

        output = "\n".join(logs.output)
        self.assertNotIn(VALID_KEY, output)
        self.assertIn(f"{VALID_KEY[:4]}...{VALID_KEY[-4:]}", output)
        self.assertNotIn("Traceback", output)

    async def test_service_keeps_no_state_between_calls(self) -> None:
        await self.service.handle("first")
        await self.service.handle("second")

        self.assertNotIn("first", self.provider.prompts[1])


if __name__ == "__main__":
    unittest.main()
