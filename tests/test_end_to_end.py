from __future__ import annotations

import unittest

import httpx

from stubs import StubProvider, acme_profile, make_settings

from application import create_app
from domain import REMEDIATION_MESSAGE
from models import Sender
from widget import ChatWidget


class WidgetToProxyTest(unittest.IsolatedAsyncioTestCase):
    """The widget talking to the real FastAPI app in-process."""

    async def _widget_for(self, provider: StubProvider, api_key) -> ChatWidget:
        app = create_app(make_settings(api_key), provider=provider, profile=acme_profile())
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
        self.addAsyncCleanup(client.aclose)
        return ChatWidget(http_client=client)

    async def test_unconfigured_key_surfaces_remediation(self) -> None:
        provider = StubProvider()
        widget = await self._widget_for(provider, api_key=None)

        await widget.submit("What are your services?")

        self.assertEqual([m.sender for m in widget.messages], [Sender.USER, Sender.BOT])
        self.assertEqual(widget.messages[-1].text, REMEDIATION_MESSAGE)
        self.assertEqual(provider.prompts, [])

    async def test_configured_key_relays_provider_text(self) -> None:
        provider = StubProvider(reply="We offer Consulting and Support.")
        widget = await self._widget_for(provider, api_key="AIzaSyVALIDKEY000")

        await widget.submit("What are your services?")

        self.assertEqual(widget.messages[-1].text, "We offer Consulting and Support.")
        self.assertIn("Consulting, Support", provider.prompts[0])
        self.assertTrue(provider.prompts[0].endswith("User: What are your services?\nAssistant:"))


if __name__ == "__main__":
    unittest.main()
