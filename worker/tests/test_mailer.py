from __future__ import annotations

import json

import httpx
import pytest

from designkit.mailer import Mailer


@pytest.mark.asyncio
async def test_send_posts_to_resend(config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "email-1"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        email_id = await Mailer(config, client).send("maya@example.com", "Hi", "<p>Hi</p>")

    assert email_id == "email-1"
    request = seen[0]
    assert request.headers["Authorization"] == "Bearer resend-key"
    assert json.loads(request.content) == {
        "from": "Design Kit <noreply@appin30days.com>",
        "to": ["maya@example.com"],
        "subject": "Hi",
        "html": "<p>Hi</p>",
    }


@pytest.mark.asyncio
async def test_send_raises_on_rejection(config):
    transport = httpx.MockTransport(lambda request: httpx.Response(422, json={"message": "bad"}))
    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await Mailer(config, client).send("maya@example.com", "Hi", "<p>Hi</p>")


def test_enabled_follows_api_key(config):
    assert Mailer(config).enabled
    assert not Mailer(config.model_copy(update={"resend_api_key": ""})).enabled
