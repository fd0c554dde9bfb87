"""Transactional email via the Resend REST API."""
from __future__ import annotations

import httpx

from designkit.config import Config

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class Mailer:
    def __init__(self, config: Config, client: httpx.AsyncClient | None = None):
        self.api_key = config.resend_api_key
        self.sender = config.email_from
        self.timeout = config.http_timeout
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def send(self, to: str, subject: str, html: str) -> str | None:
        """Send one HTML email and return Resend's email id.

        Raises httpx.HTTPStatusError if Resend rejects the request.
        """
        payload = {"from": self.sender, "to": [to], "subject": subject, "html": html}
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if self._client is not None:
            resp = await self._client.post(
                RESEND_EMAILS_URL, json=payload, headers=headers, timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    RESEND_EMAILS_URL, json=payload, headers=headers, timeout=self.timeout
                )
        resp.raise_for_status()
        return resp.json().get("id")
