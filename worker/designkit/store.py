"""Submission persistence over Supabase's PostgREST endpoint."""
from __future__ import annotations

from typing import Any

import httpx

from designkit.config import Config
from designkit.models import Submission


class SubmissionNotFoundError(LookupError):
    def __init__(self, submission_id: str):
        super().__init__(f"Submission not found: {submission_id}")
        self.submission_id = submission_id


class SubmissionStore:
    """Create, read and update rows of the submissions table."""

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None):
        self.url = f"{config.supabase_url}/rest/v1/{config.table}"
        self.headers = {
            "apikey": config.supabase_service_key,
            "Authorization": f"Bearer {config.supabase_service_key}",
            "Content-Type": "application/json",
        }
        self.timeout = config.http_timeout
        self._client = client

    async def _request(self, method: str, **kwargs: Any) -> httpx.Response:
        headers = {**self.headers, **kwargs.pop("headers", {})}
        if self._client is not None:
            resp = await self._client.request(
                method, self.url, headers=headers, timeout=self.timeout, **kwargs
            )
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.request(
                    method, self.url, headers=headers, timeout=self.timeout, **kwargs
                )
        resp.raise_for_status()
        return resp

    async def create(self, record: dict[str, Any]) -> Submission:
        """Insert a row and return it as stored (with id and created_at)."""
        resp = await self._request(
            "POST",
            json=[record],
            headers={"Prefer": "return=representation"},
        )
        rows = resp.json()
        if not rows:
            raise RuntimeError("Insert returned no rows")
        return Submission.model_validate(rows[0])

    async def get(self, submission_id: str) -> Submission:
        resp = await self._request(
            "GET",
            params={"id": f"eq.{submission_id}", "select": "*"},
        )
        rows = resp.json()
        if not rows:
            raise SubmissionNotFoundError(submission_id)
        return Submission.model_validate(rows[0])

    async def update(self, submission_id: str, fields: dict[str, Any]) -> None:
        """Patch *fields* on one row. Raises if no row matched."""
        resp = await self._request(
            "PATCH",
            params={"id": f"eq.{submission_id}"},
            json=fields,
            headers={"Prefer": "return=representation"},
        )
        if not resp.json():
            raise SubmissionNotFoundError(submission_id)
