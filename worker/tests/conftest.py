"""Shared fixtures for the design kit worker tests."""
from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from designkit.config import Config
from designkit.models import Submission


def submission_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": "sub-123",
        "created_at": "2026-10-19T09:00:00+00:00",
        "email": "maya@example.com",
        "name": "Maya",
        "app_idea": "A habit tracker that helps people build calm morning routines",
        "app_name": "Zen Habit",
        "target_audience": "Busy Professionals",
        "main_action": "Track Habits",
        "feelings": ["Calm & peaceful", "Minimal & clean"],
        "color_palette": "soft-pastels",
        "design_inspiration": "calm",
        "personality_serious_fun": 3,
        "personality_minimal_rich": 3,
        "personality_gentle_motivating": 3,
        "dark_mode": False,
        "animations": False,
        "illustrations": False,
        "photos": False,
        "gradients": False,
        "rounded_corners": False,
        "generated_prompt": None,
        "moodboard_images": None,
        "email_sent": False,
        "opted_in_marketing": True,
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_submission() -> Callable[..., Submission]:
    def _make(**overrides: Any) -> Submission:
        return Submission.model_validate(submission_row(**overrides))
    return _make


@pytest.fixture
def config() -> Config:
    return Config(
        submission_id="sub-123",
        supabase_url="https://project.supabase.co",
        supabase_service_key="service-key",
        unsplash_access_key="unsplash-key",
        resend_api_key="resend-key",
        site_url="https://kit.example.com",
    )


class FakeSupabase:
    """In-memory stand-in for the PostgREST table, served via MockTransport."""

    def __init__(self, rows: list[dict[str, Any]] | None = None):
        self.rows = {r["id"]: dict(r) for r in rows or []}
        self.requests: list[httpx.Request] = []
        self.fail_with: int | None = None

    def _match(self, request: httpx.Request) -> str:
        return request.url.params.get("id", "").removeprefix("eq.")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "boom"})

        if request.method == "GET":
            row = self.rows.get(self._match(request))
            return httpx.Response(200, json=[row] if row else [])

        if request.method == "POST":
            created = []
            for record in json.loads(request.content):
                row = submission_row(**record)
                row["id"] = f"sub-{len(self.rows) + 1}"
                self.rows[row["id"]] = row
                created.append(row)
            return httpx.Response(201, json=created)

        if request.method == "PATCH":
            row = self.rows.get(self._match(request))
            if row is None:
                return httpx.Response(200, json=[])
            row.update(json.loads(request.content))
            return httpx.Response(200, json=[row])

        return httpx.Response(405)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def supabase() -> FakeSupabase:
    return FakeSupabase([submission_row()])
