"""Persist a validated quiz submission."""
from __future__ import annotations

from designkit.models import SubmissionForm
from designkit.store import SubmissionStore


async def create_submission(form: SubmissionForm, store: SubmissionStore) -> str:
    """Store *form* and return the new submission id."""
    submission = await store.create(form.to_record())
    print(f"[submit] Stored submission {submission.id}")
    return submission.id
