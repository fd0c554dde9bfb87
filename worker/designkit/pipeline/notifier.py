"""Email the results link for a submission, at most once."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from designkit.mailer import Mailer
from designkit.pipeline.results import results_url
from designkit.prompts.email import email_subject, results_email_html
from designkit.store import SubmissionStore


@dataclass
class NotifyResult:
    sent: bool
    email_id: str | None = None
    reason: str = ""


async def send_results_email(
    submission_id: str,
    site_url: str,
    store: SubmissionStore,
    mailer: Mailer,
    year: int | None = None,
) -> NotifyResult:
    """Send the "design kit ready" email and mark the row as emailed.

    Skips without error when mail is not configured or was already sent.
    """
    if not mailer.enabled:
        print("[notifier] Resend API key not configured - skipping email send")
        return NotifyResult(sent=False, reason="Email service not configured")

    submission = await store.get(submission_id)
    if submission.email_sent:
        print(f"[notifier] Email already sent for {submission_id}")
        return NotifyResult(sent=False, reason="Email already sent")

    if year is None:
        year = datetime.now(timezone.utc).year
    html = results_email_html(submission, results_url(site_url, submission_id), year)

    email_id = await mailer.send(submission.email, email_subject(submission), html)
    await store.update(submission_id, {"email_sent": True})
    print(f"[notifier] Sent results email {email_id} for {submission_id}")

    return NotifyResult(sent=True, email_id=email_id)
