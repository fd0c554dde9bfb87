from __future__ import annotations


def results_url(site_url: str, submission_id: str) -> str:
    """Public link to the results page for one submission."""
    return f"{site_url.rstrip('/')}/results/{submission_id}"
