from __future__ import annotations

import os
from pydantic import BaseModel


class Config(BaseModel):
    """Worker configuration, loaded from environment variables."""

    # Job identity: an existing row id, or a camelCase quiz payload in submit mode
    submission_id: str = ""
    submission_json: str = ""
    mode: str = "all"  # submit | all | generate | email

    # Record store (Supabase project, service-role key)
    supabase_url: str
    supabase_service_key: str
    table: str = "design_kit_submissions"

    # Optional collaborators (disabled when the key is empty)
    unsplash_access_key: str = ""
    resend_api_key: str = ""

    # Results link + sender
    site_url: str = "http://localhost:3000"
    email_from: str = "Design Kit <noreply@appin30days.com>"

    # Moodboard settings
    images_per_query: int = 3
    image_orientation: str = "portrait"

    http_timeout: float = 10.0

    @property
    def images_enabled(self) -> bool:
        return bool(self.unsplash_access_key)

    @property
    def email_enabled(self) -> bool:
        return bool(self.resend_api_key)

    @classmethod
    def from_env(cls) -> Config:
        """Load config from environment variables."""
        return cls(
            submission_id=os.environ.get("SUBMISSION_ID", ""),
            submission_json=os.environ.get("SUBMISSION_JSON", ""),
            mode=os.environ.get("MODE", "all"),
            supabase_url=os.environ["SUPABASE_URL"].rstrip("/"),
            supabase_service_key=os.environ["SUPABASE_SERVICE_KEY"],
            table=os.environ.get("SUPABASE_TABLE", "design_kit_submissions"),
            unsplash_access_key=os.environ.get("UNSPLASH_ACCESS_KEY", ""),
            resend_api_key=os.environ.get("RESEND_API_KEY", ""),
            site_url=os.environ.get("SITE_URL", "http://localhost:3000").rstrip("/"),
            email_from=os.environ.get("EMAIL_FROM", "Design Kit <noreply@appin30days.com>"),
            images_per_query=int(os.environ.get("IMAGES_PER_QUERY", "3")),
            image_orientation=os.environ.get("IMAGE_ORIENTATION", "portrait"),
            http_timeout=float(os.environ.get("HTTP_TIMEOUT", "10")),
        )
