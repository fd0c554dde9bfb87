"""Worker entrypoint: store a quiz submission, generate its design kit, email the results link."""
from __future__ import annotations

import asyncio
import sys

from designkit.config import Config
from designkit.images import ImageSearch
from designkit.mailer import Mailer
from designkit.models import SubmissionForm
from designkit.pipeline.generator import generate_design_kit
from designkit.pipeline.notifier import send_results_email
from designkit.pipeline.submit import create_submission
from designkit.store import SubmissionStore

MODES = ("submit", "all", "generate", "email")


def check_job(config: Config) -> None:
    """Raise ValueError if the job settings cannot be run."""
    if config.mode not in MODES:
        raise ValueError(f"Unknown MODE '{config.mode}' (expected one of {', '.join(MODES)})")
    if config.mode == "submit":
        if not config.submission_json:
            raise ValueError("SUBMISSION_JSON is required in submit mode")
    elif not config.submission_id:
        raise ValueError("SUBMISSION_ID is required")


async def main(config: Config, store: SubmissionStore | None = None) -> bool:
    """Run the configured steps for one submission. Returns True if all succeeded.

    In submit mode the quiz payload is validated and stored first, then both
    steps run on the new row. Generation and email are independent: a failure
    in one is reported and the other still runs.
    """
    check_job(config)
    store = store or SubmissionStore(config)
    submission_id = config.submission_id

    if config.mode == "submit":
        form = SubmissionForm.model_validate_json(config.submission_json)
        submission_id = await create_submission(form, store)

    ok = True
    print(f"[main] Worker started for submission {submission_id} (mode: {config.mode})")

    if config.mode in ("submit", "all", "generate"):
        try:
            await generate_design_kit(submission_id, store, ImageSearch(config))
        except Exception as e:
            print(f"[main] Generate prompt failed: {e}")
            ok = False

    if config.mode in ("submit", "all", "email"):
        try:
            await send_results_email(submission_id, config.site_url, store, Mailer(config))
        except Exception as e:
            print(f"[main] Send email failed: {e}")
            ok = False

    print(f"[main] Worker finished ({'ok' if ok else 'with errors'})")
    return ok


def run() -> None:
    """Sync entrypoint for the worker."""
    try:
        config = Config.from_env()
        if config.mode == "submit" and not config.submission_json:
            config = config.model_copy(update={"submission_json": sys.stdin.read()})
        ok = asyncio.run(main(config))
    except Exception as e:
        print(f"[main] Worker failed: {e}")
        sys.exit(1)
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    run()
