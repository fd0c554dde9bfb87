"""Derive the design kit (build prompt + moodboard) and write it back."""
from __future__ import annotations

from designkit.images import ImageSearch
from designkit.models import DesignKit
from designkit.prompts.build_prompt import compile_prompt
from designkit.prompts.search_terms import search_terms_for
from designkit.store import SubmissionStore


async def generate_design_kit(
    submission_id: str,
    store: SubmissionStore,
    images: ImageSearch,
) -> DesignKit:
    """Compile the build prompt and moodboard for one stored submission.

    The moodboard is best effort: missing credentials or search failures
    leave it empty. Store errors propagate.
    """
    submission = await store.get(submission_id)

    prompt = compile_prompt(submission)
    queries = search_terms_for(submission)
    print(f"[generator] Prompt compiled ({len(prompt)} chars), queries: {queries}")

    moodboard = await images.moodboard(queries)

    await store.update(submission_id, {
        "generated_prompt": prompt,
        "moodboard_images": moodboard,
    })
    print(f"[generator] Saved design kit for {submission_id} ({len(moodboard)} images)")

    return DesignKit(prompt=prompt, queries=queries, images=moodboard)
