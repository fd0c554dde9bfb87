from __future__ import annotations

from typing import Iterable

from designkit.models import Submission
from designkit.prompts.vocabulary import FEELING_QUERIES, INSPIRATION_QUERIES, lookup

MAX_QUERIES = 3


def map_to_queries(feelings: Iterable[str], inspiration: str | None) -> list[str]:
    """Turn feelings and a design inspiration into image-search queries.

    Feelings are expanded first, in the order given, then the inspiration.
    Unknown labels contribute nothing. The result is deduplicated (first
    occurrence wins) and capped at MAX_QUERIES.
    """
    candidates: list[str] = []
    for feeling in feelings:
        candidates.extend(lookup(FEELING_QUERIES, feeling) or ())
    candidates.extend(lookup(INSPIRATION_QUERIES, inspiration) or ())

    unique = list(dict.fromkeys(candidates))
    return unique[:MAX_QUERIES]


def search_terms_for(submission: Submission) -> list[str]:
    return map_to_queries(submission.feelings, submission.design_inspiration)
