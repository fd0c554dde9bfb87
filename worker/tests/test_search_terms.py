from __future__ import annotations

from designkit.prompts.search_terms import MAX_QUERIES, map_to_queries, search_terms_for
from designkit.prompts.vocabulary import FEELING_QUERIES, INSPIRATION_QUERIES


def test_single_feeling_fills_all_slots_before_inspiration():
    assert map_to_queries(["Calm & peaceful"], "calm") == [
        "minimal nature zen",
        "peaceful meditation",
        "calm minimal",
    ]


def test_first_feeling_wins_when_several_selected():
    result = map_to_queries(["Bold & edgy", "Fun & playful"], "duolingo")
    assert result == ["bold graphic design", "edgy modern", "striking contrast"]


def test_inspiration_used_when_feelings_unknown():
    assert map_to_queries(["Sleepy & slow"], "stripe") == [
        "professional sleek",
        "modern gradient",
    ]


def test_unknown_everything_returns_empty():
    assert map_to_queries(["nope"], "nope") == []
    assert map_to_queries([], None) == []


def test_absent_inspiration_contributes_nothing():
    assert map_to_queries(["Warm & friendly"], None) == [
        "warm cozy",
        "friendly welcoming",
        "soft comfortable",
    ]


def test_duplicates_keep_first_position():
    # Repeating a feeling yields the same three strings once.
    result = map_to_queries(["Minimal & clean", "Minimal & clean"], "notion")
    assert result == ["minimal clean design", "simple aesthetic", "white space"]


def test_every_combination_is_unique_and_capped():
    inspirations = [*INSPIRATION_QUERIES, None, "unknown"]
    for feeling in FEELING_QUERIES:
        for other in FEELING_QUERIES:
            for inspiration in inspirations:
                result = map_to_queries([feeling, other], inspiration)
                assert len(result) <= MAX_QUERIES
                assert len(result) == len(set(result))
                assert result[0] == FEELING_QUERIES[feeling][0]


def test_repeated_calls_are_identical(make_submission):
    submission = make_submission(feelings=["Luxurious & premium"], design_inspiration="headspace")
    assert search_terms_for(submission) == search_terms_for(submission)
    assert search_terms_for(submission) == [
        "luxury premium",
        "elegant sophisticated",
        "high-end design",
    ]
