"""Fuzzy icon-name matching for "did you mean" suggestions.

calculate_similarity() is a short-circuiting decision tree, not a weighted
blend: the first rule that applies decides the score.

    1. either name empty            → 0
    2. one contains the other       → 0.8
    3. shared hyphen-separated word → 0.5 + shared/longest_word_count * 0.3
    4. otherwise                    → same-position chars / longest length
"""

from __future__ import annotations

# Suggestions must score strictly above this.
SUGGESTION_THRESHOLD = 0.3
SUBSTRING_SCORE = 0.8
_WORD_BASE = 0.5
_WORD_WEIGHT = 0.3


def calculate_similarity(a: str, b: str) -> float:
    if not a or not b:
        return 0.0

    s1 = a.lower()
    s2 = b.lower()

    if s1 in s2 or s2 in s1:
        return SUBSTRING_SCORE

    words1 = s1.split("-")
    words2 = s2.split("-")
    common = [w for w in words1 if w in words2]
    if common:
        return _WORD_BASE + (len(common) / max(len(words1), len(words2))) * _WORD_WEIGHT

    matches = sum(1 for c1, c2 in zip(s1, s2) if c1 == c2)
    return matches / max(len(s1), len(s2))


def score_candidates(query: str, candidates: list[str]) -> list[tuple[str, float]]:
    """(name, score) pairs above the threshold, best first. Ties keep input order."""
    scored = [(name, calculate_similarity(query, name)) for name in candidates]
    kept = [item for item in scored if item[1] > SUGGESTION_THRESHOLD]
    return sorted(kept, key=lambda item: item[1], reverse=True)


def search_related_file_names(query: str, candidates: list[str], limit: int = 3) -> list[str]:
    return [name for name, _ in score_candidates(query, candidates)[:limit]]
