"""Fuzzy comparison of short strings (skills, titles, locations)."""
from __future__ import annotations

EXACT = 1.0
CONTAINED = 0.8


def normalize(s: str | None) -> str:
    return (s or "").lower().strip()


def _word_overlap_ratio(a: str, b: str) -> float:
    """Share of words in *a* that contain, or are contained in, some word of *b*.

    Divides by the longer word count so a short string matching part of a
    long one does not score as a full match.
    """
    a_words = a.split()
    b_words = b.split()
    if not a_words or not b_words:
        return 0.0
    covered = sum(1 for w in a_words if any(w in bw or bw in w for bw in b_words))
    return covered / max(len(a_words), len(b_words))


def similarity(a: str | None, b: str | None) -> float:
    """Score how alike two strings are, in [0, 1].

    Rules, first match wins:
      - either side empty after normalizing      → 0.0
      - equal after normalizing                  → 1.0
      - one contains the other                   → 0.8
      - otherwise                                → word overlap ratio
    """
    a_norm = normalize(a)
    b_norm = normalize(b)
    if not a_norm or not b_norm:
        return 0.0
    if a_norm == b_norm:
        return EXACT
    if a_norm in b_norm or b_norm in a_norm:
        return CONTAINED
    return _word_overlap_ratio(a_norm, b_norm)
