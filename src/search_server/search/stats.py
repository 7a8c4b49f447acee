"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index layout so they can be
unit tested on plain values.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import math


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Return the mean rating, truncated toward zero; 0 for no ratings."""

    if not ratings:
        return 0
    total = sum(ratings)
    count = len(ratings)
    # Floor division rounds negative means down, the rating truncates instead
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def compute_term_frequencies(words: Sequence[str]) -> dict[str, float]:
    """Return each word's share of ``words``.

    The values sum to 1.0 for any non-empty input.
    """

    if not words:
        return {}
    total = len(words)
    return {word: count / total for word, count in Counter(words).items()}


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return the natural-log inverse document frequency ``ln(N / df)``."""

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)
