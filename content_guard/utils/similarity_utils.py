import math
from typing import Sequence, Set
from nltk import FreqDist

from content_guard.config import (
    TOKEN_JACCARD_WEIGHT,
    COSINE_WEIGHT,
    CHAR_JACCARD_WEIGHT,
    EXACT_MATCH_SCORE,
    CONTAINMENT_SCORE,
    CONTAINMENT_MIN_CHARS,
)


def _clamp(x: float) -> float:
    return min(max(x, 0.0), 1.0)


def jaccard(a: Set[str], b: Set[str]) -> float:
    # Empty sets score 0, never 1: two blank texts are not duplicates
    if not a or not b:
        return 0.0
    inter = len(a & b)
    union = len(a) + len(b) - inter
    return inter / union


def cosine_similarity(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float:
    """Cosine of the two term-frequency vectors."""
    if not tokens_a or not tokens_b:
        return 0.0
    freq_a = FreqDist(tokens_a)
    freq_b = FreqDist(tokens_b)
    dot = sum(count * freq_b[tok] for tok, count in freq_a.items() if tok in freq_b)
    norm_a = math.sqrt(sum(c * c for c in freq_a.values()))
    norm_b = math.sqrt(sum(c * c for c in freq_b.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return _clamp(dot / (norm_a * norm_b))


def exact_bonus(norm_subject: str, norm_doc: str) -> float:
    if norm_subject and norm_doc and norm_subject == norm_doc:
        return EXACT_MATCH_SCORE
    return 0.0


def containment_bonus(norm_subject: str, norm_doc: str) -> float:
    """
    Flat score when one text contains the other verbatim (e.g. a copied headline).

    The check is a plain substring test in both directions with no word
    boundaries, so a one- or two-character document (a stub titled "A")
    sits inside almost any subject and earns the full bonus. Filter stub
    rows out of the corpus before comparing.
    """
    if len(norm_subject) < CONTAINMENT_MIN_CHARS or not norm_doc:
        return 0.0
    if norm_subject in norm_doc or norm_doc in norm_subject:
        return CONTAINMENT_SCORE
    return 0.0


def blend_scores(
    jac_token: float,
    cos: float,
    jac_char: float,
    exact: float = 0.0,
    contains: float = 0.0,
) -> float:
    """
    0.45 * word jaccard + 0.30 * cosine + 0.25 * char jaccard, with the
    exact/containment bonuses acting as a floor (max, not sum).
    Result is clamped to [0, 1].
    """
    weighted = (
        TOKEN_JACCARD_WEIGHT * jac_token
        + COSINE_WEIGHT * cos
        + CHAR_JACCARD_WEIGHT * jac_char
    )
    return _clamp(max(weighted, exact, contains))
