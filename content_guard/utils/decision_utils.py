import logging
from typing import Iterable, Optional

from content_guard.config import TOP_MATCHES_LIMIT
from content_guard.schemas.similarity_schemas import (
    CompareOptions,
    CorpusDocument,
    Decision,
    SimilarityReport,
    Subject,
)
from content_guard.utils.corpus_utils import compare_text_against_corpus

logger = logging.getLogger("content_guard.decision_utils")


def decide(max_score: float, threshold: float) -> Decision:
    """Flag when the best match reaches the caller's threshold."""
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1] (got {threshold})")
    return Decision(
        flagged=max_score >= threshold,
        threshold=threshold,
        maxScore=max_score,
    )


def check_similarity(
    subject: Subject,
    corpus: Iterable[CorpusDocument],
    threshold: float,
    options: Optional[CompareOptions] = None,
) -> SimilarityReport:
    """
    Compare, decide, and keep only the top matches for display.

    Callers pick the threshold for their workflow, typically
    PRIMARY_SIMILARITY_THRESHOLD for first-time submissions and
    FALLBACK_SIMILARITY_THRESHOLD for the confirmatory check.
    """
    result = compare_text_against_corpus(subject, corpus, options)
    decision = decide(result.maxScore, threshold)

    if decision.flagged and result.matches:
        top = result.matches[0]
        logger.info(
            f"Flagged: max score {decision.maxScore:.3f} >= {threshold} "
            f"(closest {top.kind.value} {top.id})"
        )

    return SimilarityReport(
        flagged=decision.flagged,
        threshold=decision.threshold,
        maxScore=decision.maxScore,
        topMatches=result.matches[:TOP_MATCHES_LIMIT],
    )
