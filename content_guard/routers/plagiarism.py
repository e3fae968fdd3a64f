from fastapi import APIRouter, HTTPException, Response
from datetime import datetime

from content_guard.config import (
    PRIMARY_SIMILARITY_THRESHOLD,
    FALLBACK_SIMILARITY_THRESHOLD,
)
from content_guard.logger import logger
from content_guard.schemas.check_schemas import (
    SimilarityCheckRequest,
    SimilarityCheckResponse,
)
from content_guard.schemas.similarity_schemas import CompareOptions, Subject
from content_guard.utils.corpus_adapters import build_corpus
from content_guard.utils.decision_utils import check_similarity

router = APIRouter(prefix="/plagiarism", tags=["plagiarism"])

GATE_THRESHOLDS = {
    "primary": PRIMARY_SIMILARITY_THRESHOLD,
    "fallback": FALLBACK_SIMILARITY_THRESHOLD,
}


@router.post("/check", response_model=SimilarityCheckResponse)
def plagiarism_check(body: SimilarityCheckRequest, response: Response):
    title = (body.title or "").strip()
    content = (body.content or body.description or "").strip()
    if not title and not content:
        raise HTTPException(status_code=400, detail="No text provided")

    threshold = body.threshold if body.threshold is not None else GATE_THRESHOLDS[body.gate]
    t0 = datetime.utcnow()

    try:
        corpus = build_corpus(body.articles, body.submissions, exclude_ids=body.excludeIds)
        logger.info(
            f"🔍 Plagiarism check ({body.mode}, {body.gate} gate): "
            f"{len(corpus)} documents, threshold {threshold}"
        )
        report = check_similarity(
            Subject(title=title, content=content),
            corpus,
            threshold,
            CompareOptions(ngram=body.ngram),
        )
    except Exception as e:
        logger.error(f"❌ Plagiarism check error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to check plagiarism")

    elapsed = (datetime.utcnow() - t0).total_seconds()
    logger.info(
        f"   ➤ Flagged: {report.flagged} | Max score: {report.maxScore:.3f} "
        f"| Matches shown: {len(report.topMatches)} | {elapsed:.2f}s"
    )

    response.headers["Cache-Control"] = "no-store"
    return SimilarityCheckResponse(
        mode=body.mode,
        flagged=report.flagged,
        threshold=report.threshold,
        maxScore=report.maxScore,
        topMatches=report.topMatches,
    )
