"""
Turns raw article / submission rows into CorpusDocument records.

Articles keep their body in `content` (older rows only have a
`description`), submissions only ever have a `description`. Missing or
null columns become empty strings.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from content_guard.config import MAX_CORPUS_DOCUMENTS, COMPARABLE_SUBMISSION_STATUSES
from content_guard.schemas.similarity_schemas import CorpusDocument, DocumentKind

logger = logging.getLogger("content_guard.corpus_adapters")


def _field(row: Mapping[str, Any], *names: str) -> str:
    """First non-empty value among `names`, as a string."""
    for name in names:
        value = row.get(name)
        if value is not None and str(value) != "":
            return str(value)
    return ""


def article_to_document(row: Mapping[str, Any]) -> CorpusDocument:
    return CorpusDocument(
        id=_field(row, "id"),
        kind=DocumentKind.ARTICLE,
        title=_field(row, "title"),
        text=_field(row, "content", "description"),
    )


def submission_to_document(row: Mapping[str, Any]) -> CorpusDocument:
    return CorpusDocument(
        id=_field(row, "id"),
        kind=DocumentKind.SUBMISSION,
        title=_field(row, "title"),
        text=_field(row, "description"),
    )


def _is_comparable_submission(row: Mapping[str, Any]) -> bool:
    status = _field(row, "status").lower()
    return not status or status in COMPARABLE_SUBMISSION_STATUSES


def build_corpus(
    articles: Iterable[Dict[str, Any]],
    submissions: Iterable[Dict[str, Any]],
    exclude_ids: Iterable[str] = (),
    limit: Optional[int] = MAX_CORPUS_DOCUMENTS,
) -> List[CorpusDocument]:
    """
    Build a corpus snapshot: articles first, then approved/pending submissions.

    Rows are expected newest first; each kind is cut to `limit` rows before
    `exclude_ids` (e.g. the article being edited) are dropped.
    """
    excluded = {str(i) for i in exclude_ids}
    article_rows = list(articles)
    submission_rows = [s for s in submissions if _is_comparable_submission(s)]

    if limit is not None:
        if len(article_rows) > limit:
            logger.warning(f"Corpus: keeping newest {limit} of {len(article_rows)} articles")
            article_rows = article_rows[:limit]
        if len(submission_rows) > limit:
            logger.warning(f"Corpus: keeping newest {limit} of {len(submission_rows)} submissions")
            submission_rows = submission_rows[:limit]

    corpus = [article_to_document(a) for a in article_rows]
    corpus += [submission_to_document(s) for s in submission_rows]
    return [doc for doc in corpus if doc.id not in excluded]
