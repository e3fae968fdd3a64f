import logging
from typing import Iterable, List, Optional, Set

from content_guard.schemas.similarity_schemas import (
    CompareOptions,
    CompareResult,
    CorpusDocument,
    SimilarityMatch,
    Subject,
)
from content_guard.utils.text_utils import (
    normalize_text,
    tokenize,
    word_ngrams,
    char_ngrams,
    adaptive_ngram_sizes,
)
from content_guard.utils.similarity_utils import (
    jaccard,
    cosine_similarity,
    exact_bonus,
    containment_bonus,
    blend_scores,
)

logger = logging.getLogger("content_guard.corpus_utils")


class _PreparedSubject:
    """Subject text normalized, tokenized and n-grammed once per call."""

    def __init__(self, subject: Subject, ngram: int):
        raw = f"{subject.title or ''} {subject.content or ''}".strip()
        self.text = normalize_text(raw)
        self.tokens = tokenize(self.text)
        self.token_n, self.char_n = adaptive_ngram_sizes(self.text, self.tokens, ngram)
        self.word_grams: Set[str] = word_ngrams(self.tokens, self.token_n)
        self.char_grams: Set[str] = char_ngrams(self.text, self.char_n)


def _score_document(subj: _PreparedSubject, doc: CorpusDocument) -> Optional[SimilarityMatch]:
    doc_text = normalize_text(f"{doc.title or ''} {doc.text or ''}")
    doc_tokens = tokenize(doc_text)

    jac_token = jaccard(subj.word_grams, word_ngrams(doc_tokens, subj.token_n))
    cos = cosine_similarity(subj.tokens, doc_tokens)
    jac_char = jaccard(subj.char_grams, char_ngrams(doc_text, subj.char_n))
    exact = exact_bonus(subj.text, doc_text)
    contains = containment_bonus(subj.text, doc_text)

    score = blend_scores(jac_token, cos, jac_char, exact, contains)
    if score <= 0:
        return None

    return SimilarityMatch(
        id=doc.id,
        kind=doc.kind,
        title=doc.title or "",
        jaccard=max(jac_token, jac_char),
        cosine=cos,
        score=score,
    )


def compare_text_against_corpus(
    subject: Subject,
    corpus: Iterable[CorpusDocument],
    options: Optional[CompareOptions] = None,
) -> CompareResult:
    """
    Score the subject against every corpus document.

    Returns the non-zero matches sorted by blended score (highest first,
    ties in corpus order) and the top score. Blank subjects, blank
    documents and empty corpora all produce zero-score results rather
    than errors.
    """
    options = options or CompareOptions()
    docs: List[CorpusDocument] = list(corpus)
    subj = _PreparedSubject(subject, options.ngram)

    if not docs or not subj.text:
        logger.debug(f"Nothing to compare (docs={len(docs)}, subject_chars={len(subj.text)})")
        return CompareResult(matches=[], maxScore=0.0)

    scored = [_score_document(subj, d) for d in docs]
    matches = [m for m in scored if m is not None]
    matches.sort(key=lambda m: m.score, reverse=True)
    max_score = matches[0].score if matches else 0.0

    logger.debug(
        f"Compared subject ({len(subj.tokens)} tokens) against {len(docs)} documents: "
        f"{len(matches)} matches, max score {max_score:.3f}"
    )
    return CompareResult(matches=matches, maxScore=max_score)
