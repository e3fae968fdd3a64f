from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional

from content_guard.config import DEFAULT_NGRAM


class DocumentKind(str, Enum):
    ARTICLE = "article"
    SUBMISSION = "submission"


class Subject(BaseModel):
    """Candidate text being checked; lives for a single check call."""
    title: Optional[str] = None
    content: Optional[str] = None


class CorpusDocument(BaseModel):
    id: str
    kind: DocumentKind
    title: Optional[str] = ""
    text: Optional[str] = ""


class CompareOptions(BaseModel):
    ngram: int = Field(default=DEFAULT_NGRAM, ge=1)


class SimilarityMatch(BaseModel):
    id: str
    kind: DocumentKind
    title: str
    jaccard: float   # max of word- and char-level jaccard, 0–1
    cosine: float    # 0–1
    score: float     # blended, 0–1


class CompareResult(BaseModel):
    matches: List[SimilarityMatch] = Field(default_factory=list)
    maxScore: float = 0.0


class Decision(BaseModel):
    flagged: bool
    threshold: float
    maxScore: float


class SimilarityReport(BaseModel):
    flagged: bool
    threshold: float
    maxScore: float
    topMatches: List[SimilarityMatch] = Field(default_factory=list)
