from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

from content_guard.config import DEFAULT_NGRAM
from content_guard.schemas.similarity_schemas import SimilarityMatch


class SimilarityCheckRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None  # older clients send the body here
    mode: Literal["submission", "article"] = "submission"
    gate: Literal["primary", "fallback"] = "primary"
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    ngram: int = Field(default=DEFAULT_NGRAM, ge=1)
    excludeIds: List[str] = Field(default_factory=list)
    # Raw corpus rows, newest first, as the caller read them from its store
    articles: List[Dict[str, Any]] = Field(default_factory=list)
    submissions: List[Dict[str, Any]] = Field(default_factory=list)


class SimilarityCheckResponse(BaseModel):
    mode: str
    flagged: bool
    threshold: float
    maxScore: float
    topMatches: List[SimilarityMatch]
