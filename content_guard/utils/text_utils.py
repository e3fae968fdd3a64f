import re
import logging
import unicodedata
from typing import List, Optional, Sequence, Set, Tuple
from nltk.util import ngrams

from content_guard.config import (
    DEFAULT_NGRAM,
    CHAR_NGRAM,
    SHORT_TEXT_CHARS,
    TINY_TEXT_CHARS,
)

logger = logging.getLogger("content_guard.text_utils")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_URLS = re.compile(r"https?://\S+")
_WHITESPACE = re.compile(r"\s+")


def _is_punct_or_symbol(ch: str) -> bool:
    return unicodedata.category(ch)[0] in ("P", "S")


def normalize_text(text: Optional[str]) -> str:
    """
    Lowercase, drop control chars, URLs, punctuation and symbols,
    then collapse whitespace. Missing input gives "".
    """
    if not text:
        return ""
    text = text.lower()
    text = _CONTROL_CHARS.sub(" ", text)
    text = _URLS.sub(" ", text)
    text = "".join(" " if _is_punct_or_symbol(ch) else ch for ch in text)
    text = _WHITESPACE.sub(" ", text).strip()
    return text


def tokenize(norm_text: str) -> List[str]:
    """Split already-normalized text into word tokens."""
    if not norm_text:
        return []
    return [tok for tok in norm_text.split(" ") if tok]


def word_ngrams(tokens: Sequence[str], n: int) -> Set[str]:
    if n < 1:
        raise ValueError(f"n-gram size must be >= 1 (got {n})")
    if len(tokens) < n:
        return set()
    return {" ".join(gram) for gram in ngrams(tokens, n)}


def char_ngrams(text: str, n: int) -> Set[str]:
    if n < 1:
        raise ValueError(f"n-gram size must be >= 1 (got {n})")
    if not text:
        return set()
    s = _WHITESPACE.sub(" ", text)
    if len(s) < n:
        return set()
    return {"".join(gram) for gram in ngrams(s, n)}


def adaptive_ngram_sizes(
    subject_text: str,
    subject_tokens: Sequence[str],
    ngram: int = DEFAULT_NGRAM,
) -> Tuple[int, int]:
    """
    Pick (word n, char n) from the subject alone so both sides of every
    comparison share the same sizes.

    Headline-only subjects would never produce a 3-word gram, so they drop
    to unigrams; very short strings drop to 2- or 1-char grams.
    """
    token_n = ngram if len(subject_tokens) >= ngram else 1

    if len(subject_text) >= SHORT_TEXT_CHARS:
        char_n = CHAR_NGRAM
    elif len(subject_text) >= TINY_TEXT_CHARS:
        char_n = 2
    else:
        char_n = 1

    logger.debug(
        f"n-gram sizes: word={token_n} char={char_n} "
        f"(tokens={len(subject_tokens)}, chars={len(subject_text)})"
    )
    return token_n, char_n
