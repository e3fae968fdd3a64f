import os
from dotenv import load_dotenv

load_dotenv()

def threshold_from_env(name: str, default: str) -> float:
    value = float(os.getenv(name, default))
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1] (got {value})")
    return value

# ───── Decision thresholds ─────
# Authoring-time gate, compared against the larger corpus slice
PRIMARY_SIMILARITY_THRESHOLD = threshold_from_env("PRIMARY_SIMILARITY_THRESHOLD", "0.45")
# Confirmatory gate, compared against the smaller client-visible corpus
FALLBACK_SIMILARITY_THRESHOLD = threshold_from_env("FALLBACK_SIMILARITY_THRESHOLD", "0.6")

# ───── N-gram sizing ─────
DEFAULT_NGRAM = 3
CHAR_NGRAM = 3
# Subjects shorter than these (in normalized chars) use 2- and 1-char grams
SHORT_TEXT_CHARS = 6
TINY_TEXT_CHARS = 4

# ───── Score blending ─────
TOKEN_JACCARD_WEIGHT = 0.45
COSINE_WEIGHT = 0.30
CHAR_JACCARD_WEIGHT = 0.25
EXACT_MATCH_SCORE = 1.0
CONTAINMENT_SCORE = 0.9
CONTAINMENT_MIN_CHARS = 4

TOP_MATCHES_LIMIT = 5

# ───── Corpus ─────
MAX_CORPUS_DOCUMENTS = int(os.getenv("MAX_CORPUS_DOCUMENTS", "1000"))
COMPARABLE_SUBMISSION_STATUSES = {"approved", "pending"}

# ───── Service ─────
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else ["*"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
