"""Relevance scoring from recency, access frequency and pinning."""

import math
from datetime import datetime, timezone

HALF_LIFE_DAYS = 30.0
MAX_ACCESS_FOR_FULL_SCORE = 100.0


def decay_score(created_at, access_count, pinned):
    """Relevance score with the default decay rate."""
    return decay_score_with_lifecycle(created_at, access_count, pinned, 1.0)


def decay_score_with_lifecycle(created_at, access_count, pinned, decay_multiplier):
    """Equal blend of recency and frequency; the multiplier speeds or slows decay."""
    recency = recency_score(created_at, pinned, decay_multiplier)
    frequency = frequency_score(access_count)
    return 0.5 * recency + 0.5 * frequency


def recency_score(created_at, pinned, decay_multiplier):
    """Exponential half-life decay of age; pinned items always score 1."""
    if pinned:
        return 1.0
    elapsed = datetime.now(timezone.utc) - created_at
    age_days = int(elapsed.total_seconds()) / 86400.0
    effective_age = age_days * decay_multiplier
    return 0.5 ** (effective_age / HALF_LIFE_DAYS)


def frequency_score(access_count):
    """Logarithmic boost reaching 1 at the full-score access count."""
    if access_count <= 0:
        return 0.0
    return min(math.log(access_count) / math.log(MAX_ACCESS_FOR_FULL_SCORE), 1.0)


def compute_final_score(fts_score, vector_score, recency, frequency):
    """Weighted combination of text, vector, recency and frequency signals."""
    return 0.3 * fts_score + 0.3 * vector_score + 0.2 * recency + 0.2 * frequency