"""Episodic and semantic memory, and query classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .errors import ConfigError


class MemoryType(Enum):
    """Episodic (what happened) or semantic (what is known)."""

    EPISODIC = "episodic"
    SEMANTIC = "semantic"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Parse the name of a memory type."""
        try:
            return cls(text)
        except ValueError:
            raise ConfigError(f"invalid memory type: {text}") from None


@dataclass
class EpisodicContext:
    """Where, why and with whom an episode took place."""

    where: list = field(default_factory=list)
    why: str = ""
    with_whom: Optional[str] = None
    files_before: Optional[str] = None


@dataclass
class EpisodicMemory:
    """Rich temporal context about something that happened."""

    id: int
    observation_id: int
    session_id: str
    timestamp: datetime
    what_happened: str
    context: EpisodicContext = field(default_factory=EpisodicContext)
    emotional_valence: float = 0.0
    surprise_factor: float = 0.0


@dataclass
class SemanticMemory:
    """Dense, general knowledge traceable to its source episodes."""

    id: int
    observation_id: int
    knowledge: str
    domain: str
    confidence: float
    source_episodes: list
    last_validated: datetime

    @classmethod
    def from_episode(cls, episode, domain):
        """Derive semantic knowledge from an episode."""
        return cls(
            id=0,
            observation_id=episode.observation_id,
            knowledge=episode.what_happened,
            domain=domain,
            confidence=0.6,
            source_episodes=[episode.observation_id],
            last_validated=datetime.now(timezone.utc),
        )


class QueryTarget(Enum):
    """Which kind of memory a query is after."""

    EPISODIC = "episodic"
    SEMANTIC = "semantic"
    BOTH = "both"


_EPISODIC_PHRASES = (
    "what happened",
    "last time",
    "how did",
    "what went wrong",
    "error that",
    "bug that",
)
_EPISODIC_WORDS = frozenset({"when", "yesterday", "session", "crash", "bug"})
_SEMANTIC_PHRASES = ("what is", "how to", "how do", "best practice", "why does")
_SEMANTIC_WORDS = frozenset(
    {"config", "setting", "pattern", "architecture", "decision", "approach", "explain"}
)


def classify_query_type(query):
    """Classify a query as episodic, semantic, or both."""
    lower = query.lower()
    words = set(lower.split())

    is_episodic = any(p in lower for p in _EPISODIC_PHRASES) or bool(
        words & _EPISODIC_WORDS
    )
    is_semantic = any(p in lower for p in _SEMANTIC_PHRASES) or bool(
        words & _SEMANTIC_WORDS
    )

    if is_episodic and not is_semantic:
        return QueryTarget.EPISODIC
    if is_semantic and not is_episodic:
        return QueryTarget.SEMANTIC
    return QueryTarget.BOTH