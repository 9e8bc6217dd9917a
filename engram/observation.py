"""Observations: the fundamental unit of memory."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .errors import ConfigError, InvalidObservationTypeError


class ObservationType(Enum):
    """Kind of an observation."""

    BUGFIX = "bugfix"
    DECISION = "decision"
    ARCHITECTURE = "architecture"
    PATTERN = "pattern"
    DISCOVERY = "discovery"
    LEARNING = "learning"
    CONFIG = "config"
    CONVENTION = "convention"
    TOOL_USE = "tool_use"
    FILE_CHANGE = "file_change"
    COMMAND = "command"
    FILE_READ = "file_read"
    SEARCH = "search"
    MANUAL = "manual"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Parse the snake_case name of a type."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidObservationTypeError(text) from None


class Scope(Enum):
    """Visibility of an observation."""

    PROJECT = "project"
    PERSONAL = "personal"

    def __str__(self):
        return self.value


class ProvenanceSource(Enum):
    """How an observation was verified."""

    TEST_VERIFIED = "test_verified"
    CODE_ANALYSIS = "code_analysis"
    USER_STATED = "user_stated"
    EXTERNAL = "external"
    LLM_REASONING = "llm_reasoning"
    INFERRED = "inferred"

    def __str__(self):
        return self.value

    def default_confidence(self):
        """Confidence assigned when nothing else is known."""
        return _PROVENANCE_CONFIDENCE[self]

    @classmethod
    def parse(cls, text):
        """Parse the snake_case name of a source."""
        try:
            return cls(text)
        except ValueError:
            raise ConfigError(f"invalid provenance source: {text}") from None


_PROVENANCE_CONFIDENCE = {
    ProvenanceSource.TEST_VERIFIED: 0.95,
    ProvenanceSource.CODE_ANALYSIS: 0.85,
    ProvenanceSource.USER_STATED: 0.70,
    ProvenanceSource.EXTERNAL: 0.65,
    ProvenanceSource.LLM_REASONING: 0.60,
    ProvenanceSource.INFERRED: 0.40,
}


class LifecycleState(Enum):
    """Where an observation stands in its lifecycle."""

    ACTIVE = "active"
    STALE = "stale"
    ARCHIVED = "archived"
    DELETED = "deleted"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Parse the snake_case name of a state."""
        try:
            return cls(text)
        except ValueError:
            raise ConfigError(f"invalid lifecycle state: {text}") from None


def _now():
    return datetime.now(timezone.utc)


@dataclass
class Observation:
    """A single remembered fact, event or decision."""

    type: ObservationType
    scope: Scope
    title: str
    content: str
    session_id: str
    project: str
    topic_key: Optional[str] = None
    id: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None
    access_count: int = 0
    last_accessed: Optional[datetime] = None
    pinned: bool = False
    normalized_hash: str = ""
    provenance_source: ProvenanceSource = ProvenanceSource.LLM_REASONING
    provenance_confidence: Optional[float] = None
    provenance_evidence: list = field(default_factory=list)
    lifecycle_state: LifecycleState = LifecycleState.ACTIVE
    emotional_valence: float = 0.0
    surprise_factor: float = 0.0
    effort_invested: float = 0.0

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at
        if not self.normalized_hash:
            self.normalized_hash = self.compute_hash(self.title, self.content)
        if self.provenance_confidence is None:
            self.provenance_confidence = self.provenance_source.default_confidence()

    @staticmethod
    def compute_hash(title, content):
        """SHA-256 hex digest of title and content, used for deduplication."""
        digest = hashlib.sha256()
        digest.update(title.encode("utf-8"))
        digest.update(b"\n")
        digest.update(content.encode("utf-8"))
        return digest.hexdigest()

    @staticmethod
    def generate_session_id():
        """A fresh random UUID4 string."""
        return str(uuid.uuid4())