"""Knowledge boundaries: how much the system knows about each domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional


class ConfidenceLevel(IntEnum):
    """Confidence in a domain; lower values mean more confidence."""

    EXPERT = 0
    PROFICIENT = 1
    FAMILIAR = 2
    AWARE = 3
    UNKNOWN = 4

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, spec):
        return format(str(self), spec)

    @classmethod
    def from_count(cls, count):
        """Level implied by a number of observations."""
        if count <= 0:
            return cls.UNKNOWN
        if count <= 4:
            return cls.AWARE
        if count <= 9:
            return cls.FAMILIAR
        if count <= 20:
            return cls.PROFICIENT
        return cls.EXPERT

    def score(self):
        """Numeric score; higher means more confident."""
        return _SCORES[self]


_SCORES = {
    ConfidenceLevel.EXPERT: 1.0,
    ConfidenceLevel.PROFICIENT: 0.75,
    ConfidenceLevel.FAMILIAR: 0.5,
    ConfidenceLevel.AWARE: 0.25,
    ConfidenceLevel.UNKNOWN: 0.0,
}

_DEMOTED = {
    ConfidenceLevel.EXPERT: ConfidenceLevel.PROFICIENT,
    ConfidenceLevel.PROFICIENT: ConfidenceLevel.FAMILIAR,
    ConfidenceLevel.FAMILIAR: ConfidenceLevel.AWARE,
}

_MARKERS = {
    ConfidenceLevel.EXPERT: "🟢",
    ConfidenceLevel.PROFICIENT: "🔵",
    ConfidenceLevel.FAMILIAR: "🟡",
    ConfidenceLevel.AWARE: "🟠",
    ConfidenceLevel.UNKNOWN: "🔴",
}


@dataclass
class BoundaryEvidence:
    """Counts supporting a knowledge boundary."""

    observations_count: int = 0
    successful_applications: int = 0
    failed_applications: int = 0
    last_used: Optional[datetime] = None


@dataclass
class KnowledgeBoundary:
    """What the system knows about one domain."""

    domain: str
    confidence_level: ConfidenceLevel = ConfidenceLevel.UNKNOWN
    evidence: BoundaryEvidence = field(default_factory=BoundaryEvidence)

    def recalculate(self):
        """Derive the level from evidence, demoting it when failures dominate."""
        level = ConfidenceLevel.from_count(self.evidence.observations_count)
        ev = self.evidence
        if ev.failed_applications > ev.successful_applications > 0:
            level = _DEMOTED.get(level, level)
        self.confidence_level = level

    def record_success(self):
        """Count a successful application of this knowledge."""
        self.evidence.successful_applications += 1
        self.evidence.last_used = datetime.now(timezone.utc)
        self.recalculate()

    def record_failure(self):
        """Count a failed application of this knowledge."""
        self.evidence.failed_applications += 1
        self.evidence.last_used = datetime.now(timezone.utc)
        self.recalculate()

    def add_observations(self, count):
        """Add observations to this domain."""
        self.evidence.observations_count += count
        self.recalculate()

    def format_for_context(self):
        """One-line summary for context injection."""
        ev = self.evidence
        return (
            f"{_MARKERS[self.confidence_level]} {self.domain}: "
            f"{str(self.confidence_level)} ({ev.observations_count} observations, "
            f"{ev.successful_applications} successes, "
            f"{ev.failed_applications} failures)"
        )