"""Beliefs that evolve as evidence arrives."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class BeliefState(Enum):
    """Where a belief stands."""

    ACTIVE = "active"
    CONFIRMED = "confirmed"
    CONTESTED = "contested"
    SUPERSEDED = "superseded"
    RETRACTED = "retracted"

    def __str__(self):
        return self.value.capitalize()


class BeliefOperation(Enum):
    """What to do to a belief in response to evidence."""

    CREATE = "create"
    UPDATE = "update"
    CONFIRM = "confirm"
    CONTEST = "contest"
    RETRACT = "retract"
    RESOLVE = "resolve"


def _now():
    return datetime.now(timezone.utc)


@dataclass
class HistoricalBelief:
    """A value a belief held in the past."""

    value: str
    valid_from: datetime
    valid_until: datetime
    superseded_by: int
    reason: str


@dataclass
class Belief:
    """A subject's current value, its confidence and its history."""

    subject: str
    current_value: str
    id: int = 0
    previous_values: list = field(default_factory=list)
    confidence: float = 0.5
    last_evidence: list = field(default_factory=list)
    state: BeliefState = BeliefState.ACTIVE
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    def process_evidence(self, new_value, new_confidence):
        """Choose the operation that new evidence calls for."""
        if self.current_value == new_value:
            return BeliefOperation.CONFIRM
        delta = new_confidence - self.confidence
        if delta > 0.2:
            return BeliefOperation.UPDATE
        if delta > -0.1:
            return BeliefOperation.CONTEST
        return BeliefOperation.CONFIRM

    def _archive(self, now, evidence_id, reason):
        self.previous_values.append(
            HistoricalBelief(
                value=self.current_value,
                valid_from=self.created_at,
                valid_until=now,
                superseded_by=evidence_id,
                reason=reason,
            )
        )

    def execute_operation(self, op, value, evidence_id):
        """Apply an operation, recording the evidence that caused it."""
        now = _now()
        self.updated_at = now
        self.last_evidence.append(evidence_id)

        if op is BeliefOperation.CREATE:
            self.state = BeliefState.ACTIVE
        elif op is BeliefOperation.UPDATE:
            self._archive(now, evidence_id, "Stronger evidence found")
            self.current_value = value
            self.state = BeliefState.ACTIVE
            self.confidence = min(self.confidence + 0.2, 1.0)
        elif op is BeliefOperation.CONFIRM:
            self.confidence = min(self.confidence + 0.1, 1.0)
            if self.confidence > 0.9 and len(self.last_evidence) >= 3:
                self.state = BeliefState.CONFIRMED
        elif op is BeliefOperation.CONTEST:
            self.state = BeliefState.CONTESTED
        elif op is BeliefOperation.RETRACT:
            self._archive(now, evidence_id, "User correction")
            self.current_value = value
            self.state = BeliefState.RETRACTED
        elif op is BeliefOperation.RESOLVE:
            self.state = BeliefState.CONFIRMED