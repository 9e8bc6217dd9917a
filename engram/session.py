"""Coding sessions that group observations by time and context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .observation import Observation


def _now():
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """A coding session; active until it is ended."""

    project: str
    id: str = field(default_factory=Observation.generate_session_id)
    started_at: datetime = field(default_factory=_now)
    ended_at: Optional[datetime] = None
    summary: Optional[str] = None

    def end(self, summary=None):
        """Close the session now, recording an optional summary."""
        self.ended_at = _now()
        self.summary = summary

    def is_active(self):
        """True while the session has not been ended."""
        return self.ended_at is None


@dataclass
class SessionSummary:
    """Condensed view of a session for display."""

    id: str
    project: str
    started_at: datetime
    ended_at: Optional[datetime] = None
    observation_count: int = 0
    summary: Optional[str] = None