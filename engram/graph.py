"""Temporal edges of the knowledge graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .errors import ConfigError


class RelationType(Enum):
    """Kind of relationship between two observations."""

    CAUSED_BY = "caused_by"
    RELATED_TO = "related_to"
    SUPERSEDES = "supersedes"
    BLOCKS = "blocks"
    PART_OF = "part_of"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Parse the snake_case name of a relation."""
        try:
            return cls(text)
        except ValueError:
            raise ConfigError(f"invalid relation type: {text}") from None


def _now():
    return datetime.now(timezone.utc)


@dataclass
class Edge:
    """A relationship with a validity window; it can be superseded."""

    source_id: int
    target_id: int
    relation: RelationType
    weight: float
    id: int = 0
    valid_from: datetime = field(default_factory=_now)
    valid_until: Optional[datetime] = None
    superseded_by: Optional[int] = None
    auto_detected: bool = False

    def is_active(self):
        """True while the edge has no end to its validity."""
        return self.valid_until is None