"""Memory events for real-time streaming, and throttles for their delivery."""

from __future__ import annotations

import hashlib
import json
import time
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import ClassVar


class MemoryEvent:
    """Base of all memory events; each kind has a snake_case tag."""

    kind: ClassVar[str] = ""

    def to_dict(self):
        """A JSON-ready mapping tagged with the event kind."""
        return {"type": self.kind, **asdict(self)}


@dataclass
class RelevantFileContext(MemoryEvent):
    """Relevant memories were found for the current file."""

    kind: ClassVar[str] = "relevant_file_context"

    file_path: str
    observation_ids: list = field(default_factory=list)

    def __str__(self):
        return f"📁 {self.file_path} has {len(self.observation_ids)} memories"


@dataclass
class AntiPatternWarning(MemoryEvent):
    """An anti-pattern was detected in the current work."""

    kind: ClassVar[str] = "anti_pattern_warning"

    pattern_description: str
    suggestion: str

    def __str__(self):
        return f"⚠️ Anti-pattern: {self.pattern_description}"


@dataclass
class DejaVu(MemoryEvent):
    """The current task matches a previous solution."""

    kind: ClassVar[str] = "deja_vu"

    current_task: str
    previous_observation_id: int
    similarity: float

    def __str__(self):
        return f"🔄 Déjà vu! ({self.similarity * 100.0:.0f}% similarity)"


@dataclass
class KnowledgeUpdated(MemoryEvent):
    """A knowledge capsule was updated."""

    kind: ClassVar[str] = "knowledge_updated"

    topic: str
    changes: str

    def __str__(self):
        return f"📌 Knowledge updated: {self.topic}"


@dataclass
class ReviewDue(MemoryEvent):
    """A spaced-repetition review is due."""

    kind: ClassVar[str] = "review_due"

    observation_id: int
    interval_days: float

    def __str__(self):
        return f"🔄 Review due ({self.interval_days:.0f} days)"


@dataclass
class ExtractedEntity:
    """One entity extracted from event text."""

    name: str
    entity_type: str
    confidence: float


@dataclass
class EntityExtracted(MemoryEvent):
    """Entities were extracted from event text."""

    kind: ClassVar[str] = "entity_extracted"

    entities: list = field(default_factory=list)
    topic_entropy: dict = field(default_factory=dict)

    def __str__(self):
        return f"🔍 Extracted {len(self.entities)} entity(ies)"


class EventThrottle:
    """Lets events through at most once per interval of whole seconds."""

    def __init__(self, min_interval_secs):
        self.min_interval_secs = min_interval_secs
        self._last_event_time = None

    def should_deliver(self):
        """True if an event may be delivered now; records the delivery."""
        now = time.monotonic()
        if self._last_event_time is not None:
            elapsed = int(now - self._last_event_time)
            if elapsed < self.min_interval_secs:
                return False
        self._last_event_time = now
        return True


class NotificationThrottle:
    """Millisecond throttle that also suppresses recently sent duplicates."""

    def __init__(self, min_interval_ms, hash_window_size):
        self.min_interval_ms = min_interval_ms
        self.hash_window_size = hash_window_size
        self._last_sent_time = None
        self._recent_hashes = deque(maxlen=hash_window_size)

    @staticmethod
    def content_hash(event):
        """SHA-256 hex digest of the event's compact JSON form."""
        encoded = json.dumps(event.to_dict(), separators=(",", ":"), ensure_ascii=False)
        return hashlib.sha256(encoded.encode("utf-8")).hexdigest()

    def should_send(self, event):
        """True unless the event is a recent duplicate or comes too soon."""
        digest = self.content_hash(event)
        if digest in self._recent_hashes:
            return False

        now = time.monotonic()
        if self._last_sent_time is not None:
            elapsed_ms = int((now - self._last_sent_time) * 1000)
            if elapsed_ms < self.min_interval_ms:
                return False

        self._last_sent_time = now
        self._recent_hashes.append(digest)
        return True

    def reset(self):
        """Forget the last delivery time and the remembered hashes."""
        self._last_sent_time = None
        self._recent_hashes.clear()