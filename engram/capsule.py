"""Knowledge capsules: dense syntheses of what is known about a topic."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _now():
    return datetime.now(timezone.utc)


@dataclass
class KnowledgeCapsule:
    """Summary, decisions, issues and practices gathered for one topic."""

    topic: str
    project: Optional[str] = None
    id: int = 0
    summary: str = ""
    key_decisions: list = field(default_factory=list)
    known_issues: list = field(default_factory=list)
    anti_patterns: list = field(default_factory=list)
    best_practices: list = field(default_factory=list)
    source_observations: list = field(default_factory=list)
    confidence: float = 0.5
    created_at: datetime = field(default_factory=_now)
    last_consolidated: Optional[datetime] = None
    version: int = 1

    def __post_init__(self):
        if self.last_consolidated is None:
            self.last_consolidated = self.created_at

    def to_markdown(self):
        """Render the capsule as Markdown."""
        parts = [
            f"## 📌 {self.topic} (confidence: {self.confidence * 100.0:.0f}%, "
            f"v{self.version})\n\n",
            f"{self.summary}\n\n",
        ]
        sections = (
            ("Key Decisions", "", self.key_decisions),
            ("Known Issues", "", self.known_issues),
            ("Anti-Patterns", "⚠️ ", self.anti_patterns),
            ("Best Practices", "✅ ", self.best_practices),
        )
        for heading, marker, items in sections:
            if items:
                parts.append(f"**{heading}:**\n")
                parts.extend(f"- {marker}{item}\n" for item in items)
                parts.append("\n")
        parts.append(
            f"_Sources: {len(self.source_observations)} observations | "
            f"Last consolidated: {self.last_consolidated.strftime('%Y-%m-%d %H:%M')}_\n"
        )
        return "".join(parts)