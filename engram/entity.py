"""Entities: different textual references resolved to the same thing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

_FILE_EXTENSIONS = (".rs", ".ts", ".go", ".py", ".js", ".toml", ".json", ".yaml")
_KEPT_PUNCTUATION = frozenset("_/\\.")


class EntityType(Enum):
    """Kind of thing an entity names."""

    PERSON = "person"
    VENDOR = "vendor"
    PROJECT = "project"
    FILE = "file"
    CONCEPT = "concept"
    TOOL = "tool"
    CONFIG = "config"

    def __str__(self):
        return self.value


def _now():
    return datetime.now(timezone.utc)


@dataclass
class Entity:
    """A named thing, with the aliases it is also known by."""

    canonical_name: str
    entity_type: EntityType
    id: int = 0
    aliases: list = field(default_factory=list)
    properties: dict = field(default_factory=dict)
    observation_ids: list = field(default_factory=list)
    first_seen: datetime = field(default_factory=_now)
    last_seen: datetime = None

    def __post_init__(self):
        if self.last_seen is None:
            self.last_seen = self.first_seen

    def matches(self, text):
        """True if the text mentions this entity or one of its aliases."""
        lower = text.lower()
        canonical = self.canonical_name.lower()
        if canonical in lower or lower in canonical:
            return True
        return any(
            alias.lower() in lower or lower in alias.lower() for alias in self.aliases
        )

    def add_alias(self, alias):
        """Add an alias unless it is already known or equals the canonical name."""
        if alias in self.aliases:
            return
        if alias.lower() == self.canonical_name.lower():
            return
        self.aliases.append(alias)


def _has_file_extension(word):
    return word.endswith(_FILE_EXTENSIONS)


def _is_pascal_case(word):
    return (
        bool(word)
        and word[0].isupper()
        and any(ch.islower() for ch in word)
        and " " not in word
    )


def extract_entities(text):
    """Find file paths and PascalCase names in text, as (name, type) pairs."""
    entities = []
    for word in text.split():
        clean = "".join(
            ch for ch in word if ch.isalnum() or ch in _KEPT_PUNCTUATION
        )
        if ("/" in clean or "\\" in clean) and _has_file_extension(clean):
            entities.append((clean, EntityType.FILE))
            continue
        if _is_pascal_case(clean) and len(clean.encode("utf-8")) > 2:
            entities.append((clean, EntityType.CONCEPT))
    return entities