"""Levels of abstraction at which memory is recalled."""

from enum import Enum


class CompactionLevel(Enum):
    """From raw observations up to abstract principles."""

    RAW = "raw"
    FACT = "fact"
    PATTERN = "pattern"
    PRINCIPLE = "principle"

    def __str__(self):
        return self.value


_FACT_SIGNALS = ("what is", "how to", "config", "setting", "specific", "value")
_PATTERN_SIGNALS = ("how do we", "tend to", "usually", "pattern", "approach", "style")
_PRINCIPLE_SIGNALS = (
    "what kind",
    "type of project",
    "overall",
    "philosophy",
    "values",
    "principle",
)


def determine_level(query):
    """Pick the level a query asks about; facts when nothing else fits."""
    lower = query.lower()
    if any(s in lower for s in _FACT_SIGNALS):
        return CompactionLevel.FACT
    if any(s in lower for s in _PATTERN_SIGNALS):
        return CompactionLevel.PATTERN
    if any(s in lower for s in _PRINCIPLE_SIGNALS):
        return CompactionLevel.PRINCIPLE
    return CompactionLevel.FACT