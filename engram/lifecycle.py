"""Lifecycle policies per observation type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .observation import ObservationType


@dataclass(frozen=True)
class LifecyclePolicy:
    """How long observations of one type stay active and how fast they decay."""

    obs_type: ObservationType
    active_max_age_days: Optional[int] = 90
    stale_after_days: Optional[int] = 90
    archive_after_days: Optional[int] = 180
    auto_delete_after_days: Optional[int] = None
    require_review_before_delete: bool = False
    decay_multiplier: float = 1.0
    searchable_when_stale: bool = True
    searchable_when_archived: bool = False

    @classmethod
    def for_type(cls, obs_type):
        """Default policy for an observation type."""
        if obs_type in (
            ObservationType.DECISION,
            ObservationType.ARCHITECTURE,
            ObservationType.PATTERN,
        ):
            return cls(
                obs_type,
                active_max_age_days=None,
                stale_after_days=None,
                archive_after_days=None,
                auto_delete_after_days=None,
                require_review_before_delete=True,
                decay_multiplier=0.3 if obs_type is ObservationType.ARCHITECTURE else 0.5,
                searchable_when_stale=True,
                searchable_when_archived=True,
            )
        if obs_type is ObservationType.COMMAND:
            return cls(
                obs_type,
                active_max_age_days=30,
                stale_after_days=30,
                archive_after_days=90,
                auto_delete_after_days=180,
                decay_multiplier=1.5,
                searchable_when_stale=False,
                searchable_when_archived=False,
            )
        if obs_type in (ObservationType.FILE_READ, ObservationType.SEARCH):
            return cls(
                obs_type,
                active_max_age_days=14,
                stale_after_days=14,
                archive_after_days=60,
                auto_delete_after_days=90,
                decay_multiplier=2.0,
                searchable_when_stale=False,
                searchable_when_archived=False,
            )
        return cls(obs_type)

    @classmethod
    def all_defaults(cls):
        """Default policies for every observation type."""
        return [cls.for_type(obs_type) for obs_type in ObservationType]