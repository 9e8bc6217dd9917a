import pytest

from engram.lifecycle import LifecyclePolicy
from engram.observation import ObservationType


def test_decision_is_permanent():
    p = LifecyclePolicy.for_type(ObservationType.DECISION)
    assert p.auto_delete_after_days is None
    assert p.stale_after_days is None
    assert p.require_review_before_delete is True
    assert p.decay_multiplier < 1.0


def test_command_auto_purges():
    p = LifecyclePolicy.for_type(ObservationType.COMMAND)
    assert p.auto_delete_after_days == 180
    assert p.stale_after_days == 30
    assert p.require_review_before_delete is False
    assert p.decay_multiplier > 1.0


def test_bugfix_archived_not_deleted():
    p = LifecyclePolicy.for_type(ObservationType.BUGFIX)
    assert p.auto_delete_after_days is None
    assert p.archive_after_days == 180
    assert p.searchable_when_stale is True


def test_architecture_is_permanent():
    p = LifecyclePolicy.for_type(ObservationType.ARCHITECTURE)
    assert p.auto_delete_after_days is None
    assert p.archive_after_days is None
    assert p.decay_multiplier == pytest.approx(0.3)


def test_fileread_is_ephemeral():
    p = LifecyclePolicy.for_type(ObservationType.FILE_READ)
    assert p.auto_delete_after_days == 90
    assert p.searchable_when_stale is False
    assert p.decay_multiplier == pytest.approx(2.0)


def test_search_matches_fileread():
    search = LifecyclePolicy.for_type(ObservationType.SEARCH)
    file_read = LifecyclePolicy.for_type(ObservationType.FILE_READ)
    assert search.archive_after_days == file_read.archive_after_days
    assert search.obs_type is ObservationType.SEARCH


def test_pattern_like_decision():
    p = LifecyclePolicy.for_type(ObservationType.PATTERN)
    assert p.decay_multiplier == pytest.approx(0.5)
    assert p.searchable_when_archived is True


def test_default_policy_for_remaining_types():
    p = LifecyclePolicy.for_type(ObservationType.LEARNING)
    assert p.active_max_age_days == 90
    assert p.archive_after_days == 180
    assert p.decay_multiplier == pytest.approx(1.0)
    assert p.searchable_when_archived is False


def test_all_defaults_cover_all_types():
    policies = LifecyclePolicy.all_defaults()
    assert len(policies) == 14
    assert {p.obs_type for p in policies} == set(ObservationType)