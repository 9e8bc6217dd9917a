from engram.observation import ObservationType
from engram.topic import slugify, suggest_topic_key


def test_slugify_basic():
    assert slugify("Fix N+1 Query in UserList!") == "fix-n-1-query-in-userlist"


def test_slugify_preserves_hyphens():
    assert slugify("already-slugified") == "already-slugified"


def test_slugify_empty():
    assert slugify("") == ""


def test_slugify_special_chars():
    assert slugify("C++ Template") == "c-template"


def test_slugify_drops_leading_separators_and_non_ascii():
    slug = slugify("  ¡Héllo World")
    assert not slug.startswith("-")
    assert slug == slugify(slug)


def test_suggest_topic_architecture():
    assert (
        suggest_topic_key(ObservationType.ARCHITECTURE, "Auth JWT Flow")
        == "architecture/auth-jwt-flow"
    )


def test_suggest_topic_bugfix():
    assert (
        suggest_topic_key(ObservationType.BUGFIX, "Fix N+1 in UserList")
        == "bug/fix-n-1-in-userlist"
    )


def test_suggest_topic_decision():
    assert (
        suggest_topic_key(ObservationType.DECISION, "Use SQLite over PostgreSQL")
        == "decision/use-sqlite-over-postgresql"
    )


def test_every_type_has_family():
    for obs_type in ObservationType:
        key = suggest_topic_key(obs_type, "Title")
        assert key.endswith("/title")