import pytest

from engram.entity import Entity, EntityType, extract_entities


def test_entity_matches_canonical():
    e = Entity("Alice", EntityType.PERSON)
    assert e.matches("Alice approved the PR")


def test_entity_matches_alias():
    e = Entity("Alice", EntityType.PERSON)
    e.add_alias("our CTO")
    assert e.matches("our CTO approved the PR")


def test_entity_no_match():
    e = Entity("Alice", EntityType.PERSON)
    assert not e.matches("Bob did something")


def test_entity_matches_case_insensitively():
    e = Entity("Alice", EntityType.PERSON)
    assert e.matches("ALICE was here")


def test_extract_file_entities():
    entities = extract_entities("Changed src/auth.rs")
    files = [name for name, kind in entities if kind is EntityType.FILE]
    assert files == ["src/auth.rs"]


def test_extract_exact_result():
    assert extract_entities("Changed src/auth.rs") == [
        ("Changed", EntityType.CONCEPT),
        ("src/auth.rs", EntityType.FILE),
    ]


def test_extract_pascal_case():
    entities = extract_entities("Using TextEmbedding from fastembed")
    assert any("TextEmbedding" in name for name, _ in entities)


@pytest.mark.parametrize("text", ["NASA", "Hi", "lowercase", "src/readme.txt"])
def test_extract_ignores_non_entities(text):
    assert extract_entities(text) == []


def test_extract_strips_punctuation():
    assert extract_entities("Ask Alice, please") == [
        ("Ask", EntityType.CONCEPT),
        ("Alice", EntityType.CONCEPT),
    ]


def test_add_alias_no_duplicates():
    e = Entity("Alice", EntityType.PERSON)
    e.add_alias("our CTO")
    e.add_alias("our CTO")
    assert e.aliases == ["our CTO"]


def test_add_alias_skips_canonical():
    e = Entity("Alice", EntityType.PERSON)
    e.add_alias("alice")
    assert e.aliases == []


def test_entity_type_str():
    assert str(Entity("settings", EntityType.CONFIG).entity_type) == "config"
    assert str(extract_entities("src/auth.rs")[0][1]) == "file"


def test_new_entity_timestamps_equal():
    e = Entity("Alice", EntityType.PERSON)
    assert e.first_seen == e.last_seen
    assert e.id == 0