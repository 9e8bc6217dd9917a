from datetime import datetime, timezone

from engram.capsule import KnowledgeCapsule

FIXED = datetime(2024, 3, 5, 14, 7, tzinfo=timezone.utc)


def test_capsule_new_has_defaults():
    capsule = KnowledgeCapsule("auth", "test")
    assert capsule.topic == "auth"
    assert capsule.project == "test"
    assert capsule.version == 1
    assert capsule.summary == ""
    assert capsule.confidence == 0.5
    assert capsule.last_consolidated == capsule.created_at


def test_capsule_markdown_format():
    capsule = KnowledgeCapsule("auth")
    capsule.summary = "JWT-based auth with RS256"
    capsule.confidence = 0.85
    capsule.key_decisions.append("Use RS256 over HS256")
    capsule.best_practices.append("15min token expiry")
    md = capsule.to_markdown()
    assert "auth" in md
    assert "85%" in md
    assert "RS256" in md
    assert "15min" in md


def test_markdown_exact_layout():
    capsule = KnowledgeCapsule(
        "db",
        summary="SQLite store",
        confidence=0.5,
        known_issues=["locking"],
        anti_patterns=["N+1 queries"],
        source_observations=[1, 2, 3],
        created_at=FIXED,
        version=2,
    )
    assert capsule.to_markdown() == (
        "## 📌 db (confidence: 50%, v2)\n\n"
        "SQLite store\n\n"
        "**Known Issues:**\n"
        "- locking\n\n"
        "**Anti-Patterns:**\n"
        "- ⚠️ N+1 queries\n\n"
        "_Sources: 3 observations | Last consolidated: 2024-03-05 14:07_\n"
    )


def test_markdown_omits_empty_sections():
    capsule = KnowledgeCapsule("empty", created_at=FIXED)
    md = capsule.to_markdown()
    assert "**" not in md
    assert md.endswith("_Sources: 0 observations | Last consolidated: 2024-03-05 14:07_\n")