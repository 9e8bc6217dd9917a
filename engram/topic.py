"""Topic key suggestion and slugification."""

from .observation import ObservationType

_FAMILIES = {
    ObservationType.ARCHITECTURE: "architecture",
    ObservationType.BUGFIX: "bug",
    ObservationType.DECISION: "decision",
    ObservationType.PATTERN: "pattern",
    ObservationType.DISCOVERY: "discovery",
    ObservationType.LEARNING: "learning",
    ObservationType.CONFIG: "config",
    ObservationType.CONVENTION: "convention",
    ObservationType.TOOL_USE: "tool",
    ObservationType.FILE_CHANGE: "file",
    ObservationType.COMMAND: "command",
    ObservationType.FILE_READ: "file",
    ObservationType.SEARCH: "search",
    ObservationType.MANUAL: "manual",
}


def suggest_topic_key(obs_type, title):
    """Suggest a key of the form "family/slug"."""
    return f"{_FAMILIES[obs_type]}/{slugify(title)}"


def slugify(text):
    """Lowercase ASCII alphanumerics, with runs of anything else as one hyphen."""
    parts = []
    last_was_hyphen = False
    for ch in text:
        if ch.isascii() and ch.isalnum():
            parts.append(ch.lower())
            last_was_hyphen = False
        elif not last_was_hyphen and parts:
            parts.append("-")
            last_was_hyphen = True
    return "".join(parts).removesuffix("-")