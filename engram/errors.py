"""Error hierarchy shared by every part of the package."""


class EngramError(Exception):
    """Base class for all errors raised by the package."""

    prefix = ""

    def __init__(self, detail=""):
        self.detail = detail
        message = f"{self.prefix}: {detail}" if self.prefix else str(detail)
        super().__init__(message)


class DatabaseError(EngramError):
    """A storage operation failed."""

    prefix = "database error"


class NotFoundError(EngramError):
    """A requested item does not exist."""

    prefix = "not found"


class DuplicateError(EngramError):
    """An item with the same identity already exists."""

    prefix = "duplicate"


class TooLongError(EngramError):
    """Content exceeds the allowed length."""

    def __init__(self, content, limit):
        self.content = content
        self.limit = limit
        super().__init__(
            f"content too long: {content} chars exceeds limit of {limit}"
        )


class InvalidTopicKeyError(EngramError):
    """A topic key is malformed."""

    prefix = "invalid topic key"


class InvalidObservationTypeError(EngramError):
    """A string does not name an observation type."""

    prefix = "invalid observation type"


class SyncError(EngramError):
    """Synchronisation failed."""

    prefix = "sync error"


class EmbeddingError(EngramError):
    """Computing an embedding failed."""

    prefix = "embedding error"


class ConfigError(EngramError):
    """A configuration value is invalid."""

    prefix = "config error"


class SerializationError(EngramError):
    """Encoding or decoding data failed."""

    prefix = "serialization error"