import pytest

from engram.errors import (
    ConfigError,
    DatabaseError,
    DuplicateError,
    EmbeddingError,
    EngramError,
    InvalidObservationTypeError,
    InvalidTopicKeyError,
    NotFoundError,
    SerializationError,
    SyncError,
    TooLongError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (DatabaseError, "database error: "),
        (NotFoundError, "not found: "),
        (DuplicateError, "duplicate: "),
        (InvalidTopicKeyError, "invalid topic key: "),
        (InvalidObservationTypeError, "invalid observation type: "),
        (SyncError, "sync error: "),
        (EmbeddingError, "embedding error: "),
        (ConfigError, "config error: "),
        (SerializationError, "serialization error: "),
    ],
)
def test_message_prefix_and_detail(cls, prefix):
    err = cls("something broke")
    assert str(err).startswith(prefix)
    assert str(err).endswith("something broke")
    assert err.detail == "something broke"


@pytest.mark.parametrize(
    "cls",
    [DatabaseError, NotFoundError, ConfigError, SyncError, TooLongError],
)
def test_all_errors_are_engram_errors(cls):
    args = ("5000", 2000) if cls is TooLongError else ("x",)
    err = cls(*args)
    assert isinstance(err, EngramError)
    assert isinstance(err, Exception)
    assert args[0] in str(err)


def test_too_long_keeps_fields():
    err = TooLongError("5000", 2000)
    assert err.content == "5000"
    assert err.limit == 2000
    assert str(err).startswith("content too long: 5000")
    assert str(err).endswith("exceeds limit of 2000")


def test_errors_catchable_as_exception():
    err = NotFoundError("observation 7")
    assert str(err) == "not found: observation 7"
    assert err.detail == "observation 7"
    with pytest.raises(EngramError, match="not found: observation 7") as info:
        raise err
    assert info.value is err