import pytest

from engram.crypto import (
    DecryptionError,
    EncryptionError,
    decrypt,
    derive_key,
    encrypt,
    is_encrypted_file,
)


def test_encrypt_decrypt_roundtrip():
    key = derive_key("password")
    plaintext = b"SQLite format 3\0 some fake database content here"
    encrypted = encrypt(key, plaintext)
    assert encrypted[12:] != plaintext
    assert len(encrypted) == 12 + len(plaintext) + 16
    assert decrypt(key, encrypted) == plaintext


def test_decrypt_wrong_key_fails():
    key1 = derive_key("password")
    key2 = derive_key("secret")
    encrypted = encrypt(key1, b"sensitive data")
    with pytest.raises(DecryptionError):
        decrypt(key2, encrypted)


def test_decrypt_tampered_data_fails():
    key = derive_key("password")
    encrypted = bytearray(encrypt(key, b"data"))
    encrypted[15] ^= 0xFF
    with pytest.raises(DecryptionError):
        decrypt(key, bytes(encrypted))


def test_decrypt_too_short_fails():
    key = derive_key("password")
    with pytest.raises(DecryptionError, match="data too short"):
        decrypt(key, bytes([1, 2, 3]))


def test_decryption_error_is_encryption_error():
    with pytest.raises(EncryptionError, match="^decryption failed"):
        decrypt(derive_key("password"), b"")


def test_bad_key_length_raises():
    with pytest.raises(EncryptionError, match="^encryption failed"):
        encrypt(b"short", b"data")


def test_derive_key_deterministic():
    assert derive_key("password") == derive_key("password")
    assert len(derive_key("password")) == 32


def test_derive_key_different_passphrases():
    assert derive_key("password") != derive_key("secret")


def test_is_encrypted_detection():
    assert is_encrypted_file(b"SQLite format 3\0\x04\x00\x01\x01") is False
    assert is_encrypted_file(bytes([0xFF]) * 100) is True
    assert is_encrypted_file(bytes(12)) is False


def test_encrypted_output_is_detected():
    encrypted = encrypt(derive_key("token"), b"SQLite format 3\0 payload")
    assert is_encrypted_file(encrypted) is True


def test_different_encryptions_differ():
    key = derive_key("password")
    first = encrypt(key, b"same data")
    second = encrypt(key, b"same data")
    assert first[:12] != second[:12]
    assert first != second
    assert decrypt(key, first) == b"same data"
    assert decrypt(key, second) == b"same data"