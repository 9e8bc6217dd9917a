"""Authenticated encryption of database files with ChaCha20-Poly1305."""

import hashlib
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

NONCE_SIZE = 12
_SQLITE_HEADER = b"SQLite format 3\0"
_SALT = b"engram-salt-v1"


class EncryptionError(Exception):
    """Encrypting data failed."""

    prefix = "encryption failed"

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class DecryptionError(EncryptionError):
    """Decrypting data failed: wrong key, tampered or malformed data."""

    prefix = "decryption failed"


def _cipher(key, error):
    try:
        return ChaCha20Poly1305(bytes(key))
    except (ValueError, TypeError) as exc:
        raise error(str(exc)) from None


def encrypt(key, plaintext):
    """Encrypt with a fresh random nonce, returned in front of the ciphertext."""
    cipher = _cipher(key, EncryptionError)
    nonce = os.urandom(NONCE_SIZE)
    return nonce + cipher.encrypt(nonce, bytes(plaintext), None)


def decrypt(key, data):
    """Decrypt data produced by encrypt."""
    data = bytes(data)
    if len(data) < NONCE_SIZE:
        raise DecryptionError("data too short")
    cipher = _cipher(key, DecryptionError)
    try:
        return cipher.decrypt(data[:NONCE_SIZE], data[NONCE_SIZE:], None)
    except InvalidTag:
        raise DecryptionError("authentication failed") from None


def is_encrypted_file(data):
    """True if the data is not a SQLite file and is long enough to be encrypted."""
    data = bytes(data)
    if data.startswith(_SQLITE_HEADER):
        return False
    return len(data) > NONCE_SIZE


def derive_key(passphrase):
    """Derive a 32-byte key from a passphrase with salted SHA-256."""
    digest = hashlib.sha256()
    digest.update(passphrase.encode("utf-8"))
    digest.update(_SALT)
    return digest.digest()