"""PBKDF2 password hashing with a self-describing binary output."""
from __future__ import annotations

import hashlib
import hmac
import logging
import os
from dataclasses import dataclass
from typing import Union

from .errors import (
    EntropyError,
    HeaderError,
    InvalidIterationCountError,
    InvalidKeySizeError,
    InvalidSaltSizeError,
    UnsupportedDigestError,
)
from .header import FORMAT_MARKER, HEADER_SIZE, decode_header, digest_name, encode_header

logger = logging.getLogger(__name__)

Password = Union[str, bytes, bytearray, memoryview]

_BYTES_LIKE = (bytes, bytearray, memoryview)

# hashlib.pbkdf2_hmac takes a C int round count.
MAX_ITERATIONS = 0x7FFFFFFF
MAX_SALT_SIZE = 0xFFFFFFFF


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8", "surrogatepass")
    if isinstance(password, _BYTES_LIKE):
        return bytes(password)
    raise TypeError("Password must be a string or bytes")


def _random_salt(size: int) -> bytes:
    try:
        salt = os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropyError("system random source unavailable") from exc
    if len(salt) != size:
        raise EntropyError(f"random source returned {len(salt)} of {size} bytes")
    return salt


@dataclass(frozen=True)
class HashInfo:
    digest: int
    digest_name: str
    iterations: int
    salt_size: int
    key_size: int


def inspect_hash(encoded_hash: bytes) -> HashInfo:
    """Describe the parameters an encoded hash was produced with.

    Raises ``HeaderError`` or ``UnsupportedDigestError`` when the buffer is not
    a readable hash.
    """
    header = decode_header(encoded_hash)
    key_size = len(encoded_hash) - HEADER_SIZE - header.salt_size
    if key_size < 1:
        raise HeaderError("encoded hash has no room for a sub-key")
    return HashInfo(
        digest=header.digest,
        digest_name=header.digest_name,
        iterations=header.iterations,
        salt_size=header.salt_size,
        key_size=key_size,
    )


@dataclass(frozen=True)
class Hasher:
    """Immutable hashing configuration.

    ``salt_size`` and ``key_size`` are in bytes. Use :func:`configure` to build
    one from bit sizes.
    """

    iterations: int
    salt_size: int
    key_size: int
    digest: int

    def __post_init__(self) -> None:
        if not _is_int(self.iterations) or not 1 <= self.iterations <= MAX_ITERATIONS:
            raise InvalidIterationCountError(self.iterations)
        if not _is_int(self.salt_size):
            raise InvalidSaltSizeError(self.salt_size)
        if not 1 <= self.salt_size <= MAX_SALT_SIZE:
            raise InvalidSaltSizeError(self.salt_size * 8)
        if not _is_int(self.key_size):
            raise InvalidKeySizeError(self.key_size)
        if self.key_size < 1:
            raise InvalidKeySizeError(self.key_size * 8)
        digest_name(self.digest)

    @property
    def digest_name(self) -> str:
        return digest_name(self.digest)

    def hash(self, password: Password) -> bytes:
        secret = _password_bytes(password)
        salt = _random_salt(self.salt_size)
        sub_key = hashlib.pbkdf2_hmac(
            self.digest_name, secret, salt, self.iterations, dklen=self.key_size
        )

        out = bytearray(HEADER_SIZE + len(salt) + len(sub_key))
        out[0] = FORMAT_MARKER
        encode_header(out, self.digest, self.iterations, len(salt))
        out[HEADER_SIZE:HEADER_SIZE + len(salt)] = salt
        out[HEADER_SIZE + len(salt):] = sub_key
        return bytes(out)

    def verify(self, password: Password, encoded_hash: bytes) -> bool:
        """Check ``password`` against ``encoded_hash``.

        Never raises for malformed hashes. Hashes whose salt or sub-key is
        shorter than this hasher requires are rejected; longer ones, and any
        iteration count or supported digest, are verified with the parameters
        stored in the hash itself.
        """
        secret = _password_bytes(password)
        if not isinstance(encoded_hash, _BYTES_LIKE):
            logger.debug("rejecting hash of type %s", type(encoded_hash).__name__)
            return False
        data = bytes(encoded_hash)
        if len(data) < HEADER_SIZE or data[0] != FORMAT_MARKER:
            logger.debug("rejecting hash: bad length or format marker")
            return False

        try:
            header = decode_header(data)
        except (HeaderError, UnsupportedDigestError) as exc:
            logger.debug("rejecting hash: %s", exc)
            return False

        if header.salt_size < self.salt_size:
            logger.debug("rejecting hash: salt %d < %d bytes", header.salt_size, self.salt_size)
            return False
        salt_end = HEADER_SIZE + header.salt_size
        if salt_end > len(data):
            logger.debug("rejecting hash: truncated salt")
            return False
        salt = data[HEADER_SIZE:salt_end]
        expected = data[salt_end:]
        if len(expected) < self.key_size:
            logger.debug("rejecting hash: sub-key %d < %d bytes", len(expected), self.key_size)
            return False
        if header.iterations < 1:
            logger.debug("rejecting hash: zero iteration count")
            return False

        try:
            actual = hashlib.pbkdf2_hmac(
                header.digest_name, secret, salt, header.iterations, dklen=len(expected)
            )
        except (ValueError, OverflowError) as exc:
            logger.debug("rejecting hash: %s", exc)
            return False
        return hmac.compare_digest(actual, expected)

    def needs_rehash(self, encoded_hash: bytes) -> bool:
        """Whether a stored hash differs from the parameters of this hasher."""
        try:
            info = inspect_hash(encoded_hash)
        except (HeaderError, UnsupportedDigestError, TypeError):
            return True
        return (
            info.digest != self.digest
            or info.iterations != self.iterations
            or info.salt_size != self.salt_size
            or info.key_size != self.key_size
        )


def configure(iterations: int, salt_bits: int, key_bits: int, digest: int) -> Hasher:
    """Build a :class:`Hasher`; salt and key sizes are given in bits."""
    if not _is_int(iterations) or not 1 <= iterations <= MAX_ITERATIONS:
        raise InvalidIterationCountError(iterations)
    if not _is_int(salt_bits) or salt_bits % 8 != 0 or not 1 <= salt_bits // 8 <= MAX_SALT_SIZE:
        raise InvalidSaltSizeError(salt_bits)
    if not _is_int(key_bits) or key_bits % 8 != 0 or key_bits // 8 < 1:
        raise InvalidKeySizeError(key_bits)
    return Hasher(
        iterations=iterations,
        salt_size=salt_bits // 8,
        key_size=key_bits // 8,
        digest=digest,
    )
