"""Adaptive PBKDF2 password hashing with self-describing hashes."""
from __future__ import annotations

import threading
from typing import Optional

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_DIGEST,
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_BITS,
    DEFAULT_SALT_BITS,
    create_hasher,
    parse_digest,
)
from .errors import (
    AdaptiveHasherError,
    ConfigError,
    EntropyError,
    HeaderError,
    InvalidIterationCountError,
    InvalidKeySizeError,
    InvalidSaltSizeError,
    UnsupportedDigestError,
)
from .hasher import HashInfo, Hasher, Password, configure, inspect_hash
from .header import DIGESTS, FORMAT_MARKER, HEADER_SIZE, SHA256, SHA512, Header, decode_header, encode_header

__all__ = [
    "AdaptiveHasherError",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_DIGEST",
    "DEFAULT_ITERATIONS",
    "DEFAULT_KEY_BITS",
    "DEFAULT_SALT_BITS",
    "DIGESTS",
    "EntropyError",
    "FORMAT_MARKER",
    "HEADER_SIZE",
    "HashInfo",
    "Hasher",
    "Header",
    "HeaderError",
    "InvalidIterationCountError",
    "InvalidKeySizeError",
    "InvalidSaltSizeError",
    "SHA256",
    "SHA512",
    "UnsupportedDigestError",
    "configure",
    "create_hasher",
    "decode_header",
    "encode_header",
    "get_default_hasher",
    "hash_password",
    "inspect_hash",
    "parse_digest",
    "verify_password",
]

_default_hasher: Optional[Hasher] = None
_default_lock = threading.Lock()


def get_default_hasher() -> Hasher:
    """Return the shared hasher built from ``DEFAULT_CONFIG``.

    It is created on first use and never replaced; being immutable it can be
    used from any thread.
    """
    global _default_hasher
    if _default_hasher is None:
        with _default_lock:
            if _default_hasher is None:
                _default_hasher = create_hasher()
    return _default_hasher


def hash_password(password: Password) -> bytes:
    return get_default_hasher().hash(password)


def verify_password(password: Password, encoded_hash: bytes) -> bool:
    return get_default_hasher().verify(password, encoded_hash)
