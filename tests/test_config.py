from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adaptive_hasher import SHA256, SHA512, InvalidKeySizeError, UnsupportedDigestError
from adaptive_hasher.config import DEFAULT_CONFIG, create_hasher, parse_digest


def test_create_hasher_defaults():
    hasher = create_hasher()

    assert (hasher.iterations, hasher.salt_size, hasher.key_size, hasher.digest) == (1000, 16, 32, SHA256)


def test_create_hasher_overrides():
    hasher = create_hasher({"ITERATIONS": "2000", "DIGEST": "SHA-512"})

    assert hasher.iterations == 2000
    assert hasher.digest == SHA512
    assert hasher.salt_size == DEFAULT_CONFIG["SALT_BITS"] // 8


def test_create_hasher_does_not_touch_defaults():
    create_hasher({"ITERATIONS": 5})

    assert DEFAULT_CONFIG["ITERATIONS"] == 1000


def test_create_hasher_validates():
    with pytest.raises(InvalidKeySizeError):
        create_hasher({"KEY_BITS": 12})


@pytest.mark.parametrize(
    "value,expected",
    [(1, SHA256), (2, SHA512), ("sha256", SHA256), ("SHA512", SHA512), ("sha-256", SHA256), ("2", SHA512)],
)
def test_parse_digest(value, expected):
    assert parse_digest(value) == expected


@pytest.mark.parametrize("value", [0, 3, "md5", "", 1.0, True, None])
def test_parse_digest_rejects_unknown(value):
    with pytest.raises(UnsupportedDigestError):
        parse_digest(value)
