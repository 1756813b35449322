"""Default parameters and the mapping-based hasher factory."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from .errors import UnsupportedDigestError
from .hasher import Hasher, configure
from .header import DIGESTS, SHA256, digest_name

DEFAULT_ITERATIONS = 1000
DEFAULT_SALT_BITS = 128
DEFAULT_KEY_BITS = 256
DEFAULT_DIGEST = SHA256

DEFAULT_CONFIG: Dict[str, Any] = {
    "ITERATIONS": DEFAULT_ITERATIONS,
    "SALT_BITS": DEFAULT_SALT_BITS,
    "KEY_BITS": DEFAULT_KEY_BITS,
    "DIGEST": DEFAULT_DIGEST,
}

_DIGEST_SELECTORS = {name: selector for selector, name in DIGESTS.items()}


def parse_digest(value: Union[int, str]) -> int:
    """Accept a selector (``1``) or a name (``"sha256"``, ``"SHA-512"``)."""
    if isinstance(value, str):
        name = value.strip().lower().replace("-", "")
        if name.isdecimal():
            return parse_digest(int(name))
        try:
            return _DIGEST_SELECTORS[name]
        except KeyError:
            raise UnsupportedDigestError(value) from None
    digest_name(value)
    return value


def create_hasher(overrides: Optional[Mapping[str, Any]] = None) -> Hasher:
    config = dict(DEFAULT_CONFIG)
    if overrides:
        config.update(overrides)
    return configure(
        int(config["ITERATIONS"]),
        int(config["SALT_BITS"]),
        int(config["KEY_BITS"]),
        parse_digest(config["DIGEST"]),
    )
