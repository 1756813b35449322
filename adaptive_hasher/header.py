"""Fixed-size metadata prefix carried at the front of every encoded hash.

Layout (big-endian)::

    offset 0   1 byte   format marker
    offset 1   4 bytes  digest selector
    offset 5   4 bytes  iteration count
    offset 9   4 bytes  salt length in bytes

The salt and then the derived sub-key follow the header directly.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Dict, Union

from .errors import HeaderError, UnsupportedDigestError

FORMAT_MARKER = 0x01
HEADER_SIZE = 13

SHA256 = 1
SHA512 = 2

DIGESTS: Dict[int, str] = {
    SHA256: "sha256",
    SHA512: "sha512",
}

_FIELD = struct.Struct(">I")
_HEADER = struct.Struct(">BIII")

Buffer = Union[bytes, bytearray, memoryview]


def digest_name(selector: int) -> str:
    """Resolve a digest selector to the name ``hashlib`` understands."""
    if isinstance(selector, bool) or not isinstance(selector, int):
        raise UnsupportedDigestError(selector)
    try:
        return DIGESTS[selector]
    except (KeyError, TypeError):
        raise UnsupportedDigestError(selector) from None


@dataclass(frozen=True)
class Header:
    digest: int
    iterations: int
    salt_size: int
    marker: int = FORMAT_MARKER

    @property
    def digest_name(self) -> str:
        return digest_name(self.digest)

    def pack(self) -> bytes:
        return _HEADER.pack(self.marker, self.digest, self.iterations, self.salt_size)

    @classmethod
    def unpack(cls, buffer: Buffer) -> "Header":
        if len(buffer) < HEADER_SIZE:
            raise HeaderError(f"encoded hash shorter than {HEADER_SIZE} bytes")
        marker, digest, iterations, salt_size = _HEADER.unpack_from(buffer, 0)
        return cls(digest=digest, iterations=iterations, salt_size=salt_size, marker=marker)


def encode_header(buffer: bytearray, digest: int, iterations: int, salt_size: int) -> None:
    """Write the three header fields into ``buffer``.

    Byte 0 is left untouched; the caller has already stored the format marker
    there. Values are not validated.
    """
    _FIELD.pack_into(buffer, 1, digest)
    _FIELD.pack_into(buffer, 5, iterations)
    _FIELD.pack_into(buffer, 9, salt_size)


def decode_header(buffer: Buffer) -> Header:
    """Read the header of ``buffer`` and check its digest selector.

    Raises ``HeaderError`` for short buffers or a foreign format marker, and
    ``UnsupportedDigestError`` when the selector is not in ``DIGESTS``.
    """
    header = Header.unpack(buffer)
    if header.marker != FORMAT_MARKER:
        raise HeaderError(f"unknown format marker 0x{header.marker:02x}")
    digest_name(header.digest)
    return header
