"""Exceptions raised by the adaptive password hasher."""
from __future__ import annotations


class AdaptiveHasherError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(AdaptiveHasherError, ValueError):
    """A hasher was requested with invalid parameters."""


class InvalidIterationCountError(ConfigError):
    def __init__(self, iterations: int) -> None:
        super().__init__(f"iteration count must be at least 1, got {iterations}")
        self.iterations = iterations


class InvalidSaltSizeError(ConfigError):
    def __init__(self, salt_bits: int) -> None:
        super().__init__(f"salt size must be positive and divisible by 8, got {salt_bits}")
        self.salt_bits = salt_bits


class InvalidKeySizeError(ConfigError):
    def __init__(self, key_bits: int) -> None:
        super().__init__(f"key size must be positive and divisible by 8, got {key_bits}")
        self.key_bits = key_bits


class UnsupportedDigestError(ConfigError):
    def __init__(self, selector: object) -> None:
        super().__init__(f"unsupported digest selector: {selector!r}")
        self.selector = selector


class HeaderError(AdaptiveHasherError, ValueError):
    """An encoded hash is too short or carries an unknown format marker."""


class EntropyError(AdaptiveHasherError, RuntimeError):
    """The system random source could not supply salt bytes."""
