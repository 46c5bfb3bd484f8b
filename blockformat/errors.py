"""Exceptions raised by blockformat."""

from __future__ import annotations


class BlockFormatError(Exception):
    """Base class for every error raised by this package."""


class UnknownCodecError(BlockFormatError, LookupError):
    """The codec name is not present in the multicodec table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Codec '{name}' not found")
        self.name = name


class UnsupportedHashAlgorithmError(BlockFormatError, ValueError):
    """The hash algorithm is unknown or has no implementation."""

    def __init__(self, alg: str | int, reason: str = "not yet supported") -> None:
        super().__init__(f"Hash algorithm {alg!r} {reason}")
        self.alg = alg


class NotFoundError(BlockFormatError, LookupError):
    """A path segment has no matching key or index."""

    def __init__(self, segment: str = "") -> None:
        super().__init__("Not found")
        self.segment = segment
