"""Block codec protocol — the minimal contract every codec must satisfy."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BlockCodec(Protocol):
    """An opaque encode/decode pair identified by a multicodec name."""

    name: str
    code: int

    def encode(self, value: Any) -> bytes:
        """Return the binary representation of *value*."""
        ...

    def decode(self, data: bytes) -> Any:
        """Return the value represented by *data*.

        Must not keep references to *data* that outlive the call.
        """
        ...
