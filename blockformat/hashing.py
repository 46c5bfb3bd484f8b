"""Hash algorithm table and the async hashing collaborator.

Names and codes come from the multihash table shipped with ``multiformats``.
The table knows more algorithms by name than it can compute; asking for a
digest with one of those raises :class:`UnsupportedHashAlgorithmError`.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from multiformats import multihash

from blockformat.errors import UnsupportedHashAlgorithmError


def hash_code(alg: str | int) -> int:
    """Return the multihash code for *alg* (a name or an already-resolved code)."""
    try:
        if isinstance(alg, int):
            return multihash.get(code=alg).code
        return multihash.get(alg).code
    except KeyError:
        raise UnsupportedHashAlgorithmError(alg, "is not a known multihash") from None


def hash_name(code: int) -> str:
    """Return the multihash name for *code*."""
    try:
        return multihash.get(code=code).name
    except KeyError:
        raise UnsupportedHashAlgorithmError(code, "is not a known multihash") from None


@runtime_checkable
class Hasher(Protocol):
    """Turns bytes into a multihash-encoded digest."""

    async def digest(self, data: bytes, code: int) -> bytes:
        ...


class MultihashHasher:
    """Default hasher backed by ``multiformats.multihash`` implementations."""

    async def digest(self, data: bytes, code: int) -> bytes:
        name = hash_name(code)
        hashfun = multihash.get(name)
        try:
            return await asyncio.to_thread(hashfun.digest, bytes(data))
        except (KeyError, ImportError, NotImplementedError):
            raise UnsupportedHashAlgorithmError(name) from None


default_hasher = MultihashHasher()
