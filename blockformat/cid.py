"""Content identifier construction."""

from __future__ import annotations

from typing import Any

from multiformats import CID

from blockformat.hashing import Hasher, default_hasher, hash_code

_BASE_FOR_VERSION = {0: "base58btc", 1: "base32"}


def is_cid(value: Any) -> bool:
    """Default link predicate: true for ``multiformats.CID`` instances."""
    return isinstance(value, CID)


def make_cid(version: int, codec_code: int, digest: bytes) -> CID:
    """Build a CID from a version, a multicodec code and a multihash digest.

    Version 0 CIDs only exist for dag-pb with sha2-256; ``multiformats``
    rejects anything else with ``ValueError``.
    """
    if version not in _BASE_FOR_VERSION:
        raise ValueError(f"Unsupported CID version {version!r}")
    return CID(_BASE_FOR_VERSION[version], version, codec_code, digest)


async def compute_cid(
    data: bytes,
    codec_code: int,
    *,
    version: int = 1,
    hash_alg: str | int,
    hasher: Hasher = default_hasher,
) -> CID:
    """Hash *data* exactly as given and wrap the digest in a CID."""
    digest = await hasher.digest(data, hash_code(hash_alg))
    return make_cid(version, codec_code, digest)
