"""Data models: resolve results and the converted format."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Callable

from multiformats import CID

from blockformat.cid import compute_cid, is_cid
from blockformat.hashing import Hasher, default_hasher

# ---------------------------------------------------------------------------
# Resolve result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolveResult:
    """Where path resolution stopped.

    ``remainder_path`` is only non-empty when ``value`` is a link and path
    segments were left over.
    """

    value: Any
    remainder_path: str = ""


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Format:
    """A block codec plus identifier, resolve and tree operations.

    Built by :func:`blockformat.convert.convert`; immutable afterwards.
    """

    codec_name: str
    codec_code: int
    default_hash_alg: int  # multihash code
    encode: Callable[[Any], bytes] = field(repr=False)
    decode: Callable[[bytes], Any] = field(repr=False)
    default_cid_version: int = 1
    resolve_override: Callable[[bytes, str], ResolveResult] | None = field(default=None, repr=False)
    tree_override: Callable[[bytes], Any] | None = field(default=None, repr=False)
    is_link: Callable[[Any], bool] = field(default=is_cid, repr=False)
    hasher: Hasher = field(default=default_hasher, repr=False)

    # ---- util ----
    def serialize(self, value: Any) -> bytes:
        return self.encode(value)

    def deserialize(self, data: bytes) -> Any:
        return self.decode(data)

    async def cid(
        self,
        data: bytes,
        *,
        version: int | None = None,
        hash_alg: str | int | None = None,
    ) -> CID:
        """Compute the CID of *data*, the already-serialized block bytes."""
        return await compute_cid(
            data,
            self.codec_code,
            version=self.default_cid_version if version is None else version,
            hash_alg=self.default_hash_alg if hash_alg is None else hash_alg,
            hasher=self.hasher,
        )

    # ---- resolver ----
    def resolve(self, data: bytes, path: str) -> ResolveResult:
        if self.resolve_override is not None:
            return self.resolve_override(data, path)
        from blockformat.resolver import resolve

        return resolve(self.decode, data, path, self.is_link)

    def tree(self, data: bytes) -> Iterator[str]:
        """Lazily yield every path in the block; each call decodes afresh."""
        if self.tree_override is not None:
            yield from self.tree_override(data)
            return
        from blockformat.resolver import tree

        yield from tree(self.decode, data, self.is_link)
