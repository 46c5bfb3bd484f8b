"""Format converter — wraps a bare block codec into a :class:`Format`."""

from __future__ import annotations

import logging
from typing import Any, Callable

from blockformat.cid import is_cid
from blockformat.codecs.base import BlockCodec
from blockformat.codecs.registry import codec_code
from blockformat.config import DEFAULT_HASH_ALG, BlockFormatConfig
from blockformat.hashing import Hasher, default_hasher, hash_code
from blockformat.models import Format, ResolveResult

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_HASH_ALG", "convert"]


def convert(
    codec: BlockCodec,
    *,
    default_hash_alg: str | None = None,
    resolve: Callable[[bytes, str], ResolveResult] | None = None,
    tree: Callable[[bytes], Any] | None = None,
    is_link: Callable[[Any], bool] | None = None,
    hasher: Hasher | None = None,
    config: BlockFormatConfig | None = None,
) -> Format:
    """Build a :class:`Format` for *codec*.

    The codec code is looked up by ``codec.name`` in the multicodec table, so
    an unregistered name fails here rather than on first use.  *resolve* and
    *tree* replace the default algorithms; *is_link* replaces the CID check
    used by both defaults.
    """
    code = codec_code(codec.name)
    if getattr(codec, "code", code) != code:
        logger.warning(
            "codec %s declares code %s but the registry has %s; using the registry",
            codec.name,
            hex(codec.code),
            hex(code),
        )
    alg_name = default_hash_alg or (config.format.default_hash_alg if config else DEFAULT_HASH_ALG)

    fmt = Format(
        codec_name=codec.name,
        codec_code=code,
        default_hash_alg=hash_code(alg_name),
        encode=codec.encode,
        decode=codec.decode,
        default_cid_version=config.format.cid_version if config else 1,
        resolve_override=resolve,
        tree_override=tree,
        is_link=is_link or is_cid,
        hasher=hasher or default_hasher,
    )
    logger.debug(
        "converted codec %s (%s) hash=%s overrides=%s",
        codec.name,
        hex(code),
        alg_name,
        [name for name, hook in (("resolve", resolve), ("tree", tree)) if hook],
    )
    return fmt
