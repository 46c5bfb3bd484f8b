"""blockformat — turn a bare block codec into an addressable format.

A block codec only knows how to ``encode`` and ``decode``.  ``convert``
wraps one into a :class:`~blockformat.models.Format` that can also compute
content identifiers, resolve paths and enumerate every path in a block.
"""

from __future__ import annotations

from blockformat.cid import is_cid, make_cid
from blockformat.convert import DEFAULT_HASH_ALG, convert
from blockformat.errors import (
    BlockFormatError,
    NotFoundError,
    UnknownCodecError,
    UnsupportedHashAlgorithmError,
)
from blockformat.models import Format, ResolveResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_HASH_ALG",
    "BlockFormatError",
    "Format",
    "NotFoundError",
    "ResolveResult",
    "UnknownCodecError",
    "UnsupportedHashAlgorithmError",
    "convert",
    "is_cid",
    "make_cid",
]
