"""Codec registry — code lookups, registration, loading and listing."""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points

from multiformats import multicodec
from multiformats.multicodec import Multicodec

from blockformat.codecs.base import BlockCodec
from blockformat.codecs.builtin import BUILTIN_CODECS
from blockformat.errors import UnknownCodecError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "blockformat.codecs"


def codec_code(name: str) -> int:
    """Return the multicodec code registered for *name*."""
    try:
        return multicodec.get(name).code
    except KeyError:
        raise UnknownCodecError(name) from None


def codec_name(code: int) -> str:
    """Return the multicodec name registered for *code*."""
    try:
        return multicodec.get(code=code).name
    except KeyError:
        raise UnknownCodecError(hex(code)) from None


def register_codec(name: str, code: int, description: str = "") -> None:
    """Make *name* known to the multicodec table under *code*.

    Re-registering the same pair is a no-op; a conflicting pair raises
    ``ValueError``.
    """
    if multicodec.exists(name):
        existing = multicodec.get(name).code
        if existing != code:
            raise ValueError(
                f"Codec '{name}' is already registered with code {hex(existing)}"
            )
        return
    if multicodec.exists(code=code):
        raise ValueError(
            f"Code {hex(code)} is already registered as '{multicodec.get(code=code).name}'"
        )
    multicodec.register(
        Multicodec(name=name, tag="ipld", code=code, status="draft", description=description)
    )
    logger.debug("registered codec %s as %s", name, hex(code))


def _load_entry_point_codecs() -> list[BlockCodec]:
    """Load codecs registered via the ``blockformat.codecs`` entry-point group."""
    codecs: list[BlockCodec] = []
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            obj = ep.load()
        except Exception as exc:
            logger.warning("skipping codec entry point %s: %s", ep.name, exc)
            continue
        codecs.append(obj() if isinstance(obj, type) else obj)
    return codecs


def load_import_codec(import_string: str) -> BlockCodec:
    """Load a codec from ``pkg.module:name``.

    The *import_string* is the part after ``import:``.
    """
    module_path, attr = import_string.rsplit(":", 1)
    mod = importlib.import_module(module_path)
    obj = getattr(mod, attr)
    codec = obj() if isinstance(obj, type) else obj
    if not isinstance(codec, BlockCodec):
        raise TypeError(f"{import_string} does not provide a block codec")
    return codec


def list_registered_codecs() -> list[BlockCodec]:
    """Return built-in codecs followed by entry-point codecs, first name wins."""
    seen: set[str] = set()
    codecs: list[BlockCodec] = []
    for c in [*BUILTIN_CODECS, *_load_entry_point_codecs()]:
        if c.name in seen:
            continue
        seen.add(c.name)
        codecs.append(c)
    return codecs


def load_codecs(codec_spec: str = "auto") -> list[BlockCodec]:
    """Return candidate codecs for *codec_spec*.

    ``auto``       — every registered codec
    ``<name>``     — registered codecs filtered to that name
    ``import:...`` — single codec from import string
    """
    if codec_spec.startswith("import:"):
        return [load_import_codec(codec_spec[len("import:") :])]

    all_codecs = list_registered_codecs()

    if codec_spec != "auto":
        matched = [c for c in all_codecs if c.name == codec_spec]
        if not matched:
            raise UnknownCodecError(codec_spec)
        return matched

    return all_codecs
