"""Default path resolution and path enumeration over decoded blocks."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Callable

from blockformat.cid import is_cid
from blockformat.errors import NotFoundError
from blockformat.models import ResolveResult

Decoder = Callable[[bytes], Any]
LinkPredicate = Callable[[Any], bool]

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a ``/``-delimited path, dropping empty segments."""
    return [segment for segment in path.split("/") if segment]


def is_composite(value: Any, is_link: LinkPredicate = is_cid) -> bool:
    """True for mappings and sequences.  Links, strings and binary leaves are opaque."""
    if is_link(value):
        return False
    if isinstance(value, Mapping):
        return True
    return isinstance(value, (list, tuple))


def _child(value: Any, segment: str, is_link: LinkPredicate) -> Any:
    if not is_composite(value, is_link):
        return _MISSING
    if isinstance(value, Mapping):
        child = value.get(segment, _MISSING)
        if child is _MISSING:
            # tree() prints non-string keys with str(); accept them back
            for key in value:
                if not isinstance(key, str) and str(key) == segment:
                    return value[key]
        return child
    if not (segment.isascii() and segment.isdigit()):
        return _MISSING
    index = int(segment)
    if index >= len(value):
        return _MISSING
    return value[index]


def resolve_path(value: Any, path: str, is_link: LinkPredicate = is_cid) -> ResolveResult:
    """Walk *path* through an already-decoded *value*.

    Stops at the first link and hands back the unconsumed segments as the
    remainder path.
    """
    segments = split_path(path)
    while segments:
        segment = segments.pop(0)
        value = _child(value, segment, is_link)
        if value is _MISSING:
            raise NotFoundError(segment)
        if is_link(value):
            return ResolveResult(value, "/".join(segments))
    return ResolveResult(value, "")


def resolve(
    decode: Decoder,
    data: bytes,
    path: str,
    is_link: LinkPredicate = is_cid,
) -> ResolveResult:
    """Decode *data* and resolve *path* inside it."""
    return resolve_path(decode(data), path, is_link)


def _entries(value: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(value, Mapping):
        for key, child in value.items():
            yield str(key), child
    else:
        for index, child in enumerate(value):
            yield str(index), child


def walk(value: Any, is_link: LinkPredicate = is_cid, prefix: tuple[str, ...] = ()) -> Iterator[str]:
    """Yield every path inside *value*, pre-order, in the value's own order.

    Links and binary leaves are emitted but never descended into.
    """
    if not is_composite(value, is_link):
        return
    for key, child in _entries(value):
        path = (*prefix, key)
        yield "/" + "/".join(path)
        if is_composite(child, is_link):
            yield from walk(child, is_link, path)


def tree(decode: Decoder, data: bytes, is_link: LinkPredicate = is_cid) -> Iterator[str]:
    """Decode *data* and enumerate its paths.  Decoding happens on first ``next``."""
    yield from walk(decode(data), is_link)
