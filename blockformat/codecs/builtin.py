"""Built-in codecs: ``raw`` (bytes in, bytes out) and ``json``."""

from __future__ import annotations

import json
from typing import Any


class RawCodec:
    """Identity codec over binary data."""

    name = "raw"
    code = 0x55

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"raw codec can only encode binary data, got {type(value).__name__}")
        return bytes(value)

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


class JsonCodec:
    """Compact UTF-8 JSON, key order preserved."""

    name = "json"
    code = 0x0200

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        return json.loads(bytes(data).decode("utf-8"))


raw = RawCodec()
json_codec = JsonCodec()

BUILTIN_CODECS = (raw, json_codec)
