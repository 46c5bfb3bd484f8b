"""Tests for the hash algorithm table and the default hasher."""

import asyncio
import hashlib

import pytest

from blockformat.errors import UnsupportedHashAlgorithmError
from blockformat.hashing import Hasher, MultihashHasher, hash_code, hash_name


class TestTable:
    def test_name_to_code(self):
        assert hash_code("sha2-256") == 0x12
        assert hash_code("sha2-512") == 0x13

    def test_code_passthrough(self):
        assert hash_code(0x12) == 0x12

    def test_code_to_name(self):
        assert hash_name(0x12) == "sha2-256"

    def test_unknown_name(self):
        with pytest.raises(UnsupportedHashAlgorithmError, match="not a known multihash"):
            hash_code("definitely-not-a-hash")


class TestMultihashHasher:
    def test_is_hasher(self):
        assert isinstance(MultihashHasher(), Hasher)

    def test_sha256_digest(self):
        digest = asyncio.run(MultihashHasher().digest(b"test", 0x12))
        # multihash prefix: code 0x12, length 0x20
        assert digest[:2] == b"\x12\x20"
        assert digest[2:] == hashlib.sha256(b"test").digest()

    def test_unimplemented(self):
        with pytest.raises(UnsupportedHashAlgorithmError):
            asyncio.run(MultihashHasher().digest(b"test", hash_code("x11")))
