"""Tests for the default resolve and tree algorithms on decoded values."""

from __future__ import annotations

import pytest
from multiformats import CID, multihash

from blockformat.errors import NotFoundError
from blockformat.models import ResolveResult
from blockformat.resolver import is_composite, resolve, resolve_path, split_path, walk

LINK = CID("base32", 1, "raw", multihash.digest(b"test", "sha2-256"))


class TestSplitPath:
    def test_drops_empty_segments(self):
        assert split_path("/a//b/") == ["a", "b"]

    def test_empty(self):
        assert split_path("") == []


class TestIsComposite:
    def test_containers(self):
        assert is_composite({})
        assert is_composite([])
        assert is_composite(())

    def test_leaves(self):
        for leaf in ("s", b"b", bytearray(b"b"), 1, 1.5, None, True, LINK):
            assert not is_composite(leaf)


class TestResolvePath:
    def test_root_unchanged_on_empty_path(self):
        value = {"a": 1}
        result = resolve_path(value, "")
        assert result.value is value
        assert result.remainder_path == ""

    def test_none_is_a_value(self):
        assert resolve_path({"a": None}, "a") == ResolveResult(None, "")

    def test_list_index(self):
        assert resolve_path({"a": [10, 20]}, "a/1") == ResolveResult(20, "")

    def test_tuple_index(self):
        assert resolve_path((10, 20), "0") == ResolveResult(10, "")

    @pytest.mark.parametrize("path", ["a/2", "a/-1", "a/x", "a/01x"])
    def test_bad_index(self, path):
        with pytest.raises(NotFoundError):
            resolve_path({"a": [10, 20]}, path)

    def test_cannot_index_into_scalars(self):
        with pytest.raises(NotFoundError):
            resolve_path({"a": "string"}, "a/0")
        with pytest.raises(NotFoundError):
            resolve_path({"a": b"bytes"}, "a/0")

    def test_missing_first_segment(self):
        with pytest.raises(NotFoundError) as exc_info:
            resolve_path({"a": 1}, "b/c")
        assert exc_info.value.segment == "b"

    def test_stops_at_link(self):
        value = {"a": {"b": LINK}}
        assert resolve_path(value, "a/b/c") == ResolveResult(LINK, "c")
        assert resolve_path(value, "a/b") == ResolveResult(LINK, "")

    def test_link_inside_list(self):
        assert resolve_path([LINK], "0/x/y") == ResolveResult(LINK, "x/y")

    def test_decodes_before_resolving(self):
        result = resolve(lambda data: {"k": data.decode()}, b"v", "k")
        assert result == ResolveResult("v", "")


class TestWalk:
    def test_order_and_completeness(self):
        value = {"one": {"two": {"hello": "world"}, "three": 3}, "l": LINK}
        assert list(walk(value)) == [
            "/one",
            "/one/two",
            "/one/two/hello",
            "/one/three",
            "/l",
        ]

    def test_not_sorted(self):
        assert list(walk({"b": 1, "a": 2})) == ["/b", "/a"]

    def test_lists(self):
        assert list(walk({"a": ["x", {"y": 1}]})) == ["/a", "/a/0", "/a/1", "/a/1/y"]

    def test_binary_leaf_not_descended(self):
        assert list(walk({"b": b"\x00\x01"})) == ["/b"]

    def test_string_leaf_not_descended(self):
        assert list(walk({"s": "abc"})) == ["/s"]

    @pytest.mark.parametrize("root", ["asdf", 3, None, b"raw", LINK])
    def test_non_composite_root(self, root):
        assert list(walk(root)) == []

    def test_empty_containers(self):
        assert list(walk({})) == []
        assert list(walk({"a": {}})) == ["/a"]

    def test_custom_link_predicate(self):
        def is_ref(value):
            return isinstance(value, dict) and "/" in value

        value = {"ref": {"/": "x"}, "n": {"m": 1}}
        assert list(walk(value, is_ref)) == ["/ref", "/n", "/n/m"]


class TestWalkResolveAgreement:
    @pytest.mark.parametrize("value", [
        {"one": {"two": {"hello": "world"}, "three": 3}, "l": LINK},
        {1: "a", "m": {2: "b"}},
        {b"k": 1, None: {"x": [1, {True: 2}]}},
        [{"a": [1, 2]}, (3, {4: 5})],
    ])
    def test_every_walked_path_resolves(self, value):
        for path in walk(value):
            resolve_path(value, path)

    def test_non_string_key(self):
        value = {1: "a", "m": {2: "b"}}
        assert list(walk(value)) == ["/1", "/m", "/m/2"]
        assert resolve_path(value, "/1") == ResolveResult("a", "")
        assert resolve_path(value, "m/2") == ResolveResult("b", "")

    def test_string_key_wins_over_lookalike(self):
        value = {1: "int", "1": "str"}
        assert resolve_path(value, "1") == ResolveResult("str", "")
