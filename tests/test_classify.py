"""Tests for saferoute.routing.classify — hash tiers and segment keys."""

import pytest

from saferoute.routing.classify import classify_hash, classify_route, extract_segment_keys
from saferoute.routing.route import HashKind, HashRule, RouteShape


class TestClassifyHash:
    @pytest.mark.parametrize(
        "route",
        [
            "/foo/bar",
            "https://qwe.com/foo/bar",
            "https://qwe.com/foo/bar?baz=qux&quux=quuux",
        ],
    )
    def test_frozen(self, route: str) -> None:
        assert classify_hash(route) == HashRule(kind=HashKind.FROZEN)

    @pytest.mark.parametrize(
        ("route", "literal"),
        [
            ("https://qwe.com/foo/bar#", ""),
            ("https://qwe.com/foo/bar#baz", "baz"),
            ("https://qwe.com/foo/bar?baz=qux&quux=quuux#", ""),
            ("https://qwe.com/foo/bar?baz=qux&quux=quuux#baz", "baz"),
            ("/foo#a", "a"),
            ("/foo#*x", "*x"),
        ],
    )
    def test_static(self, route: str, literal: str) -> None:
        rule = classify_hash(route)
        assert rule.kind is HashKind.STATIC
        assert rule.value == literal
        assert rule.is_mutable is False

    @pytest.mark.parametrize("route", ["/foo/bar#*", "https://qwe.com/foo/bar?baz=qux#*"])
    def test_any(self, route: str) -> None:
        rule = classify_hash(route)
        assert rule.kind is HashKind.ANY
        assert rule.is_mutable is True
        assert rule.accepts("anything")
        assert rule.accepts("")

    def test_certain(self) -> None:
        rule = classify_hash("/foo/bar#<baz|qux|quux>")
        assert rule.kind is HashKind.CERTAIN
        assert rule.allowed == frozenset({"baz", "qux", "quux"})
        assert rule.accepts("qux")
        assert not rule.accepts("quuux")

    def test_certain_values_are_trimmed(self) -> None:
        rule = classify_hash("/foo#< a | b >")
        assert rule.allowed == frozenset({"a", "b"})

    def test_certain_single(self) -> None:
        assert classify_hash("/foo#<baz>").allowed == frozenset({"baz"})

    def test_certain_empty_accepts_nothing(self) -> None:
        rule = classify_hash("/foo/bar#<>")
        assert rule.kind is HashKind.CERTAIN
        assert rule.allowed == frozenset()
        assert not rule.accepts("")
        assert not rule.accepts("qwe")

    def test_deterministic(self) -> None:
        route = "/foo#<a|b>"
        assert classify_hash(route) == classify_hash(route)


class TestExtractSegmentKeys:
    def test_none(self) -> None:
        assert extract_segment_keys("/static/path") == ()

    def test_single(self) -> None:
        assert extract_segment_keys("/:id/x") == ("id",)

    def test_order_preserved(self) -> None:
        assert extract_segment_keys("/users/:user/posts/:post") == ("user", "post")

    def test_duplicates_dropped(self) -> None:
        assert extract_segment_keys("/:id/:id") == ("id",)

    def test_empty_name_ignored(self) -> None:
        assert extract_segment_keys("/:/x/:id") == ("id",)

    @pytest.mark.parametrize(
        "route",
        ["/users/:id", "/users/:id/", "/users/:id?tab=1", "/users/:id#*", "https://h.com/users/:id"],
    )
    def test_boundaries(self, route: str) -> None:
        assert extract_segment_keys(route) == ("id",)

    def test_colon_inside_segment_is_literal(self) -> None:
        assert extract_segment_keys("/users/a:b") == ()

    def test_port_is_not_a_segment(self) -> None:
        assert extract_segment_keys("https://h.com:8080/a") == ()


class TestClassifyRoute:
    def test_shape(self) -> None:
        shape = classify_route("/users/:id#<a|b>")
        assert shape == RouteShape(
            template="/users/:id#<a|b>",
            hash_rule=HashRule(kind=HashKind.CERTAIN, allowed=frozenset({"a", "b"})),
            segment_keys=("id",),
        )
        assert shape.has_segments is True

    def test_without_segments(self) -> None:
        assert classify_route("/about").has_segments is False

    def test_cached(self) -> None:
        assert classify_route("/cached/:id") is classify_route("/cached/:id")

    def test_frozen_dataclass(self) -> None:
        shape = classify_route("/a")
        with pytest.raises(AttributeError):
            shape.template = "/b"  # type: ignore[misc]
