"""Tests for saferoute.errors — scoped errors and error kinds."""

import pytest

from saferoute.errors import (
    HashNotAllowed,
    HashNotInCertainSet,
    HashNotMutable,
    InvalidCredentials,
    ParseError,
    ScopedError,
    SegmentKeyUnknown,
    SegmentsNotAllowed,
    URLError,
)

KINDS = [
    (ParseError, "Invalid URL"),
    (InvalidCredentials, "Invalid credentials"),
    (HashNotAllowed, "Route does not allow hash property"),
    (HashNotMutable, "Hash value is not mutable"),
    (HashNotInCertainSet, "Hash value does not match to certain ones"),
    (SegmentsNotAllowed, "Route does not allow segment properties"),
    (SegmentKeyUnknown, "Segment key does not match to certain ones"),
]


class TestHierarchy:
    def test_url_error_is_scoped_error(self) -> None:
        assert issubclass(URLError, ScopedError)

    @pytest.mark.parametrize(("kind", "_message"), KINDS)
    def test_kinds_are_url_errors(self, kind: type[URLError], _message: str) -> None:
        assert issubclass(kind, URLError)

    def test_catchable_as_exception(self) -> None:
        with pytest.raises(Exception, match="Hash value is not mutable"):
            raise HashNotMutable()


class TestScopedError:
    def test_string_message(self) -> None:
        err = ScopedError("Parser", "bad token")
        assert str(err) == "[Parser] bad token"
        assert err.scope == "Parser"
        assert err.original_message == "bad token"
        assert err.cause is None

    def test_wraps_exception_as_cause(self) -> None:
        inner = ValueError("boom")
        err = ScopedError("URL", inner)
        assert str(err) == "[URL] boom"
        assert err.cause is inner
        assert err.__cause__ is inner

    @pytest.mark.parametrize(("value", "expected"), [(42, "42"), (1.5, "1.5"), (True, "True")])
    def test_scalar_message(self, value: object, expected: str) -> None:
        assert str(ScopedError("Scope", value)) == f"[Scope] {expected}"

    def test_unknown_error(self) -> None:
        assert str(ScopedError("Scope")) == "[Scope] Unknown error"
        assert str(ScopedError("Scope", {"not": "an error"})) == "[Scope] Unknown error"
        assert ScopedError("Scope").original_message is None

    def test_rewrap_keeps_scope_and_cause(self) -> None:
        root = KeyError("missing")
        inner = ScopedError("Parser", root)
        outer = ScopedError("URL", inner)

        assert outer.scope == "Parser"
        assert outer.cause is root
        assert str(outer) == str(inner)

    def test_rewrap_does_not_nest_scopes(self) -> None:
        err = URLError(URLError(URLError("once")))
        assert str(err) == "[URL] once"


class TestKinds:
    @pytest.mark.parametrize(("kind", "message"), KINDS)
    def test_default_message(self, kind: type[URLError], message: str) -> None:
        err = kind()
        assert err.scope == "URL"
        assert err.original_message == message
        assert str(err) == f"[URL] {message}"

    def test_parse_error_wraps_parser_message(self) -> None:
        inner = ValueError("Invalid URL: '/foo'")
        err = ParseError(inner)
        assert str(err) == "[URL] Invalid URL: '/foo'"
        assert err.cause is inner

    def test_kind_rewrapped_as_url_error(self) -> None:
        err = URLError(HashNotAllowed())
        assert str(err) == "[URL] Route does not allow hash property"
