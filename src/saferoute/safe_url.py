"""SafeURL — a URL whose mutable parts are dictated by a route template.

The template marks what may change after construction:

- ``#*`` at the end allows any hash, ``#<a|b>`` only the listed ones,
  a literal ``#name`` pins the hash, no ``#`` at all forbids one.
- ``/:name`` placeholders are the only way to change the path.

Everything else (host, port, protocol, credentials) passes through to
the underlying ``URL``. Credentials must be set as a pair.

Usage::

    from saferoute import SafeURL

    url = SafeURL("/users/:id#<posts|likes>", base_url="https://example.com")
    url.set_segments({"id": 42})
    url.set_hash("posts")
    url.get_href()   # "https://example.com/users/42#posts"

    url.set_hash("admin")  # HashNotInCertainSet

Route shapes are checked at call time: Python cannot narrow the legal
hash values or segment names of a literal template statically.

With ``is_strict_mode_enabled=False`` violations are logged as warnings
instead of raised, and the offending call changes nothing.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

from saferoute.config import SafeURLConfig
from saferoute.errors import (
    HashNotAllowed,
    HashNotInCertainSet,
    HashNotMutable,
    InvalidCredentials,
    ParseError,
    SegmentKeyUnknown,
    SegmentsNotAllowed,
    URLError,
)
from saferoute.http.query import QueryParams
from saferoute.http.url import URL
from saferoute.logger import Logger, LoggerSink, LoggingSink
from saferoute.routing.classify import classify_route
from saferoute.routing.route import HashKind, HashRule
from saferoute.routing.segments import (
    SegmentValue,
    apply_segments,
    missing_segment_keys,
    unknown_segment_keys,
)

_log = logging.getLogger("saferoute.safe_url")

Field: TypeAlias = Literal["hash", "pathname"]


@dataclass(frozen=True, slots=True)
class Credentials:
    """URL username and password. Both empty or both set."""

    username: str = ""
    password: str = ""

    @property
    def is_valid(self) -> bool:
        return are_credentials_valid(self.username, self.password)


def are_credentials_valid(username: str, password: str) -> bool:
    """True if both values are empty or both are non-empty."""
    return (username == "") == (password == "")


class SafeURL:
    """A URL that only changes where its route template allows.

    Args:
        route: Route template, relative to *base_url* or absolute.
        base_url: Required unless *route* is absolute.
        logger: Sink for warnings and info. Defaults to the
            ``saferoute.safe_url`` standard library logger.
        is_strict_mode_enabled: Raise on violations (default) or only
            log them. Fixed for the lifetime of the instance.
        config: Logging defaults; read from ``SAFEROUTE_ENV`` when omitted.

    Raises:
        ParseError: *route* and *base_url* do not form a valid URL.
        InvalidCredentials: strict mode and only one of username or
            password is present in the parsed URL.
    """

    __slots__ = (
        "_is_strict_mode_enabled",
        "_locked",
        "_logger",
        "_route",
        "_segments",
        "_shape",
        "_template_path",
        "_url",
    )

    def __init__(
        self,
        route: str,
        *,
        base_url: str | None = None,
        logger: LoggerSink | None = None,
        is_strict_mode_enabled: bool = True,
        config: SafeURLConfig | None = None,
    ) -> None:
        try:
            self._url = URL(route, base_url)
        except ValueError as exc:
            raise ParseError(exc) from exc

        config = config or SafeURLConfig.from_env()
        self._route = route
        self._template_path = self._url.pathname
        self._is_strict_mode_enabled = is_strict_mode_enabled
        self._logger = Logger(
            logger if logger is not None else LoggingSink(_log),
            scope=config.log_scope,
            level=config.log_level,
            enabled=config.logging_enabled,
        )
        self._shape = classify_route(route)
        self._segments: dict[str, SegmentValue] = {}
        self._locked: set[Field] = set()

        if not is_strict_mode_enabled:
            self._logger.warn(f'Strict mode for route "{route}" is disabled')

        if not are_credentials_valid(self._url.username, self._url.password):
            self._fail(InvalidCredentials())

        if not self._shape.has_segments:
            self._locked.add("pathname")
            self._logger.info(f'URL path of the route "{route}" is frozen')

        rule = self._shape.hash_rule
        if rule.kind is HashKind.STATIC and rule.value:
            self._url.hash = rule.value
        else:
            self._url.clear_hash()
        if not rule.is_mutable:
            self._locked.add("hash")
            self._logger.info(f'URL hash value of the route "{route}" is frozen')

    def __repr__(self) -> str:
        return f"SafeURL({self._route!r}, href={self._url.href!r})"

    # -- Introspection --

    @property
    def route(self) -> str:
        return self._route

    @property
    def is_strict_mode_enabled(self) -> bool:
        return self._is_strict_mode_enabled

    @property
    def hash_rule(self) -> HashRule:
        return self._shape.hash_rule

    @property
    def segment_keys(self) -> tuple[str, ...]:
        return self._shape.segment_keys

    def is_locked(self, field: Field) -> bool:
        """True if *field* was frozen at construction."""
        return field in self._locked

    # -- Credentials --

    def set_credentials(self, credentials: Credentials | Mapping[str, str]) -> None:
        """Set username and password together.

        Accepts a ``Credentials`` or a mapping with ``username`` and
        ``password`` keys (missing keys count as empty).
        """
        if isinstance(credentials, Credentials):
            username, password = credentials.username, credentials.password
        else:
            username = credentials.get("username", "")
            password = credentials.get("password", "")

        if not are_credentials_valid(username, password):
            self._fail(InvalidCredentials())
            return

        self._url.username = username
        self._url.password = password

    def get_credentials(self) -> Credentials:
        return Credentials(username=self._url.username, password=self._url.password)

    def get_username(self) -> str:
        return self._url.username

    def get_password(self) -> str:
        return self._url.password

    # -- Hash --

    def set_hash(self, value: str) -> None:
        """Set the hash if the route allows this value.

        Examples::

            SafeURL("/a#*", base_url=b).set_hash("x")        # "#x"
            SafeURL("/a#<p|q>", base_url=b).set_hash("q")    # "#q"
            SafeURL("/a#<p|q>", base_url=b).set_hash("r")    # HashNotInCertainSet
            SafeURL("/a#top", base_url=b).set_hash("x")      # HashNotMutable
            SafeURL("/a", base_url=b).set_hash("x")          # HashNotAllowed
        """
        rule = self._shape.hash_rule
        if self.is_locked("hash"):
            if rule.kind is HashKind.STATIC:
                self._fail(HashNotMutable())
            else:
                self._fail(HashNotAllowed())
            return

        if not rule.accepts(value.removeprefix("#")):
            self._fail(HashNotInCertainSet())
            return

        self._url.hash = value

    def get_hash(self) -> str:
        return self._url.hash

    # -- Segments --

    def set_segments(self, segments: Mapping[str, SegmentValue]) -> None:
        """Merge *segments* into the stored values and rebuild the path.

        Every key must be a ``/:name`` placeholder of the route; one
        unknown key rejects the whole call. Values are substituted into
        the parsed template path as literal segments, so ``""``, ``.``
        and ``..`` are kept rather than collapsed.
        """
        if self.is_locked("pathname"):
            self._fail(SegmentsNotAllowed())
            return

        if unknown_segment_keys(self._shape.segment_keys, segments):
            self._fail(SegmentKeyUnknown())
            return

        merged = {**self._segments, **segments}
        self._url.pathname = apply_segments(self._template_path, merged)
        self._segments = merged

    def get_segments(self) -> dict[str, SegmentValue]:
        return dict(self._segments)

    # -- Pass-through components --

    def set_host(self, value: str) -> None:
        self._url.host = value

    def get_host(self) -> str:
        return self._url.host

    def set_hostname(self, value: str) -> None:
        self._url.hostname = value

    def get_hostname(self) -> str:
        return self._url.hostname

    def set_port(self, value: str | int) -> None:
        self._url.port = value

    def get_port(self) -> str:
        return self._url.port

    def set_protocol(self, value: str) -> None:
        self._url.protocol = value

    def get_protocol(self) -> str:
        return self._url.protocol

    def get_origin(self) -> str:
        return self._url.origin

    def get_search(self) -> str:
        return self._url.search

    def get_search_params(self) -> QueryParams:
        return self._url.search_params

    # -- Path-dependent reads --

    def get_href(self) -> str:
        self._warn_if_unsafe()
        return self._url.href

    def get_pathname(self) -> str:
        self._warn_if_unsafe()
        return self._url.pathname

    def _warn_if_unsafe(self) -> None:
        missing = missing_segment_keys(self._shape.segment_keys, self._segments)
        if missing:
            self._logger.warn(
                f'Reading URL of the route "{self._route}" is unsafe: '
                f"missing segment values for {', '.join(missing)}"
            )

    def _fail(self, error: URLError) -> None:
        if self._is_strict_mode_enabled:
            raise error
        self._logger.warn(str(error))
