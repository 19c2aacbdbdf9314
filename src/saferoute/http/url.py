"""Mutable URL accessor on top of ``urllib.parse``.

Mirrors the component model of the WHATWG ``URL`` interface: ``protocol``
ends with ``:``, ``search`` starts with ``?``, ``hash`` starts with ``#``,
``port`` is empty when it is the scheme's default. Setters that receive
an unusable value leave the URL unchanged, like their browser
counterparts.

Usage::

    url = URL("/users/42?tab=posts", "https://example.com")
    url.hostname         # "example.com"
    url.search_params    # QueryParams('tab=posts')
    url.hash = "top"
    url.href             # "https://example.com/users/42?tab=posts#top"
"""

import re
from urllib.parse import quote, urljoin, urlsplit

from saferoute.http.query import QueryParams

DEFAULT_PORTS: dict[str, int] = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}

# Schemes whose URLs always carry a host and a "/"-rooted path
SPECIAL_SCHEMES = frozenset(DEFAULT_PORTS)

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_PORT = re.compile(r"^\d+")

_USERINFO_SAFE = "!$&'()*+,;=%"
_PATH_SAFE = "/!$&'()*+,;=:@%"
_QUERY_SAFE = "/?!$&'()*+,;=:@%[]"
_FRAGMENT_SAFE = "/?!#$&'()*+,;=:@%[]{}|^"


class URL:
    """A parsed, absolute URL whose components can be read and replaced.

    Raises ``ValueError`` when *url* (resolved against *base*) is not an
    absolute URL, or when its port is not a valid number.
    """

    __slots__ = (
        "_fragment",
        "_hostname",
        "_password",
        "_path",
        "_port",
        "_query",
        "_scheme",
        "_username",
    )

    def __init__(self, url: str, base: str | None = None) -> None:
        if base is not None:
            if not urlsplit(base).scheme:
                msg = f"Invalid base URL: {base!r}"
                raise ValueError(msg)
            url = urljoin(base, url)

        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        if not scheme:
            msg = f"Invalid URL: {url!r}"
            raise ValueError(msg)
        if scheme in SPECIAL_SCHEMES and not parts.hostname:
            msg = f"Invalid URL: {url!r} has no host"
            raise ValueError(msg)

        self._scheme = scheme
        self._username = parts.username or ""
        self._password = parts.password or ""
        self._hostname = parts.hostname or ""
        self._port = self._normalize_port(parts.port)
        self._path = parts.path or ("/" if scheme in SPECIAL_SCHEMES else "")
        self._query = parts.query
        self._fragment: str | None = parts.fragment or None

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"URL({self.href!r})"

    # -- Whole URL --

    @property
    def href(self) -> str:
        authority = ""
        if self._hostname:
            userinfo = ""
            if self._username or self._password:
                userinfo = self._username
                if self._password:
                    userinfo += f":{self._password}"
                userinfo += "@"
            authority = f"//{userinfo}{self.host}"
        href = f"{self._scheme}:{authority}{self._path}"
        if self._query:
            href += f"?{self._query}"
        if self._fragment is not None:
            href += f"#{self._fragment}"
        return href

    @property
    def origin(self) -> str:
        """``scheme://host`` for web schemes, ``"null"`` otherwise."""
        if self._scheme not in SPECIAL_SCHEMES:
            return "null"
        return f"{self._scheme}://{self.host}"

    # -- Scheme --

    @property
    def protocol(self) -> str:
        return f"{self._scheme}:"

    @protocol.setter
    def protocol(self, value: str) -> None:
        scheme = value.split(":", 1)[0].lower()
        if not _SCHEME.match(scheme):
            return
        self._scheme = scheme
        if self._port is not None and DEFAULT_PORTS.get(scheme) == self._port:
            self._port = None

    # -- Credentials --

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = quote(value, safe=_USERINFO_SAFE)

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        self._password = quote(value, safe=_USERINFO_SAFE)

    # -- Host --

    @property
    def host(self) -> str:
        hostname = f"[{self._hostname}]" if ":" in self._hostname else self._hostname
        if self._port is None:
            return hostname
        return f"{hostname}:{self._port}"

    @host.setter
    def host(self, value: str) -> None:
        parts = urlsplit(f"//{value}")
        if not parts.hostname:
            return
        try:
            port = parts.port
        except ValueError:
            return
        self._hostname = parts.hostname
        if port is not None:
            self._port = self._normalize_port(port)

    @property
    def hostname(self) -> str:
        return self._hostname

    @hostname.setter
    def hostname(self, value: str) -> None:
        hostname = value.strip().lower().strip("[]")
        if hostname and not any(ch in hostname for ch in "/?#@"):
            self._hostname = hostname

    @property
    def port(self) -> str:
        return "" if self._port is None else str(self._port)

    @port.setter
    def port(self, value: str | int) -> None:
        text = str(value).strip()
        if not text:
            self._port = None
            return
        digits = _PORT.match(text)
        if digits is None or int(digits.group()) > 65535:
            return
        self._port = self._normalize_port(int(digits.group()))

    # -- Path, search, hash --

    @property
    def pathname(self) -> str:
        return self._path

    @pathname.setter
    def pathname(self, value: str) -> None:
        path = quote(value, safe=_PATH_SAFE)
        if self._scheme in SPECIAL_SCHEMES and not path.startswith("/"):
            path = f"/{path}"
        self._path = path

    @property
    def search(self) -> str:
        return f"?{self._query}" if self._query else ""

    @search.setter
    def search(self, value: str) -> None:
        self._query = quote(value.removeprefix("?"), safe=_QUERY_SAFE)

    @property
    def search_params(self) -> QueryParams:
        return QueryParams(self._query)

    @property
    def hash(self) -> str:
        return "" if self._fragment is None else f"#{self._fragment}"

    @hash.setter
    def hash(self, value: str) -> None:
        """Set the fragment. A leading ``#`` is optional; ``""`` renders as ``#``."""
        self._fragment = quote(value.removeprefix("#"), safe=_FRAGMENT_SAFE)

    def clear_hash(self) -> None:
        """Remove the fragment entirely."""
        self._fragment = None

    def _normalize_port(self, port: int | None) -> int | None:
        if port is None or DEFAULT_PORTS.get(self._scheme) == port:
            return None
        return port
