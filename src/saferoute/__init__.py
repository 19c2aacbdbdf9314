"""Saferoute — URLs that can only change where their route allows.

A route template such as ``/users/:id#<posts|likes>`` decides which
parts of a URL stay fixed and which may be set later.

Basic usage::

    from saferoute import SafeURL

    url = SafeURL("/users/:id#*", base_url="https://example.com")
    url.set_segments({"id": 42})
    url.set_hash("top")
    url.get_href()  # "https://example.com/users/42#top"

Lenient mode logs violations instead of raising::

    url = SafeURL("/about", base_url="https://example.com", is_strict_mode_enabled=False)
    url.set_hash("team")  # warning logged, hash unchanged
"""

__version__ = "0.1.0"
__all__ = [
    "URL",
    "Credentials",
    "HashKind",
    "HashNotAllowed",
    "HashNotInCertainSet",
    "HashNotMutable",
    "HashRule",
    "InvalidCredentials",
    "Logger",
    "LoggerSink",
    "LoggingSink",
    "NullSink",
    "ParseError",
    "QueryParams",
    "RouteShape",
    "SafeURL",
    "SafeURLConfig",
    "ScopedError",
    "SegmentKeyUnknown",
    "SegmentsNotAllowed",
    "URLError",
    "classify_route",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "URL": "saferoute.http.url",
    "Credentials": "saferoute.safe_url",
    "HashKind": "saferoute.routing.route",
    "HashNotAllowed": "saferoute.errors",
    "HashNotInCertainSet": "saferoute.errors",
    "HashNotMutable": "saferoute.errors",
    "HashRule": "saferoute.routing.route",
    "InvalidCredentials": "saferoute.errors",
    "Logger": "saferoute.logger",
    "LoggerSink": "saferoute.logger",
    "LoggingSink": "saferoute.logger",
    "NullSink": "saferoute.logger",
    "ParseError": "saferoute.errors",
    "QueryParams": "saferoute.http.query",
    "RouteShape": "saferoute.routing.route",
    "SafeURL": "saferoute.safe_url",
    "SafeURLConfig": "saferoute.config",
    "ScopedError": "saferoute.errors",
    "SegmentKeyUnknown": "saferoute.errors",
    "SegmentsNotAllowed": "saferoute.errors",
    "URLError": "saferoute.errors",
    "classify_route": "saferoute.routing.classify",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import saferoute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
