"""Saferoute exception hierarchy.

Every error carries an origin scope and renders as ``[<scope>] <message>``.
Shared across the URL accessor, the route classifier and ``SafeURL`` so
every module raises and catches the same types.
"""


def _describe(error: object) -> str | None:
    if isinstance(error, BaseException):
        return str(error)
    if isinstance(error, (str, int, float, bool)):
        return str(error)
    return None


class ScopedError(Exception):
    """An error tagged with the scope it originated from.

    Wrapping another ``ScopedError`` keeps its scope, message and cause
    instead of nesting scopes::

        >>> inner = ScopedError("Parser", "bad token")
        >>> str(ScopedError("URL", inner))
        '[Parser] bad token'

    Wrapping any other exception keeps it as the cause::

        >>> err = ScopedError("URL", ValueError("boom"))
        >>> str(err), type(err.cause).__name__
        ('[URL] boom', 'ValueError')
    """

    scope: str
    original_message: str | None
    cause: BaseException | None

    def __init__(self, scope: str, error: object = None) -> None:
        if isinstance(error, ScopedError):
            scope = error.scope
            message = error.original_message
            cause = error.cause
        else:
            message = _describe(error)
            cause = error if isinstance(error, BaseException) else None

        super().__init__(f"[{scope}] {message if message is not None else 'Unknown error'}")
        self.scope = scope
        self.original_message = message
        self.cause = cause
        self.__cause__ = cause


class URLError(ScopedError):
    """Any failure reported by a URL or ``SafeURL`` operation."""

    def __init__(self, error: object = None) -> None:
        super().__init__("URL", error)


class _KindError(URLError):
    """A URL error kind with a fixed default message."""

    default_message = ""

    def __init__(self, error: object = None) -> None:
        super().__init__(self.default_message if error is None else error)


class ParseError(_KindError):
    """The route (or its base URL) could not be parsed.

    Always raised, regardless of strict mode: no instance exists yet.
    """

    default_message = "Invalid URL"


class InvalidCredentials(_KindError):  # noqa: N818
    """Exactly one of username/password is set."""

    default_message = "Invalid credentials"


class HashNotAllowed(_KindError):  # noqa: N818
    """The route has no hash marker."""

    default_message = "Route does not allow hash property"


class HashNotMutable(_KindError):  # noqa: N818
    """The route pins a literal hash."""

    default_message = "Hash value is not mutable"


class HashNotInCertainSet(_KindError):  # noqa: N818
    """The value is not one of the route's ``#<a|b|c>`` alternatives."""

    default_message = "Hash value does not match to certain ones"


class SegmentsNotAllowed(_KindError):  # noqa: N818
    """The route declares no ``/:name`` segments."""

    default_message = "Route does not allow segment properties"


class SegmentKeyUnknown(_KindError):  # noqa: N818
    """A supplied segment name is not declared by the route."""

    default_message = "Segment key does not match to certain ones"
