"""Segment substitution — turn ``/users/:id`` into ``/users/42``.

Segment values are merged and validated by the caller; this module
only renders the concrete path.
"""

import re
from collections.abc import Iterable, Mapping
from typing import TypeAlias
from urllib.parse import quote

from saferoute.routing.classify import extract_segment_keys

SegmentValue: TypeAlias = str | int | float

# RFC 3986 pchar minus "/", so a value always stays inside its segment
_SEGMENT_SAFE = "!$&'()*+,;=:@-._~"

_SUFFIX = re.compile(r"[?#]")


def unknown_segment_keys(known: Iterable[str], values: Mapping[str, SegmentValue]) -> list[str]:
    """Return the names in *values* that *known* does not declare, in input order."""
    allowed = set(known)
    return [name for name in values if name not in allowed]


def missing_segment_keys(known: Iterable[str], values: Mapping[str, SegmentValue]) -> list[str]:
    """Return the declared names that have no value yet."""
    return [name for name in known if name not in values]


def format_segment(value: SegmentValue) -> str:
    """Render a segment value, percent-encoding anything outside a path segment."""
    return quote(str(value), safe=_SEGMENT_SAFE)


def strip_suffix(route: str) -> str:
    """Drop the query and hash part of *route*."""
    return _SUFFIX.split(route, maxsplit=1)[0]


def apply_segments(template: str, values: Mapping[str, SegmentValue]) -> str:
    """Substitute *values* into the ``/:name`` placeholders of *template*.

    Placeholders without a value are left as they are, names that the
    template does not declare are ignored. The query and hash part of
    the template is removed from the result::

        >>> apply_segments("/users/:id/posts/:post#*", {"id": 42})
        '/users/42/posts/:post'

    The result is a literal path: it is never resolved again, so empty,
    ``.`` or ``..`` values stay where their placeholder was.
    """
    path = template
    for name in extract_segment_keys(template):
        if name not in values:
            continue
        rendered = "/" + format_segment(values[name])
        pattern = re.compile(rf"/:{re.escape(name)}(?=[/#?]|$)")
        path = pattern.sub(lambda _match, rendered=rendered: rendered, path, count=1)
    return strip_suffix(path)
