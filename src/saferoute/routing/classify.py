"""Route template classification.

Pure functions: the same template always yields the same result, so
``classify_route`` is cached and safe to call on every construction.
"""

import re
from functools import lru_cache

from saferoute.routing.route import HashKind, HashRule, RouteShape

# Hash markers, checked in this order
ANY_HASH = re.compile(r"#\*$")
CERTAIN_HASH = re.compile(r"#<([^<>]*)>$")

# "/:name" followed by a path boundary, a query, a hash or the end
SEGMENT = re.compile(r"/:([^/#?]*)(?=[/#?]|$)")


def classify_hash(route: str) -> HashRule:
    """Derive the hash tier of *route*.

    Examples::

        "/users"           -> HashRule(FROZEN)
        "/users#"          -> HashRule(STATIC, value="")
        "/users#list"      -> HashRule(STATIC, value="list")
        "/users#*"         -> HashRule(ANY)
        "/users#<a|b>"     -> HashRule(CERTAIN, allowed={"a", "b"})
        "/users#<>"        -> HashRule(CERTAIN, allowed=set())
    """
    if ANY_HASH.search(route):
        return HashRule(kind=HashKind.ANY)

    certain = CERTAIN_HASH.search(route)
    if certain:
        allowed = frozenset(
            value.strip() for value in certain.group(1).split("|") if value.strip()
        )
        return HashRule(kind=HashKind.CERTAIN, allowed=allowed)

    if "#" in route:
        _, literal = route.split("#", 1)
        return HashRule(kind=HashKind.STATIC, value=literal)

    return HashRule(kind=HashKind.FROZEN)


def extract_segment_keys(route: str) -> tuple[str, ...]:
    """Collect the ``/:name`` segment names of *route* in appearance order.

    Duplicates and empty names (``/:/``) are dropped::

        "/users/:id/posts/:post" -> ("id", "post")
        "/users/:id/:id"         -> ("id",)
        "/static/path"           -> ()
    """
    keys: dict[str, None] = {}
    for match in SEGMENT.finditer(route):
        name = match.group(1)
        if name:
            keys.setdefault(name, None)
    return tuple(keys)


@lru_cache(maxsize=256)
def classify_route(route: str) -> RouteShape:
    """Classify hash tier and segment keys of *route* in one pass."""
    return RouteShape(
        template=route,
        hash_rule=classify_hash(route),
        segment_keys=extract_segment_keys(route),
    )
