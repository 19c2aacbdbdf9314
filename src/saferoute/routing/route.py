"""HashRule and RouteShape frozen dataclasses."""

from dataclasses import dataclass, field
from enum import Enum


class HashKind(Enum):
    """Mutability tier of a route's hash.

    Frozen:  ``/users``        no hash marker, hash stays empty
    Static:  ``/users#list``   literal hash, immutable
    Any:     ``/users#*``      any value may be set
    Certain: ``/users#<a|b>``  only the listed values may be set
    """

    FROZEN = "frozen"
    STATIC = "static"
    ANY = "any"
    CERTAIN = "certain"


@dataclass(frozen=True, slots=True)
class HashRule:
    """Result of classifying a route's hash.

    ``value`` is the literal for ``STATIC`` routes (possibly empty for a
    bare trailing ``#``). ``allowed`` is only populated for ``CERTAIN``.
    """

    kind: HashKind
    value: str = ""
    allowed: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_mutable(self) -> bool:
        """True if ``set_hash`` can ever succeed."""
        return self.kind in (HashKind.ANY, HashKind.CERTAIN)

    def accepts(self, value: str) -> bool:
        if self.kind is HashKind.ANY:
            return True
        if self.kind is HashKind.CERTAIN:
            return value in self.allowed
        return False


@dataclass(frozen=True, slots=True)
class RouteShape:
    """Everything derived from a route template, computed once.

    Created when a ``SafeURL`` is built and never changed afterwards.
    """

    template: str
    hash_rule: HashRule
    segment_keys: tuple[str, ...]

    @property
    def has_segments(self) -> bool:
        return bool(self.segment_keys)
