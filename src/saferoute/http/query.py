"""Read-only search parameters of a URL.

A ``QueryParams`` is a snapshot: ``URL.search_params`` builds a new one
from the current search string on every access, so changing the URL
never changes a view that was already handed out.

Lookups by name see the first occurrence of a repeated parameter; the
full sequence stays available through ``get_list`` and ``multi_items``.
"""

from collections.abc import Iterator, Mapping
from typing import TypeAlias
from urllib.parse import parse_qsl, urlencode

Pair: TypeAlias = tuple[str, str]


class QueryParams(Mapping[str, str]):
    """Decoded ``name=value`` pairs of a search string, in source order.

    ::

        >>> params = QueryParams("?tag=a&tag=b&page=2")
        >>> params["tag"], params.get_list("tag")
        ('a', ['a', 'b'])
        >>> str(params)
        'tag=a&tag=b&page=2'
    """

    __slots__ = ("_first", "_pairs")

    def __init__(self, search: str = "") -> None:
        self._pairs: tuple[Pair, ...] = tuple(
            parse_qsl(search.removeprefix("?"), keep_blank_values=True)
        )
        self._first: dict[str, str] = {}
        for name, value in self._pairs:
            self._first.setdefault(name, value)

    def __getitem__(self, name: str) -> str:
        return self._first[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._first)

    def __len__(self) -> int:
        return len(self._first)

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        return f"QueryParams({str(self)!r})"

    def get_list(self, name: str) -> list[str]:
        """Every value given for *name*, repeats included."""
        return [value for key, value in self._pairs if key == name]

    def multi_items(self) -> list[Pair]:
        return list(self._pairs)
