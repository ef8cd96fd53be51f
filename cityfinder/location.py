# cityfinder/location.py
"""
Location snapshots and the search query convention.

A Location is captured by value from the navigator on every poll; two
snapshots are the same navigation target when their ``href`` is equal.
"""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote_plus, urlencode, urlsplit, urlunsplit

SEARCH_PATH = "/search"
SEARCH_KEY = "q"


@dataclass(frozen=True)
class Location:
    pathname: str
    search: str
    href: str

    @classmethod
    def from_url(cls, url: str) -> Location:
        parts = urlsplit(url)
        path = parts.path or "/"
        href = urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))
        return cls(pathname=path, search=f"?{parts.query}" if parts.query else "", href=href)

    def query(self) -> dict[str, str]:
        return parse_query(self.search)


def parse_query(search: str) -> dict[str, str]:
    """
    Split a query component into decoded key/value pairs.

    Splits on the first '?', then on '&', then on the first '=' of each pair.
    Keys without '=' map to ''. The first occurrence of a key wins.
    """
    _, sep, query = search.partition("?")
    if not sep:
        query = search
    out: dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        out.setdefault(unquote_plus(key), unquote_plus(value))
    return out


def search_term(location: Location) -> str:
    return location.query().get(SEARCH_KEY, "")


def search_url(term: str) -> str:
    """Relative URL of the search route for ``term`` (inverse of ``search_term``)."""
    return f"{SEARCH_PATH}?{urlencode({SEARCH_KEY: term})}"
