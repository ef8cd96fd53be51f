# cityfinder/host.py
from __future__ import annotations

from urllib.parse import urljoin

from .config import settings
from .dom import Document
from .location import Location

HEADER_ID = "header"
VIEW_ID = "view"


class Navigator:
    """
    Navigation surface: current location plus a session history.

    ``push_state`` changes the location without notifying anybody; observers
    are expected to sample ``location``.
    """

    def __init__(self, url: str):
        self._entries: list[str] = [Location.from_url(url).href]
        self._index = 0

    @property
    def location(self) -> Location:
        return Location.from_url(self._entries[self._index])

    def push_state(self, url: str) -> Location:
        href = Location.from_url(urljoin(self._entries[self._index], url)).href
        # drop forward entries, like a browser does
        del self._entries[self._index + 1 :]
        self._entries.append(href)
        self._index += 1
        return self.location

    def back(self) -> Location:
        if self._index > 0:
            self._index -= 1
        return self.location

    def forward(self) -> Location:
        if self._index < len(self._entries) - 1:
            self._index += 1
        return self.location

    def __len__(self) -> int:
        return len(self._entries)


class BrowserHost:
    """In-memory browser: a navigator and a document with the two page regions."""

    def __init__(self, url: str | None = None, region_ids: tuple[str, ...] = (HEADER_ID, VIEW_ID)):
        self.navigator = Navigator(url or settings.start_url)
        self.document = Document(*region_ids)
