# cityfinder/controller.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

from .dom import Event
from .host import Navigator
from .location import Location, search_term, search_url
from .storage.events import record_event
from .view import View
from .weather.openweather import City, SearchResult

logger = logging.getLogger(__name__)

INPUT_KEY = "input"


class CityFinder(Protocol):
    def find_city(self, term: str) -> SearchResult: ...


def _log_item_click(item: City) -> None:
    logger.info("city selected: %s", item.name)


class Controller:
    """
    Route handlers plus the UI state they share.

    ``store`` holds the last typed search text under ``"input"``. Handlers
    render synchronously; the search handler additionally starts one lookup
    task per invocation and renders its outcome when it completes.
    """

    def __init__(
        self,
        api: CityFinder,
        view: View,
        navigator: Navigator,
        *,
        on_item_click: Optional[Callable[[City], Any]] = None,
    ):
        self.api = api
        self.view = view
        self.navigator = navigator
        self.store: dict[str, Any] = {}
        self.on_item_click = on_item_click or _log_item_click
        self._search_seq = 0
        self._pending: set[asyncio.Task] = set()

    # ---------- UI events ----------

    def _handle_text_input_change(self, evt: Event) -> None:
        self.store[INPUT_KEY] = evt.target.value

    def _handle_find_button_click(self, evt: Event | None = None) -> None:
        value = self.store.get(INPUT_KEY) or ""
        self.navigator.push_state(search_url(value))

    def _render_header(self) -> None:
        self.view.render_header(
            on_text_input_change=self._handle_text_input_change,
            on_button_click=self._handle_find_button_click,
            input_value=self.store.get(INPUT_KEY) or "",
        )

    # ---------- Route handlers ----------

    def on_home_route(self, location: Location) -> None:
        self._render_header()
        self.view.render_home()

    def on_search_route(self, location: Location) -> None:
        # the lookup task needs a loop; fail before anything is rendered
        loop = asyncio.get_running_loop()
        value = search_term(location)
        self.store[INPUT_KEY] = value
        self._render_header()
        self.view.render_loading()

        self._search_seq += 1
        task = loop.create_task(self._search(self._search_seq, value))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def on_not_found_route(self, location: Location) -> None:
        self._render_header()
        self.view.render_not_found()

    # ---------- Lookup ----------

    async def _search(self, token: int, term: str) -> None:
        try:
            result = await asyncio.to_thread(self.api.find_city, term)
        except Exception as e:  # noqa: BLE001
            if token != self._search_seq:
                logger.debug("discarding stale failure for %r", term)
                return
            logger.warning("city lookup failed for %r: %s", term, e)
            self.view.render_error(str(e))
            record_event({"type": "error", "where": "find_city", "term": term, "error": str(e)})
            return
        if token != self._search_seq:
            logger.debug("discarding stale result for %r", term)
            return
        self.view.render_search_results(result, self.on_item_click)

    async def settled(self) -> None:
        """Wait until every lookup started so far has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
