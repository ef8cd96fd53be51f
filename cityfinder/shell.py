# cityfinder/shell.py
"""
Composition root: builds the route table, controller and watcher for one host.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .config import settings
from .controller import CityFinder, Controller
from .dom import Document
from .host import BrowserHost
from .location import SEARCH_PATH, Location
from .routing import WILDCARD, RouteTable
from .services.watcher import LocationWatcher
from .view import RenderSurface, View
from .weather.openweather import City, client_from_settings

logger = logging.getLogger(__name__)


class Application:
    def __init__(
        self,
        host: BrowserHost,
        api: CityFinder,
        *,
        interval: Optional[float] = None,
        on_item_click: Optional[Callable[[City], Any]] = None,
    ):
        self.host = host
        # raises ConfigurationError when a container is missing
        self.view = View(RenderSurface(host.document), host.document)
        self.controller = Controller(api, self.view, host.navigator, on_item_click=on_item_click)
        self.routes = (
            RouteTable()
            .register("/", self.controller.on_home_route)
            .register(SEARCH_PATH, self.controller.on_search_route)
            .register(WILDCARD, self.controller.on_not_found_route)
        )
        self.routes.validate()
        self.watcher = LocationWatcher(host.navigator, interval=interval or settings.watch_interval)

    def dispatch(self, location: Location) -> None:
        """Run the handler for ``location``. The search route must be dispatched inside a running event loop."""
        logger.debug("dispatch %s", location.href)
        self.routes.resolve(location)(location)

    def boot(self) -> None:
        """Start watching once the document reports ready."""
        self.host.document.add_ready_listener(self._on_ready)

    def _on_ready(self) -> None:
        logger.info("document ready, watching %s", self.host.navigator.location.href)
        self.watcher.start(self.dispatch)

    def shutdown(self) -> None:
        self.watcher.stop()


def create_application(
    url: Optional[str] = None,
    api: Optional[CityFinder] = None,
    **kwargs: Any,
) -> Application:
    return Application(BrowserHost(url), api or client_from_settings(), **kwargs)


async def prerender(url: str, api: CityFinder) -> Document:
    """
    Render the client at ``url`` once and return its document.

    Performs the initial dispatch directly and waits for any lookup it
    started, so the returned document holds the final state of both regions.
    """
    app = create_application(url, api)
    app.watcher.start(app.dispatch)
    try:
        app.watcher.tick()
        await app.controller.settled()
    finally:
        app.shutdown()
    return app.host.document
