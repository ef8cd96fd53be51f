# cityfinder/services/watcher.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from cityfinder.host import Navigator
from cityfinder.location import Location
from cityfinder.storage.events import record_event

logger = logging.getLogger(__name__)

OnChange = Callable[[Location], Any]


class LocationWatcher:
    """
    Samples the navigator every ``interval`` seconds and reports changes.

    The first sample after construction is always reported (initial
    dispatch); afterwards only samples whose href differs from the baseline.
    """

    def __init__(self, navigator: Navigator, interval: float = 0.05):
        self.interval = interval
        self._navigator = navigator
        self._baseline: Optional[Location] = None
        self._on_change: Optional[OnChange] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_change: OnChange) -> None:
        """(Re)start sampling; any loop already running is cancelled first."""
        self.stop()
        self._on_change = on_change
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def tick(self) -> bool:
        """Take one sample; return True when the change callback fired."""
        if self._on_change is None:
            return False
        current = self._navigator.location
        if self._baseline is not None and self._baseline.href == current.href:
            return False
        self._baseline = current
        try:
            self._on_change(current)
        except Exception as e:  # noqa: BLE001
            logger.exception("route handler failed for %s", current.href)
            record_event({"type": "error", "where": "watch_tick", "href": current.href, "error": str(e)})
        return True

    async def _run(self) -> None:
        while True:
            # cooperative sleep
            await asyncio.sleep(self.interval)
            try:
                self.tick()
            except Exception as e:  # noqa: BLE001
                logger.exception("location watch tick failed")
                record_event({"type": "error", "where": "watch_loop", "error": str(e)})
