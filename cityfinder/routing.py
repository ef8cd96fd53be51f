# cityfinder/routing.py
from __future__ import annotations

from typing import Any, Callable

from .errors import ConfigurationError
from .location import Location

WILDCARD = "*"

Handler = Callable[[Location], Any]


class RouteTable:
    """
    Exact pathname -> handler, plus one wildcard fallback.

    Exact entries always win over the wildcard regardless of registration
    order; registering a pattern again replaces its handler.
    """

    def __init__(self) -> None:
        self._routes: dict[str, Handler] = {}

    def register(self, pattern: str, handler: Handler) -> RouteTable:
        self._routes[pattern] = handler
        return self

    def resolve(self, location: Location) -> Handler:
        if location.pathname != WILDCARD:
            handler = self._routes.get(location.pathname)
            if handler is not None:
                return handler
        try:
            return self._routes[WILDCARD]
        except KeyError:
            raise ConfigurationError(
                f"No route for {location.pathname!r} and no wildcard route registered"
            ) from None

    def validate(self) -> None:
        if WILDCARD not in self._routes:
            raise ConfigurationError("Route table has no wildcard route")

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(self._routes)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._routes

    def __len__(self) -> int:
        return len(self._routes)
