# cityfinder/weather/openweather.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cityfinder.config import settings
from cityfinder.errors import FetchError


class City(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class SearchResult(BaseModel):
    """Decoded body of the ``find`` endpoint; only ``count`` and the names matter here."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    count: int
    items: List[City] = Field(default_factory=list, alias="list")


class OpenWeatherClient:
    """
    Minimal OpenWeatherMap client.

    One request per call, no retry. Every failure (transport, HTTP status,
    JSON decoding, unexpected shape) surfaces as FetchError.
    """

    def __init__(
        self,
        appid: str,
        base: str = "http://api.openweathermap.org/data/2.5",
        *,
        timeout: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base = base.rstrip("/")
        self.appid = appid
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_data(self, method: str, params: Dict[str, Any]) -> Any:
        try:
            r = self.session.get(
                f"{self.base}/{method}",
                params={**params, "APPID": self.appid},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"request failed: {e}") from e
        if not r.ok:
            raise FetchError(f"HTTP {r.status_code} from {method}", status_code=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise FetchError(f"invalid JSON from {method}") from e

    def find_city(self, term: str) -> SearchResult:
        data = self.fetch_data("find", {"q": term})
        try:
            return SearchResult.model_validate(data)
        except ValidationError as e:
            raise FetchError(f"unexpected response shape: {e.error_count()} error(s)") from e


def client_from_settings() -> OpenWeatherClient:
    return OpenWeatherClient(
        settings.openweather_appid,
        settings.openweather_base,
        timeout=settings.openweather_timeout,
    )
