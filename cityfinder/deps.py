# cityfinder/deps.py
from __future__ import annotations

from .weather.openweather import OpenWeatherClient, client_from_settings

_weather_singleton: OpenWeatherClient | None = None


def get_weather_client() -> OpenWeatherClient:
    """FastAPI dependency to get a shared OpenWeatherMap client instance."""
    global _weather_singleton
    if _weather_singleton is None:
        _weather_singleton = client_from_settings()
    return _weather_singleton
