# cityfinder/router_health.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from .controller import CityFinder
from .deps import get_weather_client
from .errors import FetchError
from .storage.events import read_recent

router = APIRouter(prefix="/health", tags=["health"])


# ---------- Checks ----------


def check_weather(api: CityFinder) -> dict:
    try:
        # Any known city will do, we just need a decodable answer
        result = api.find_city("London")
        return {"ok": True, "detail": f"OpenWeatherMap OK ({result.count} match(es))"}
    except FetchError as e:
        return {"ok": False, "detail": f"lookup failed: {e}"}


def recent_errors(limit: int = 10) -> list[dict]:
    return read_recent(limit, type="error")


# ---------- Routes ----------


@router.get("", summary="Health status (JSON)")
def health(api=Depends(get_weather_client)):
    w = check_weather(api)
    return {"ok": bool(w.get("ok")), "checks": {"weather": w}, "recent_errors": recent_errors()}
