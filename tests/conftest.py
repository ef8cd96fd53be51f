from __future__ import annotations

import time

import pytest

from cityfinder.config import settings
from cityfinder.errors import FetchError
from cityfinder.weather.openweather import SearchResult


@pytest.fixture(autouse=True)
def _events_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "data_dir", str(tmp_path / "data"))


def make_result(*names: str) -> SearchResult:
    return SearchResult.model_validate({"count": len(names), "list": [{"name": n} for n in names]})


class FakeFinder:
    """Stands in for OpenWeatherClient; answers from a dict, optionally slowly."""

    def __init__(self, answers: dict, delays: dict | None = None):
        self.answers = answers
        self.delays = delays or {}
        self.calls: list[str] = []

    def find_city(self, term: str) -> SearchResult:
        self.calls.append(term)
        time.sleep(self.delays.get(term, 0))
        answer = self.answers.get(term, make_result())
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def finder():
    return FakeFinder(
        {
            "berlin": make_result("Berlin", "Berlin Mills"),
            "atlantis": make_result(),
            "offline": FetchError("network down"),
        }
    )
