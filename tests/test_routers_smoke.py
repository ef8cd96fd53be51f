import importlib

import pytest
from fastapi.testclient import TestClient

from cityfinder.deps import get_weather_client
from cityfinder.errors import FetchError

from conftest import FakeFinder, make_result


def get_app():
    mod = importlib.import_module("cityfinder.main")
    return mod.app


@pytest.fixture
def client():
    app = get_app()
    app.dependency_overrides[get_weather_client] = lambda: FakeFinder({"berlin": make_result("Berlin", "Berlin Mills")})
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_index_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Please, type your city" in r.text
    assert '<form method="get" action="/search">' in r.text


def test_search_page_is_rendered_with_results(client):
    r = client.get("/search", params={"q": "berlin"})
    assert r.status_code == 200
    assert "<li>Berlin Mills</li>" in r.text
    assert "Loading..." not in r.text
    assert 'value="berlin"' in r.text


def test_unknown_path_renders_not_found(client):
    r = client.get("/does/not/exist")
    assert r.status_code == 200
    assert "Not found, 404" in r.text


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code in (200, 204)
    body = r.json()
    assert body["ok"] is True
    assert body["checks"]["weather"]["ok"] is True
    assert body["recent_errors"] == []


def test_health_reports_failed_lookup(client):
    client.app.dependency_overrides[get_weather_client] = lambda: FakeFinder(
        {"London": FetchError("HTTP 401 from find", status_code=401)}
    )
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is False
    assert body["checks"]["weather"] == {"ok": False, "detail": "lookup failed: HTTP 401 from find"}
