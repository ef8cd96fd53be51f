import pytest

from cityfinder.errors import ConfigurationError
from cityfinder.location import Location
from cityfinder.routing import WILDCARD, RouteTable


def home(loc):
    return "home"


def search(loc):
    return "search"


def fallback(loc):
    return "fallback"


def at(path):
    return Location.from_url(f"http://localhost{path}")


def test_register_is_fluent():
    table = RouteTable()
    assert table.register("/", home) is table
    assert table.patterns == ("/",)


def test_exact_match_beats_wildcard_registered_first():
    table = RouteTable().register(WILDCARD, fallback).register("/search", search)
    assert table.resolve(at("/search?q=x")) is search


@pytest.mark.parametrize("path", ["/", "/nope", "/search/deeper", "/%2A", "/a?b=c"])
def test_wildcard_resolves_everything_else(path):
    table = RouteTable().register("/search", search).register(WILDCARD, fallback)
    assert table.resolve(at(path)) is fallback


def test_last_registration_wins():
    table = RouteTable().register(WILDCARD, home).register(WILDCARD, fallback)
    assert len(table) == 1
    assert table.resolve(at("/x")) is fallback


def test_missing_wildcard_is_a_configuration_error():
    table = RouteTable().register("/", home)
    assert table.resolve(at("/")) is home
    with pytest.raises(ConfigurationError):
        table.resolve(at("/elsewhere"))
    with pytest.raises(ConfigurationError):
        table.validate()


def test_validate_passes_with_wildcard():
    table = RouteTable().register(WILDCARD, fallback)
    table.validate()
    assert WILDCARD in table
