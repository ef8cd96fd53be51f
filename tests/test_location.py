from cityfinder.location import Location, parse_query, search_term, search_url


def test_from_url_splits_components():
    loc = Location.from_url("http://localhost:3000/search?q=berlin#top")
    assert loc.pathname == "/search"
    assert loc.search == "?q=berlin"
    assert loc.href == "http://localhost:3000/search?q=berlin#top"


def test_empty_path_is_root():
    loc = Location.from_url("http://localhost:3000")
    assert loc.pathname == "/"
    assert loc.search == ""


def test_locations_differing_in_query_are_different():
    a = Location.from_url("http://h/search?q=a")
    b = Location.from_url("http://h/search?q=b")
    assert a.pathname == b.pathname
    assert a != b


def test_parse_query_first_key_wins_and_decodes():
    assert parse_query("?q=new+york&q=paris&x") == {"q": "new york", "x": ""}
    assert parse_query("q=%C3%BCberlingen") == {"q": "überlingen"}
    assert parse_query("") == {}


def test_search_term_defaults_to_empty():
    assert search_term(Location.from_url("http://h/search")) == ""
    assert search_term(Location.from_url("http://h/search?other=1")) == ""


def test_search_url_round_trips_special_characters():
    term = "a&b=c d?é"
    loc = Location.from_url("http://h" + search_url(term))
    assert loc.pathname == "/search"
    assert search_term(loc) == term
