import pytest
import requests

import tmdb_client
from tmdb_client import TMDBError, build_movies_url, fetch_movies, fetch_trending


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    """Registra as chamadas a requests.get e devolve a resposta configurada."""
    recorded = {"urls": [], "kwargs": [], "response": FakeResponse(payload={"results": []})}

    def fake_get(url, **kwargs):
        recorded["urls"].append(url)
        recorded["kwargs"].append(kwargs)
        response = recorded["response"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(tmdb_client.requests, "get", fake_get)
    return recorded


def test_empty_query_targets_category_endpoint(config):
    url = build_movies_url(config, query="", category="popular")
    assert url == "https://api.themoviedb.org/3/movie/popular"


def test_query_targets_search_and_ignores_category(config):
    url = build_movies_url(config, query="batman", category="upcoming")
    assert url == "https://api.themoviedb.org/3/search/movie?query=batman"


def test_query_is_url_escaped(config):
    url = build_movies_url(config, query="star wars & co/2")
    assert url.endswith("/search/movie?query=star%20wars%20%26%20co%2F2")


def test_unknown_category_rejected(config):
    with pytest.raises(ValueError):
        build_movies_url(config, category="classics")


def test_fetch_sends_auth_headers(config, calls):
    calls["response"] = FakeResponse(payload={"results": [{"id": 1, "title": "Heat"}]})

    movies = fetch_movies(config, category="top_rated")

    assert movies == [{"id": 1, "title": "Heat"}]
    assert calls["urls"] == ["https://api.themoviedb.org/3/movie/top_rated"]
    headers = calls["kwargs"][0]["headers"]
    assert headers["accept"] == "application/json"
    assert headers["Authorization"] == "Bearer test-token"
    assert calls["kwargs"][0]["timeout"] == config.timeout


def test_missing_results_field_is_empty_list(config, calls):
    calls["response"] = FakeResponse(payload={"page": 1})
    assert fetch_movies(config, query="zzzz") == []


def test_http_error_raises(config, calls):
    calls["response"] = FakeResponse(status_code=401, payload={"status_message": "Invalid API key"})
    with pytest.raises(TMDBError, match="Failed to fetch movies"):
        fetch_movies(config, query="batman")


def test_network_error_raises(config, calls):
    calls["response"] = requests.exceptions.ConnectionError("offline")
    with pytest.raises(TMDBError):
        fetch_movies(config)


def test_invalid_json_raises(config, calls):
    calls["response"] = FakeResponse(payload=ValueError("not json"))
    with pytest.raises(TMDBError):
        fetch_movies(config)


def test_trending_capped_to_first_ten(config, calls):
    results = [{"id": i, "title": f"Movie {i}"} for i in range(15)]
    calls["response"] = FakeResponse(payload={"results": results})

    trending = fetch_trending(config)

    assert calls["urls"] == ["https://api.themoviedb.org/3/trending/movie/week"]
    assert trending == results[:10]


def test_trending_error_body_without_results_is_empty(config, calls):
    calls["response"] = FakeResponse(status_code=500, payload={"status_message": "oops"})
    assert fetch_trending(config) == []


def test_category_label():
    assert tmdb_client.category_label("now_playing") == "Now Playing"
    with pytest.raises(ValueError):
        tmdb_client.category_label("nope")


def test_results_not_a_list_raises(config, calls):
    calls["response"] = FakeResponse(payload={"results": 5})
    with pytest.raises(TMDBError):
        fetch_movies(config)


def test_null_results_is_empty_list(config, calls):
    calls["response"] = FakeResponse(payload={"results": None})
    assert fetch_movies(config) == []


def test_unencodable_query_raises_before_request(config, calls):
    with pytest.raises(TMDBError):
        fetch_movies(config, query="bat\ud800")
    assert calls["urls"] == []


def test_trending_results_not_a_list_raises(config, calls):
    calls["response"] = FakeResponse(payload={"results": {"id": 1}})
    with pytest.raises(TMDBError):
        fetch_trending(config)
