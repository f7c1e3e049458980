# tests/services/test_search_api.py
from __future__ import annotations

from http import HTTPStatus

import httpx
import pytest
import respx

from mediarank.services.api.deps import get_search_service
from mediarank.services.search.books_client import GoogleBooksClient
from mediarank.services.search.games_client import GamesClient
from mediarank.services.search.service import SearchService
from mediarank.services.search.tmdb_client import TMDBClient


@pytest.fixture()
def search_client(app, api_client):
    svc = SearchService(TMDBClient("k"), GoogleBooksClient("k"), GamesClient(None))
    app.dependency_overrides[get_search_service] = lambda: svc
    yield api_client
    svc.close()


@respx.mock
def test_search_movies(search_client, as_user):
    respx.get("https://api.themoviedb.org/3/search/movie").mock(
        return_value=httpx.Response(200, json={"results": [
            {"id": 11, "title": "Star Wars", "original_language": "en", "poster_path": "/sw.jpg", "vote_average": 8.2},
        ]})
    )
    r = search_client.get("/api/search/movie", params={"q": "star"}, headers=as_user("u1"))
    assert r.status_code == HTTPStatus.OK, r.text
    assert r.json()[0]["id"] == "11"
    assert r.json()[0]["type"] == "movie"


def test_search_music_is_400(search_client, as_user):
    r = search_client.get("/api/search/music", params={"q": "abba"}, headers=as_user("u1"))
    assert r.status_code == HTTPStatus.BAD_REQUEST


def test_unconfigured_provider_is_502(search_client, as_user):
    r = search_client.get("/api/search/game", params={"q": "halo"}, headers=as_user("u1"))
    assert r.status_code == HTTPStatus.BAD_GATEWAY
    assert "not configured" in r.json()["detail"]


def test_blank_query(search_client, as_user):
    assert search_client.get("/api/search/book", params={"q": " "}, headers=as_user("u1")).json() == []


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == HTTPStatus.OK
    assert r.json()["ok"] is True
