"""
Provider clients are exercised against respx-mocked httpx: request shape,
normalization to MediaItem, and error mapping.
"""
from __future__ import annotations

import httpx
import pytest
import respx

from mediarank.common.errors import NetworkError, ValidationError
from mediarank.domain.enums.media_type import MediaType
from mediarank.services.search.books_client import GoogleBooksClient
from mediarank.services.search.games_client import GamesClient, boxart_url
from mediarank.services.search.service import SearchService
from mediarank.services.search.tmdb_client import TMDBClient

TMDB_MOVIES = {
    "results": [
        {"id": 603, "title": "The Matrix", "original_language": "en", "release_date": "1999-03-30",
         "poster_path": "/matrix.jpg", "overview": "Neo wakes up.", "vote_average": 8.2},
        {"id": 604, "title": "The Matrix Reloaded", "original_language": "en", "release_date": "2003-05-15",
         "poster_path": None, "overview": "", "vote_average": 0},
        {"id": 9999, "title": "Matrix (dub)", "original_language": "fr", "poster_path": None},
        {"id": 1234, "title": "Speed", "original_language": "en"},
    ]
}

TMDB_SHOWS = {
    "results": [
        {"id": 2316, "name": "The Office", "original_language": "en", "first_air_date": "2005-03-24",
         "poster_path": "/office.jpg", "vote_average": 8.6},
    ]
}

BOOKS = {
    "items": [
        {"id": "zyTCAlFPjgYC", "volumeInfo": {"title": "Dune", "publishedDate": "1965",
                                              "imageLinks": {"smallThumbnail": "http://books/small.jpg"},
                                              "averageRating": 4.5},
         "searchInfo": {"textSnippet": "Desert planet"}},
        {"id": "abc", "volumeInfo": {"title": "Dune Messiah", "description": "Sequel",
                                     "imageLinks": {"thumbnail": "http://books/thumb.jpg"}}},
        {"id": "zzz", "volumeInfo": {"title": "Foundation"}},
    ]
}

GAMES = {
    "data": {"games": [
        {"id": 1, "game_title": "Halo: Combat Evolved", "release_date": "2001-11-15", "overview": "Master Chief"},
        {"id": 2, "game_title": "Halo 2"},
    ]},
    "include": {"boxart": {
        "base_url": {"medium": "https://cdn.thegamesdb.net/images/medium/"},
        "data": {"1": [{"filename": "boxart/front/1-1.jpg"}]},
    }},
}


@pytest.fixture()
def tmdb():
    client = TMDBClient("tmdb-key")
    yield client
    client.close()


@pytest.fixture()
def books():
    client = GoogleBooksClient("books-key")
    yield client
    client.close()


@pytest.fixture()
def games():
    client = GamesClient("games-key")
    yield client
    client.close()


class TestTMDB:
    @respx.mock
    def test_search_movies_filters_and_normalizes(self, tmdb):
        route = respx.get("https://api.themoviedb.org/3/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIES)
        )

        results = tmdb.search_movies("matrix")

        assert [m.id for m in results] == ["603", "604"]
        first, second = results
        assert first.type is MediaType.movie
        assert first.poster == "https://image.tmdb.org/t/p/w400/matrix.jpg"
        assert first.rating == 8.2
        assert first.release_date == "1999-03-30"
        assert second.rating is None
        assert second.poster == "https://placehold.co/400x600?text=The%20Matrix%20Reloaded"

        params = route.calls.last.request.url.params
        assert params["api_key"] == "tmdb-key"
        assert params["query"] == "matrix"
        assert params["region"] == "US"

    @respx.mock
    def test_search_shows_uses_name_and_first_air_date(self, tmdb):
        respx.get("https://api.themoviedb.org/3/search/tv").mock(
            return_value=httpx.Response(200, json=TMDB_SHOWS)
        )
        (show,) = tmdb.search_shows("office")
        assert show.type is MediaType.tv
        assert show.title == "The Office"
        assert show.release_date == "2005-03-24"

    @respx.mock
    def test_non_2xx_is_network_error(self, tmdb):
        respx.get("https://api.themoviedb.org/3/search/movie").mock(return_value=httpx.Response(401))
        with pytest.raises(NetworkError):
            tmdb.search_movies("matrix")

    @respx.mock
    def test_transport_failure_is_network_error(self, tmdb):
        respx.get("https://api.themoviedb.org/3/search/movie").mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(NetworkError):
            tmdb.search_movies("matrix")

    def test_missing_key_is_network_error(self):
        with pytest.raises(NetworkError) as ei:
            TMDBClient(None).search_movies("matrix")
        assert "tmdb" in ei.value.message


class TestGoogleBooks:
    @respx.mock
    def test_search_normalizes_volumes(self, books):
        route = respx.get("https://www.googleapis.com/books/v1/volumes").mock(
            return_value=httpx.Response(200, json=BOOKS)
        )

        results = books.search("dune")

        assert [b.id for b in results] == ["zyTCAlFPjgYC", "abc"]
        dune, messiah = results
        assert dune.poster == "http://books/small.jpg"
        assert dune.overview == "Desert planet"
        assert dune.rating == 4.5
        assert dune.release_date == "1965"
        assert messiah.poster == "http://books/thumb.jpg"
        assert messiah.overview == "Sequel"
        assert route.calls.last.request.url.params["key"] == "books-key"

    @respx.mock
    def test_empty_payload(self, books):
        respx.get("https://www.googleapis.com/books/v1/volumes").mock(return_value=httpx.Response(200, json={}))
        assert books.search("dune") == []


class TestGames:
    @respx.mock
    def test_search_uses_boxart_or_placeholder(self, games):
        route = respx.get("https://api.thegamesdb.net/v1/Games/ByGameName").mock(
            return_value=httpx.Response(200, json=GAMES)
        )

        halo, halo2 = games.search("halo")

        assert halo.id == "1"
        assert halo.type is MediaType.game
        assert halo.poster == "https://cdn.thegamesdb.net/images/medium/boxart/front/1-1.jpg"
        assert halo.overview == "Master Chief"
        assert halo2.poster == "https://placehold.co/400x600?text=Halo%202"

        params = route.calls.last.request.url.params
        assert params["apikey"] == "games-key"
        assert params["name"] == "halo"
        assert params["fields"] == "overview"
        assert params["include"] == "boxart"

    def test_boxart_url_handles_missing_pieces(self):
        assert boxart_url("1", None) is None
        assert boxart_url("1", {"base_url": {"medium": "x/"}, "data": {}}) is None
        assert boxart_url("7", {"base_url": {"medium": "x/"}, "data": {"7": [{"filename": "a.jpg"}]}}) == "x/a.jpg"


class TestSearchService:
    @pytest.fixture()
    def svc(self, tmdb, books, games):
        return SearchService(tmdb, books, games)

    def test_blank_query_makes_no_call(self, svc):
        with respx.mock(assert_all_called=False) as mock:
            assert svc.search("movie", "   ") == []
            assert not mock.calls

    def test_music_has_no_provider(self, svc):
        with pytest.raises(ValidationError):
            svc.search(MediaType.music, "abba")

    def test_unknown_type(self, svc):
        with pytest.raises(ValidationError):
            svc.search("podcast", "x")

    @respx.mock
    def test_dispatches_books(self, svc):
        respx.get("https://www.googleapis.com/books/v1/volumes").mock(return_value=httpx.Response(200, json=BOOKS))
        assert [b.type for b in svc.search("book", " dune ")] == [MediaType.book, MediaType.book]

    def test_from_settings_builds_unconfigured_clients(self):
        svc = SearchService.from_settings()
        try:
            assert svc.tmdb.source == "tmdb"
            assert svc.games.source == "games"
        finally:
            svc.close()
