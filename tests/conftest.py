"""Shared fixtures for the catalogsearch test suite.

Payloads mirror what the search service returns for a mixed result list: a
movie asset, an episode asset and a series.
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest


SEARCH_URL = "https://search.example.com/search"


@pytest.fixture
def movie_hit() -> dict[str, Any]:
    """A movie asset as returned by the service."""
    return {
        "type": "movie",
        "video_id": "123",
        "title_sv": "Filmen",
        "title_da": "Filmen DK",
        "content_source": "cmore",
        "timestamp": "20170101123456",
        "spoken_languages": ["sv"],
        "tags": {"category": ["drama"]},
        "duration": 5400,
        "production_year": "2016",
        "brand": None,
        "poster": {
            "url": "https://img.example.com/poster.jpg",
            "localizations": [
                {"language": "da", "url": "https://img.example.com/poster_da.jpg"}
            ],
        },
        "credits": [
            {"function": "actor", "name": "Alex Actor", "rolename": "Lead"},
        ],
        "events": [
            {
                "site": "cmore.se",
                "device_types": ["tve_web"],
                "products": ["cmore_total"],
                "start_time": "2017-01-01T00:00:00Z",
                "end_time": None,
            }
        ],
    }


@pytest.fixture
def episode_hit() -> dict[str, Any]:
    """An episode asset with brand and season."""
    return {
        "type": "episode",
        "video_id": "456",
        "title_sv": "Avsnitt 2",
        "episode_number": 2,
        "brand": {"id": "b1", "title_sv": "Serien"},
        "season": {"id": "s1", "season_number": 1, "number_of_episodes": 10},
    }


@pytest.fixture
def series_hit() -> dict[str, Any]:
    """A series hit; its identifier is the brand ID."""
    return {
        "type": "series",
        "id": "series-1",
        "brand_id": "b1",
        "title_sv": "Serien",
        "seasons": [1, 2, 3],
        "content_source": "cmore",
    }


@pytest.fixture
def search_body(
    movie_hit: dict[str, Any],
    episode_hit: dict[str, Any],
    series_hit: dict[str, Any],
) -> dict[str, Any]:
    """A successful search response body with three hits."""
    return {"total_hits": 42, "assets": [movie_hit, episode_hit, series_hit]}


ResponseFactory = Callable[..., httpx.Response]


@pytest.fixture
def make_response() -> ResponseFactory:
    """Factory building an httpx.Response bound to a GET request.

    Keyword args: ``json``, ``content``, ``content_type`` and ``url``.
    """

    def factory(
        status_code: int,
        *,
        json: Any = None,  # noqa: ANN401
        content: bytes | None = None,
        content_type: str | None = None,
        url: str = SEARCH_URL,
    ) -> httpx.Response:
        headers = {"Content-Type": content_type} if content_type else None
        return httpx.Response(
            status_code,
            json=json,
            content=content,
            headers=headers,
            request=httpx.Request("GET", url),
        )

    return factory
