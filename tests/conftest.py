from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from movies_api.main import create_app
from movies_shared import Movie
from movies_shared.config import AppConfig
from movies_shared.repositories import MovieRepository

ALLOWED_ORIGIN = "http://localhost:3000"

INCEPTION_ID = "5ad1a235-0d9c-410a-b32b-220d91689a08"
HANGOVER_ID = "8fb17ae1-bdfe-45e5-a871-4772d7e526b8"


@pytest.fixture
def movie_payload() -> Callable[..., dict[str, Any]]:
    def _payload(**overrides: Any) -> dict[str, Any]:
        payload = {
            "title": "Alien",
            "year": 1979,
            "director": "Ridley Scott",
            "duration": 117,
            "poster": "https://x.com/a.jpg",
            "genre": ["Sci-Fi"],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def seed_movies() -> list[Movie]:
    return [
        Movie(
            id=INCEPTION_ID,
            title="Inception",
            year=2010,
            director="Christopher Nolan",
            duration=148,
            rate=8.8,
            poster="https://example.com/inception.jpg",
            genre=["Action", "Sci-Fi"],
        ),
        Movie(
            id=HANGOVER_ID,
            title="The Hangover",
            year=2009,
            director="Todd Phillips",
            duration=100,
            rate=7.7,
            poster="https://example.com/hangover.jpg",
            genre=["Comedy"],
        ),
    ]


@pytest.fixture
def repository(seed_movies: list[Movie]) -> MovieRepository:
    return MovieRepository(seed_movies)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(accepted_origins=[ALLOWED_ORIGIN, "https://my-app.com"])


@pytest.fixture
def client(app_config: AppConfig, repository: MovieRepository) -> Generator[TestClient, None, None]:
    app = create_app(app_config=app_config, repository=repository)
    with TestClient(app) as c:
        yield c
