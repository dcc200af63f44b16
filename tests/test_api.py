from fastapi.testclient import TestClient

from movies_api.main import create_app
from movies_shared.repositories import MovieRepository

from .conftest import ALLOWED_ORIGIN, HANGOVER_ID, INCEPTION_ID


def test_list_movies(client: TestClient):
    response = client.get("/movies")

    assert response.status_code == 200
    assert [movie["id"] for movie in response.json()] == [INCEPTION_ID, HANGOVER_ID]


def test_list_movies_by_genre_ignores_case(client: TestClient):
    lower = client.get("/movies", params={"genre": "sci-fi"})
    title = client.get("/movies", params={"genre": "Sci-Fi"})

    assert lower.status_code == 200
    assert lower.json() == title.json()
    assert [movie["id"] for movie in lower.json()] == [INCEPTION_ID]


def test_list_movies_by_genre_without_matches(client: TestClient):
    response = client.get("/movies", params={"genre": "Drama"})

    assert response.status_code == 200
    assert response.json() == []


def test_list_movies_empty_genre_lists_all(client: TestClient):
    response = client.get("/movies?genre=")

    assert len(response.json()) == 2


def test_get_movie(client: TestClient):
    response = client.get(f"/movies/{INCEPTION_ID}")

    assert response.status_code == 200
    assert response.json()["title"] == "Inception"


def test_get_movie_not_found(client: TestClient):
    response = client.get("/movies/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "Movie not found"}


def test_create_movie(client: TestClient, repository: MovieRepository, movie_payload):
    response = client.post("/movies", json=movie_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["rate"] == 5
    assert body["title"] == "Alien"
    assert body["genre"] == ["Sci-Fi"]
    assert repository.list_movies()[-1].id == body["id"]


def test_create_movie_with_integral_float_numbers(client: TestClient, movie_payload):
    response = client.post("/movies", json=movie_payload(year=1979.0, duration=117.0))

    assert response.status_code == 201
    body = response.json()
    assert body["year"] == 1979
    assert body["duration"] == 117
    assert isinstance(body["year"], int)
    assert isinstance(body["duration"], int)


def test_create_movie_ignores_caller_id(client: TestClient, movie_payload):
    response = client.post("/movies", json=movie_payload(id="mine"))

    assert response.status_code == 201
    assert response.json()["id"] != "mine"


def test_create_movie_invalid_year(client: TestClient, repository: MovieRepository, movie_payload):
    response = client.post("/movies", json=movie_payload(title="Bad", year=1700))

    assert response.status_code == 400
    errors = response.json()["error"]
    assert [error["path"] for error in errors] == [["year"]]
    assert repository.count() == 2


def test_create_movie_malformed_body(client: TestClient):
    response = client.post(
        "/movies",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Malformed request body"}


def test_update_movie(client: TestClient):
    before = client.get(f"/movies/{HANGOVER_ID}").json()

    response = client.patch(f"/movies/{HANGOVER_ID}", json={"rate": 9})

    assert response.status_code == 200
    after = response.json()
    assert after["rate"] == 9
    assert isinstance(after["rate"], int)
    assert {k: v for k, v in after.items() if k != "rate"} == {k: v for k, v in before.items() if k != "rate"}


def test_update_movie_invalid(client: TestClient):
    response = client.patch(f"/movies/{HANGOVER_ID}", json={"genre": ["Musical"]})

    assert response.status_code == 400
    assert response.json()["error"][0]["path"] == ["genre", 0]


def test_update_movie_not_found(client: TestClient):
    response = client.patch("/movies/unknown", json={"rate": 9})

    assert response.status_code == 404
    assert response.json() == {"error": "Movie not found"}


def test_update_movie_validates_before_lookup(client: TestClient):
    response = client.patch("/movies/unknown", json={"year": 1700})

    assert response.status_code == 400


def test_delete_movie(client: TestClient):
    response = client.delete(f"/movies/{INCEPTION_ID}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/movies/{INCEPTION_ID}").status_code == 404


def test_delete_movie_not_found(client: TestClient):
    response = client.delete("/movies/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "Movie not found"}


def test_options_from_allowed_origin(client: TestClient):
    response = client.options(f"/movies/{INCEPTION_ID}", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert response.headers["access-control-allow-methods"] == "GET,DELETE,OPTIONS,POST,PATCH,PUT"


def test_options_from_unlisted_origin(client: TestClient):
    response = client.options(f"/movies/{INCEPTION_ID}", headers={"Origin": "https://evil.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-methods" not in response.headers


def test_allowed_origin_is_echoed_on_reads(client: TestClient):
    response = client.get("/movies", headers={"Origin": ALLOWED_ORIGIN})

    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert "access-control-allow-methods" not in response.headers


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["services"] == {"store": "2 movies"}


def test_unhandled_error_keeps_cors_headers(app_config, repository):
    app = create_app(app_config=app_config, repository=repository)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/explode", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
