"""HTTP level tests for src/api/routes.py, using the application from src/main.py"""

from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from src.api.routes import get_repository
from src.core.exceptions import PersistenceError
from src.core.shared_types import StorageBackend
from src.db.database import get_db
from src.db.memory_repository import InMemoryGameRepository
from src.main import create_app

CHRONO_TRIGGER = {
    "name": "Chrono Trigger",
    "genreId": 1,
    "price": 19.99,
    "releaseDate": "1995-03-11",
}


@pytest.fixture
def client(db_session_repo: Session) -> Generator[TestClient, None, None]:
    """Application backed by the test database."""
    app = create_app(StorageBackend.SQL)
    app.dependency_overrides[get_db] = lambda: db_session_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create(client: TestClient, payload: dict[str, Any] = CHRONO_TRIGGER) -> dict:
    response = client.post("/games", json=payload)
    assert response.status_code == 201
    return response.json()


# --- GET /games ---
def test_list_empty(client: TestClient) -> None:
    response = client.get("/games")
    assert response.status_code == 200
    assert response.json() == []


def test_list_games(client: TestClient) -> None:
    created = _create(client)
    response = client.get("/games")
    assert response.status_code == 200
    assert response.json() == [created]


# --- GET /games/{id} ---
def test_get_unknown_game(client: TestClient) -> None:
    assert client.get("/games/1").status_code == 404


# --- POST /games ---
def test_create_game(client: TestClient) -> None:
    response = client.post("/games", json=CHRONO_TRIGGER)
    assert response.status_code == 201

    body = response.json()
    assert isinstance(body["id"], int)
    assert body == {
        "id": body["id"],
        "name": "Chrono Trigger",
        "genre": "RPG",
        "price": 19.99,
        "releaseDate": "1995-03-11",
    }

    # Location points to the new game
    location = response.headers["location"]
    assert location.endswith(f"/games/{body['id']}")
    assert client.get(location).json() == body


def test_create_invalid_payload(client: TestClient) -> None:
    """Shape validation fails with a 400 and field details."""
    response = client.post("/games", json={**CHRONO_TRIGGER, "price": 150})
    assert response.status_code == 400
    assert response.json()["detail"][0]["loc"] == ["body", "price"]
    assert client.get("/games").json() == []


def test_create_with_unknown_genre(client: TestClient) -> None:
    response = client.post("/games", json={**CHRONO_TRIGGER, "genreId": 999})
    assert response.status_code == 400
    assert "999" in response.json()["detail"]
    assert client.get("/games").json() == []


# --- PUT /games/{id} ---
def test_update_game(client: TestClient) -> None:
    created = _create(client)
    update = {
        "id": created["id"],
        "name": "Super Mario World",
        "genreId": 2,
        "price": 29.5,
        "releaseDate": "1990-11-21",
    }
    response = client.put(f"/games/{created['id']}", json=update)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/games/{created['id']}").json() == {
        "id": created["id"],
        "name": "Super Mario World",
        "genre": "Platformer",
        "price": 29.5,
        "releaseDate": "1990-11-21",
    }


def test_update_unknown_game(client: TestClient) -> None:
    response = client.put("/games/1", json=CHRONO_TRIGGER)
    assert response.status_code == 404


def test_update_with_unknown_genre(client: TestClient) -> None:
    """400, and game 1 is unchanged."""
    created = _create(client)
    response = client.put(
        f"/games/{created['id']}", json={**CHRONO_TRIGGER, "genreId": 999}
    )
    assert response.status_code == 400
    assert client.get(f"/games/{created['id']}").json() == created


# --- DELETE /games/{id} ---
def test_delete_game(client: TestClient) -> None:
    created = _create(client)
    response = client.delete(f"/games/{created['id']}")
    assert response.status_code == 204
    assert client.get(f"/games/{created['id']}").status_code == 404


def test_delete_unknown_game(client: TestClient) -> None:
    created = _create(client)
    assert client.delete(f"/games/{created['id'] + 1}").status_code == 404
    assert client.get("/games").json() == [created]


# --- GET /genres ---
def test_list_genres(client: TestClient) -> None:
    response = client.get("/genres")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "RPG"},
        {"id": 2, "name": "Platformer"},
    ]


# --- In-memory storage ---
def test_memory_storage_has_default_genres() -> None:
    client = TestClient(create_app(StorageBackend.MEMORY))
    genres = client.get("/genres").json()
    assert genres[0] == {"id": 1, "name": "Fighting"}

    created = client.post("/games", json={**CHRONO_TRIGGER, "genreId": 2}).json()
    assert created["genre"] == "Roleplaying"
    assert client.get("/games").json() == [created]


def test_memory_storage_does_not_use_database() -> None:
    """No SQL session gets opened when the app runs on the in-memory store."""

    def _no_database() -> Session:
        raise AssertionError("database session requested")

    app = create_app(StorageBackend.MEMORY)
    app.dependency_overrides[get_db] = _no_database
    client = TestClient(app)
    assert client.post("/games", json=CHRONO_TRIGGER).status_code == 201
    assert client.get("/games").status_code == 200


# --- Failing commits ---
class FailingCommitRepository(InMemoryGameRepository):
    def save_changes(self) -> None:
        self._pending.clear()
        raise PersistenceError("Could not save changes.")


def test_failing_commit_is_a_server_error() -> None:
    """500 with a generic message, and the stored games stay as they were."""
    app = create_app(StorageBackend.MEMORY)
    client = TestClient(app)
    created = client.post("/games", json=CHRONO_TRIGGER).json()

    app.dependency_overrides[get_repository] = lambda: FailingCommitRepository(
        app.state.memory_store
    )
    update = {**CHRONO_TRIGGER, "name": "Chrono Cross"}
    for response in [
        client.post("/games", json=update),
        client.put(f"/games/{created['id']}", json=update),
        client.delete(f"/games/{created['id']}"),
    ]:
        assert response.status_code == 500
        assert response.json() == {"detail": "The change could not be saved."}

    assert client.get("/games").json() == [created]
