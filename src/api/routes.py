"""HTTP routes. All logic is delegated to the CatalogService."""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from src.api.models import (
    CreateGameRequest,
    GameDetailsResponse,
    GenreResponse,
    UpdateGameRequest,
)
from src.db.database import get_db
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.catalog_service import CatalogService

GET_GAME_ROUTE = "get_game"

games_router = APIRouter(prefix="/games", tags=["games"])
genres_router = APIRouter(prefix="/genres", tags=["genres"])


# --- Dependencies ---
def get_repository() -> GameRepository:
    """Repository for one request. create_app() binds this to the storage backend in use."""
    raise NotImplementedError("No storage backend configured, build the app with create_app().")


def get_sql_repository(db: Session = Depends(get_db)) -> GameRepository:
    return SQLGameRepository(db)


def get_memory_repository(request: Request) -> GameRepository:
    return InMemoryGameRepository(request.app.state.memory_store)


def get_catalog_service(
    repository: GameRepository = Depends(get_repository),
) -> CatalogService:
    return CatalogService(repository)


# --- /games ---
@games_router.get("", response_model=list[GameDetailsResponse])
def list_games(
    service: CatalogService = Depends(get_catalog_service),
) -> list[GameDetailsResponse]:
    return service.list_games()


@games_router.get("/{game_id}", response_model=GameDetailsResponse, name=GET_GAME_ROUTE)
def get_game(
    game_id: int, service: CatalogService = Depends(get_catalog_service)
) -> GameDetailsResponse:
    return service.get_game(game_id)


@games_router.post(
    "", response_model=GameDetailsResponse, status_code=status.HTTP_201_CREATED
)
def create_game(
    payload: CreateGameRequest,
    request: Request,
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
) -> GameDetailsResponse:
    game = service.create_game(payload)
    response.headers["Location"] = str(request.url_for(GET_GAME_ROUTE, game_id=game.id))
    return game


@games_router.put("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_game(
    game_id: int,
    payload: UpdateGameRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    service.update_game(game_id, payload)


@games_router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(
    game_id: int, service: CatalogService = Depends(get_catalog_service)
) -> None:
    service.delete_game(game_id)


# --- /genres ---
@genres_router.get("", response_model=list[GenreResponse])
def list_genres(
    service: CatalogService = Depends(get_catalog_service),
) -> list[GenreResponse]:
    return service.list_genres()
