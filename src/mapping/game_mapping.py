"""Conversions between transfer objects (src/api/models.py) and entities (src/core/models.py)."""

from src.api.models import (
    CreateGameRequest,
    GameDetailsResponse,
    GenreResponse,
    UpdateGameRequest,
)
from src.core.models import Game, Genre


def create_request_to_game(request: CreateGameRequest) -> Game:
    """New Game entity. Both id and genre are left unset: the repository assigns the id, the caller resolves the genre."""
    return Game(
        name=request.name,
        genre_id=request.genre_id,
        price=request.price,
        release_date=request.release_date,
    )


def update_request_to_game(
    request: UpdateGameRequest, game_id: int, genre: Genre
) -> Game:
    """Replacement entity, to overwrite every field of the existing game with the given id."""
    return Game(
        id=game_id,
        name=request.name,
        genre_id=genre.id,
        genre=genre,
        price=request.price,
        release_date=request.release_date,
    )


def game_to_details(game: Game) -> GameDetailsResponse:
    """
    Convert a Game to its detail output.
    ----
    NOTE game.genre must have been resolved by the caller, otherwise this raises AttributeError.
    """
    return GameDetailsResponse(
        id=game.id,
        name=game.name,
        genre=game.genre.name,  # type: ignore[union-attr]
        price=game.price,
        release_date=game.release_date,
    )


def genre_to_response(genre: Genre) -> GenreResponse:
    return GenreResponse(id=genre.id, name=genre.name)
