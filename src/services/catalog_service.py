"""Orchestration of communication from API router to mapping and persistence layers (and the reverse direction)."""

import logging

from src.api.models import (
    CreateGameRequest,
    GameDetailsResponse,
    GenreResponse,
    UpdateGameRequest,
)
from src.core.exceptions import InvalidGenreError, NotFoundError
from src.core.models import Game, Genre
from src.db.repository import GameRepository
from src.mapping.game_mapping import (
    create_request_to_game,
    game_to_details,
    genre_to_response,
    update_request_to_game,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Orchestration of layers for the game catalog."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def list_games(self) -> list[GameDetailsResponse]:
        """All games, in whatever order the repository returns them."""
        return [game_to_details(game) for game in self.repo.list_games()]

    def get_game(self, game_id: int) -> GameDetailsResponse:
        """Retrieve a single game."""
        return game_to_details(self._fetch_game(game_id))

    def create_game(self, request: CreateGameRequest) -> GameDetailsResponse:
        """Add a new game to the catalog."""

        # Reject unknown genres before anything gets staged
        genre = self._fetch_genre(request.genre_id)

        game = create_request_to_game(request)
        game.genre = genre

        # Repository assigns the ID, commit makes it permanent
        self.repo.add_game(game)
        self.repo.save_changes()
        logger.info("Created game %s (%r).", game.id, game.name)

        return game_to_details(game)

    def update_game(self, game_id: int, request: UpdateGameRequest) -> None:
        """Replace every field of an existing game."""

        # Existence of the game is checked first, then the genre
        self._fetch_game(game_id)
        genre = self._fetch_genre(request.genre_id)

        replacement = update_request_to_game(request, game_id, genre)
        if self.repo.update_game(replacement) is None:
            raise NotFoundError(f"Game with {game_id=} not found.")
        self.repo.save_changes()
        logger.info("Updated game %s.", game_id)

    def delete_game(self, game_id: int) -> None:
        """Remove a game from the catalog."""
        game = self._fetch_game(game_id)
        self.repo.remove_game(game)
        self.repo.save_changes()
        logger.info("Deleted game %s.", game_id)

    def list_genres(self) -> list[GenreResponse]:
        """All genres a game can refer to."""
        return [genre_to_response(genre) for genre in self.repo.list_genres()]

    # -- Internal helpers --
    def _fetch_game(self, game_id: int) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            logger.warning("Game %s not found.", game_id)
            raise NotFoundError(f"Game with {game_id=} not found.")
        return game

    def _fetch_genre(self, genre_id: int) -> Genre:
        """Attempt to find the genre in the repository and raise error if it fails."""
        genre = self.repo.get_genre(genre_id)
        if genre is None:
            logger.warning("Rejected unknown genre %s.", genre_id)
            raise InvalidGenreError(f"Genre with {genre_id=} does not exist.")
        return genre
