"""Protocol repository (implemented with SQLAlchemy in sql_repository.py and with plain dictionaries in memory_repository.py)"""

from typing import Protocol

from src.core.models import Game, Genre


class GameRepository(Protocol):
    """
    Persistence layer orchestration.
    ----
    add_game(), update_game() and remove_game() only stage changes. Nothing is visible to later reads until save_changes() commits them, all together or not at all.
    """

    def get_game(self, game_id: int) -> Game | None:
        """Get game (with its genre resolved) by ID, if record exists."""
        ...

    def list_games(self) -> list[Game]:
        """All stored games, each with its genre resolved."""
        ...

    def get_genre(self, genre_id: int) -> Genre | None:
        """Get genre by ID, if record exists."""
        ...

    def list_genres(self) -> list[Genre]:
        """All stored genres."""
        ...

    def add_game(self, game: Game) -> Game:
        """Stage a new game. Assigns the generated ID to game.id and returns the game."""
        ...

    def update_game(self, game: Game) -> Game | None:
        """Stage overwriting every field of the record with ID game.id. Returns None if there is no such record."""
        ...

    def remove_game(self, game: Game) -> None:
        """Stage removal of a game's record."""
        ...

    def save_changes(self) -> None:
        """Commit all staged changes as one unit. Raises PersistenceError if that fails."""
        ...
