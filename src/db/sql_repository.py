"""Implementation of (Game)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from src.core.exceptions import PersistenceError
from src.core.models import Game, Genre
from src.db.schema import DBGame, DBGenre

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: int) -> Game | None:
        """Get game (with its genre resolved) by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def list_games(self) -> list[Game]:
        """All stored games, each with its genre resolved."""
        query = select(DBGame).options(joinedload(DBGame.genre))
        return [self._to_model(game_db) for game_db in self.db.scalars(query)]

    def get_genre(self, genre_id: int) -> Genre | None:
        """Get genre by ID, if record exists."""
        genre_db = self.db.get(DBGenre, genre_id)
        if genre_db:
            return self._to_genre(genre_db)
        return None

    def list_genres(self) -> list[Genre]:
        """All stored genres."""
        query = select(DBGenre).order_by(DBGenre.id)
        return [self._to_genre(genre_db) for genre_db in self.db.scalars(query)]

    def add_game(self, game: Game) -> Game:
        """Stage a new game. Flushing makes the database generate the ID, but nothing is committed yet."""
        game_db = DBGame(
            name=game.name,
            genre_id=game.genre_id,
            price=game.price,
            release_date=game.release_date,
        )
        self.db.add(game_db)
        try:
            self.db.flush()
        except SQLAlchemyError as exc:
            self._rollback("add game")
            raise PersistenceError("Could not add game.") from exc
        game.id = game_db.id
        return game

    def update_game(self, game: Game) -> Game | None:
        """Stage overwriting every field of the record with ID game.id."""
        if game.id is None:
            return None
        game_db = self._fetch_game(game.id)
        if not game_db:
            return None
        game_db.name = game.name
        game_db.genre_id = game.genre_id
        game_db.price = game.price
        game_db.release_date = game.release_date
        return game

    def remove_game(self, game: Game) -> None:
        """Stage removal of a game's record."""
        if game.id is None:
            return
        game_db = self._fetch_game(game.id)
        if game_db:
            self.db.delete(game_db)

    def save_changes(self) -> None:
        """Commit the session's pending changes as one transaction."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self._rollback("commit")
            raise PersistenceError("Could not save changes.") from exc

    def _rollback(self, action: str) -> None:
        logger.exception("Database %s failed, rolling back.", action)
        self.db.rollback()

    def _fetch_game(self, game_id: int) -> DBGame | None:
        query = (
            select(DBGame).options(joinedload(DBGame.genre)).where(DBGame.id == game_id)
        )
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> Game:
        """Convert SQLAlchemy model to data transfer model."""
        return Game(
            id=game_db.id,
            name=game_db.name,
            genre_id=game_db.genre_id,
            genre=self._to_genre(game_db.genre),
            price=game_db.price,
            release_date=game_db.release_date,
        )

    def _to_genre(self, genre_db: DBGenre) -> Genre:
        return Genre(id=genre_db.id, name=genre_db.name)
