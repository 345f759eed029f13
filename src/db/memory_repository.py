"""Implementation of (Game)Repository keeping all records in memory"""

import threading
from copy import deepcopy
from itertools import count
from typing import Callable, Iterable

from src.core.models import Game, Genre

PendingChange = Callable[[dict[int, Game]], None]


class InMemoryStore:
    """
    Committed records, shared by every repository (the in-memory counterpart of a database).
    ----
    Commits are serialized by a lock, so concurrent units of work never overwrite each other's changes.
    """

    def __init__(self, genres: Iterable[Genre] = ()) -> None:
        self.genres: dict[int, Genre] = {genre.id: genre for genre in genres}
        self.games: dict[int, Game] = {}
        self._lock = threading.Lock()
        self._ids = count(start=1)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def commit(self, changes: list[PendingChange]) -> None:
        """Apply the changes to a copy of the stored games, which then replaces the stored games."""
        with self._lock:
            games = dict(self.games)
            for change in changes:
                change(games)
            self.games = games

    def clear(self) -> None:
        with self._lock:
            self.games = {}


class InMemoryGameRepository:
    """
    One unit of work against an InMemoryStore (create one per request).
    ----
    Staged changes belong to this repository only, and reach the store when save_changes() is called.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self._pending: list[PendingChange] = []

    def get_game(self, game_id: int) -> Game | None:
        """Get game (with its genre resolved) by ID, if record exists."""
        game = self.store.games.get(game_id)
        if game is None:
            return None
        return self._resolved(game)

    def list_games(self) -> list[Game]:
        """All stored games, in insertion order, each with its genre resolved."""
        return [self._resolved(game) for game in self.store.games.values()]

    def get_genre(self, genre_id: int) -> Genre | None:
        """Get genre by ID, if record exists."""
        return self.store.genres.get(genre_id)

    def list_genres(self) -> list[Genre]:
        """All stored genres."""
        return list(self.store.genres.values())

    def add_game(self, game: Game) -> Game:
        """Stage a new game and assign it the next ID."""
        game.id = self.store.next_id()
        stored = deepcopy(game)

        def _add(games: dict[int, Game]) -> None:
            games[stored.id] = stored  # type: ignore[index]

        self._pending.append(_add)
        return game

    def update_game(self, game: Game) -> Game | None:
        """Stage overwriting every field of the record with ID game.id."""
        if game.id is None or game.id not in self.store.games:
            return None
        replacement = deepcopy(game)

        def _overwrite(games: dict[int, Game]) -> None:
            games[replacement.id] = replacement  # type: ignore[index]

        self._pending.append(_overwrite)
        return game

    def remove_game(self, game: Game) -> None:
        """Stage removal of a game's record."""
        game_id = game.id

        def _remove(games: dict[int, Game]) -> None:
            games.pop(game_id, None)  # type: ignore[arg-type]

        self._pending.append(_remove)

    def save_changes(self) -> None:
        """Commit all staged changes to the store as one unit."""
        pending, self._pending = self._pending, []
        self.store.commit(pending)

    def clear(self) -> None:
        """Clear the repository and its store (useful in between tests)"""
        self._pending.clear()
        self.store.clear()

    def _resolved(self, game: Game) -> Game:
        """Copy of the stored game, with its genre looked up from genre_id."""
        resolved = deepcopy(game)
        resolved.genre = self.store.genres.get(game.genre_id)
        return resolved
