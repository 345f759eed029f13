"""Custom exceptions raised by the service and persistence layers."""


class GameStoreError(Exception):
    """Base exception for the game store."""


class NotFoundError(GameStoreError):
    """No record matches the requested id."""


class InvalidGenreError(GameStoreError):
    """The referenced genre does not exist."""


class PersistenceError(GameStoreError):
    """Committing pending changes to the store failed. Nothing was written."""
