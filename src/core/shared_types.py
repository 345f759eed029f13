"""
Type definitions and constants used across layers
"""

from enum import StrEnum


class StorageBackend(StrEnum):
    SQL = "sql"
    MEMORY = "memory"


# --- Field limits shared by the request models and the database schema
GAME_NAME_MAX_LENGTH = 50
GENRE_NAME_MAX_LENGTH = 20
MIN_PRICE = 0
MAX_PRICE = 100

# --- Genres inserted when the genre table is empty
DEFAULT_GENRES = [
    "Fighting",
    "Roleplaying",
    "Sports",
    "Racing",
    "Kids and Family",
]
