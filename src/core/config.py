"""
Settings loaded from environment variables (and a .env file, if present).
"""

import os

from dotenv import load_dotenv

from src.core.shared_types import StorageBackend

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings."""

    # Database
    DATABASE_URL: str = os.getenv("GAMESTORE_DATABASE_URL", "sqlite:///./gamestore.db")
    DATABASE_ECHO: bool = _as_bool(os.getenv("GAMESTORE_DATABASE_ECHO", "false"))
    STORAGE: StorageBackend = StorageBackend(os.getenv("GAMESTORE_STORAGE", "sql"))
    SEED_GENRES: bool = _as_bool(os.getenv("GAMESTORE_SEED_GENRES", "true"))

    # Server
    HOST: str = os.getenv("GAMESTORE_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("GAMESTORE_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
