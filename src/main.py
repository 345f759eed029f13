"""
FastAPI application for the game catalog.

Usage:
    gamestore
Or:
    uvicorn src.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.routes import (
    games_router,
    genres_router,
    get_memory_repository,
    get_repository,
    get_sql_repository,
)
from src.core.config import settings
from src.core.exceptions import InvalidGenreError, NotFoundError, PersistenceError
from src.core.models import Genre
from src.core.shared_types import DEFAULT_GENRES, StorageBackend
from src.db.database import init_db
from src.db.memory_repository import InMemoryStore

logger = logging.getLogger(__name__)


def create_app(storage: StorageBackend = settings.STORAGE) -> FastAPI:
    """Build the application, backed by the SQL database or by an in-memory store."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if storage == StorageBackend.SQL:
            init_db()
        logger.info("Game store ready (storage: %s).", storage)
        yield

    app = FastAPI(
        title="Game Store",
        description="Catalog of games with their genre, price and release date.",
        version="0.1.0",
        lifespan=lifespan,
    )

    if storage == StorageBackend.MEMORY:
        app.state.memory_store = InMemoryStore(
            genres=[
                Genre(id=genre_id, name=name)
                for genre_id, name in enumerate(DEFAULT_GENRES, start=1)
            ]
        )
        app.dependency_overrides[get_repository] = get_memory_repository
    else:
        app.dependency_overrides[get_repository] = get_sql_repository

    app.include_router(games_router)
    app.include_router(genres_router)
    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Map exceptions raised by the service / persistence layers onto HTTP responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidGenreError)
    async def invalid_genre(request: Request, exc: InvalidGenreError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failure(request: Request, exc: PersistenceError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "The change could not be saved."},
        )


app = create_app()


def main() -> None:
    """Entry point for running the server."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
