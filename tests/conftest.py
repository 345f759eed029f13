"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from datetime import date
from decimal import Decimal
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.models import Game, Genre
from src.db.memory_repository import InMemoryGameRepository, InMemoryStore
from src.db.schema import Base, DBGenre

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

MOCK_GENRES = [Genre(id=1, name="RPG"), Genre(id=2, name="Platformer")]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database, holding the mock genres. Tables are removed at teardown to make tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    db.add_all([DBGenre(id=genre.id, name=genre.name) for genre in MOCK_GENRES])
    db.commit()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def memory_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository(InMemoryStore(genres=MOCK_GENRES))
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def chrono_trigger() -> Game:
    """Game entity that was not stored yet."""
    return Game(
        name="Chrono Trigger",
        genre_id=1,
        price=Decimal("19.99"),
        release_date=date(1995, 3, 11),
    )
