"""Generate database session"""

import logging
from typing import Generator

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import settings
from src.core.shared_types import DEFAULT_GENRES
from src.db.schema import Base, DBGenre

logger = logging.getLogger(__name__)

# SQLite connections get shared with the threadpool that FastAPI runs sync endpoints in
connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)
engine = create_engine(
    settings.DATABASE_URL, echo=settings.DATABASE_ECHO, connect_args=connect_args
)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db(bind: Engine = engine, seed_genres: bool = settings.SEED_GENRES) -> None:
    """Ensure all tables are created, and fill an empty genre table with the default genres."""
    Base.metadata.create_all(bind=bind)
    if not seed_genres:
        return

    with Session(bind) as db:
        if db.scalar(select(DBGenre.id).limit(1)) is not None:
            return
        db.add_all([DBGenre(name=name) for name in DEFAULT_GENRES])
        db.commit()
        logger.info("Seeded %d default genres.", len(DEFAULT_GENRES))


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
