"""Database tables / schema"""

from datetime import date
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from src.core.shared_types import GAME_NAME_MAX_LENGTH, GENRE_NAME_MAX_LENGTH


class Base(DeclarativeBase):
    pass


class DBGenre(Base):
    __tablename__ = "genres"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(GENRE_NAME_MAX_LENGTH))

    games: Mapped[list["DBGame"]] = relationship(back_populates="genre")


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(GAME_NAME_MAX_LENGTH))
    genre_id: Mapped[int] = mapped_column(ForeignKey("genres.id"))
    price: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    release_date: Mapped[date]

    genre: Mapped[DBGenre] = relationship(back_populates="games")
