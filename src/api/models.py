"""Requests and Response models"""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints

from src.core.shared_types import (
    GAME_NAME_MAX_LENGTH,
    MAX_PRICE,
    MIN_PRICE,
)

# Prices are Decimals internally, but go over the wire as JSON numbers
Price = Annotated[
    Decimal,
    Field(ge=MIN_PRICE, le=MAX_PRICE, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]
GameName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=GAME_NAME_MAX_LENGTH),
]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: GameName
    genre_id: int = Field(alias="genreId")
    price: Price
    release_date: date = Field(alias="releaseDate")


class UpdateGameRequest(BaseModel):
    """
    Full replacement of a game's fields.
    ----
    Clients may echo the game's "id" in the body. It is ignored: the id in the path decides which game gets updated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: GameName
    genre_id: int = Field(alias="genreId")
    price: Price
    release_date: date = Field(alias="releaseDate")


# --- RESPONSE MODELS ---
class GameDetailsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    genre: str
    price: Price
    release_date: date = Field(alias="releaseDate")


class GenreResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
