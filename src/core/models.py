"""
Boundary layer data model(s).

These entities are what the Service works with.
The API layer (higher) converts its transfer objects into them through src/mapping, and the db layer (lower) converts its rows into them.
(Decouples the data model specific to the DB layer or API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class Genre:
    id: int
    name: str


@dataclass
class Game:
    """Transport-safe representation of a catalog game used between API, Service and DB layers."""

    name: str
    genre_id: int
    price: Decimal
    release_date: date
    # Assigned by the repository when the game is added
    id: Optional[int] = None
    # Resolved from genre_id by the Service before any output is built
    genre: Optional[Genre] = None
