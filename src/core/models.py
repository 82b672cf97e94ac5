"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the db layer (lower) use the model defined here to send to/receive from the Service
(Decouples the pydantic models of the API layer from the way the repository stores its records)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameModel:
    """Transport-safe representation of a single game record used between API, Service and DB layers."""

    title: str
    genre: str
    platform: str
    year: int
    developer: str
