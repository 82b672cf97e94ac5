"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.core.shared_types import ErrorKind

MIN_YEAR = 1950
MAX_YEAR = 2100


class GameData(BaseModel):
    """A game record as it travels over the wire."""

    title: str
    genre: str
    platform: str
    year: int
    developer: str


# --- REQUEST MODELS ---
class GameRequest(GameData):
    """Body of POST /games and PUT /games/{id}. Stricter than the records it produces."""

    @field_validator(*["title", "genre", "platform", "developer"])
    @classmethod
    def validate_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank.")
        return stripped

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        if not MIN_YEAR <= value <= MAX_YEAR:
            raise ValueError(
                f"{value} is not a plausible release year ({MIN_YEAR}-{MAX_YEAR})."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game: GameData


class GameListResponse(BaseModel):
    games: list[GameData]


class ErrorResponse(BaseModel):
    error: ErrorKind
    detail: str


class HealthResponse(BaseModel):
    status: str
    games: int
