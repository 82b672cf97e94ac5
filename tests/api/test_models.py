import pytest
from pydantic import ValidationError

from src.api.models import GameRequest

VALID_GAME = {
    "title": "Hades",
    "genre": "Roguelike",
    "platform": "PC",
    "year": 2020,
    "developer": "Supergiant Games",
}


# -- Validation - GameRequest --
def test_valid_game() -> None:
    request = GameRequest(**VALID_GAME)
    assert request.model_dump() == VALID_GAME


def test_text_fields_are_stripped() -> None:
    request = GameRequest(**{**VALID_GAME, "title": "  Hades  "})
    assert request.title == "Hades"


def test_extra_fields_are_ignored() -> None:
    request = GameRequest(**VALID_GAME, rating=10)
    assert "rating" not in request.model_dump()


@pytest.mark.parametrize("field", ["title", "genre", "platform", "year", "developer"])
def test_missing_field(field: str) -> None:
    """Every field is required."""
    data = {key: value for key, value in VALID_GAME.items() if key != field}
    with pytest.raises(ValidationError):
        _ = GameRequest(**data)


@pytest.mark.parametrize("field", ["title", "genre", "platform", "developer"])
def test_blank_text_field(field: str) -> None:
    with pytest.raises(ValidationError):
        _ = GameRequest(**{**VALID_GAME, field: "   "})


@pytest.mark.parametrize(
    "year",
    [
        1949,  # before the first video games
        2101,
        "twenty twenty",  # not an integer at all
    ],
)
def test_invalid_year(year: object) -> None:
    with pytest.raises(ValidationError):
        _ = GameRequest(**{**VALID_GAME, "year": year})
