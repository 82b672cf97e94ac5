"""Orchestration of communication from API router to the repository (and the reverse direction)."""

import logging

from src.api.models import GameData, GameListResponse, GameRequest, GameResponse
from src.core.exceptions import GameNotFoundError, InvalidIdError, InvalidQueryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)

GameId = int | str

# No in-memory list gets anywhere near 10**18 records.
MAX_ID_DIGITS = 18


class GameLibraryService:
    """
    Orchestration of layers for the game library.
    ----
    Validates ids and query values, and turns a missing record into GameNotFoundError.
    The repository does the range check itself, under its lock, so nothing is mutated when an error is raised.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def list_games(self) -> GameListResponse:
        """Every game, in storage order."""
        return self._create_list_response(self.repo.list_games())

    def filter_games(self, genre: str | None) -> GameListResponse:
        """Games of exactly this genre (case-sensitive). Finding none is an error, not an empty list."""
        if genre is None or genre == "":
            logger.warning("Rejected genre filter without a genre.")
            raise InvalidQueryError("Query parameter 'genre' is required.")

        matches = self.repo.filter_by_genre(genre)
        if not matches:
            logger.warning(f"No games with genre {genre!r}.")
            raise GameNotFoundError(f"No games found with genre {genre!r}.")
        return self._create_list_response(matches)

    def get_game(self, game_id: GameId) -> GameResponse:
        """Retrieve the game at a position."""
        position = parse_game_id(game_id)
        game = self.repo.get_game(position)
        if game is None:
            raise self._not_found(position)
        return GameResponse(game=self._to_data(game))

    def add_game(self, request: GameRequest) -> GameListResponse:
        """Append a new game. It gets the position equal to the old number of games."""
        games = self.repo.create_game(self._to_model(request))
        logger.info(f"Added game {request.title!r} at position {len(games) - 1}.")
        return self._create_list_response(games)

    def update_game(self, game_id: GameId, request: GameRequest) -> GameListResponse:
        """Replace the game at a position. Length and all other positions stay the same."""
        position = parse_game_id(game_id)
        games = self.repo.update_game(position, self._to_model(request))
        if games is None:
            raise self._not_found(position)
        logger.info(f"Replaced game at position {position} with {request.title!r}.")
        return self._create_list_response(games)

    def delete_game(self, game_id: GameId) -> GameListResponse:
        """Remove the game at a position. Every later game moves down one position."""
        position = parse_game_id(game_id)
        games = self.repo.delete_game(position)
        if games is None:
            raise self._not_found(position)
        logger.info(f"Deleted game at position {position}, {len(games)} games left.")
        return self._create_list_response(games)

    def count(self) -> int:
        return self.repo.count()

    # -- Internal helpers --
    def _create_list_response(self, games: list[GameModel]) -> GameListResponse:
        return GameListResponse(games=[self._to_data(game) for game in games])

    def _to_data(self, game: GameModel) -> GameData:
        return GameData(
            title=game.title,
            genre=game.genre,
            platform=game.platform,
            year=game.year,
            developer=game.developer,
        )

    def _to_model(self, request: GameRequest) -> GameModel:
        return GameModel(
            title=request.title,
            genre=request.genre,
            platform=request.platform,
            year=request.year,
            developer=request.developer,
        )

    def _not_found(self, position: int) -> GameNotFoundError:
        logger.warning(f"No game at position {position}.")
        return GameNotFoundError(f"Game with id={position} not found.")


def parse_game_id(game_id: GameId) -> int:
    """
    Accept an int, or the text of a path segment, as long as it is a non-negative integer.
    ----
    bool is rejected even though it subclasses int. Text must be plain ASCII digits: no sign, no spaces, no decimal point.
    Text with more than MAX_ID_DIGITS significant digits is a valid id past the end of any library: GameNotFoundError.
    """
    if isinstance(game_id, bool):
        position = None
    elif isinstance(game_id, int):
        position = game_id
    elif isinstance(game_id, str) and game_id.isascii() and game_id.isdecimal():
        digits = game_id.lstrip("0") or "0"
        if len(digits) > MAX_ID_DIGITS:
            # int() refuses very long strings (sys.int_info.str_digits_check_threshold).
            logger.warning(f"No game at position with {len(digits)} digits.")
            raise GameNotFoundError(
                f"Game with id={digits[:MAX_ID_DIGITS]}... not found."
            )
        position = int(digits)
    else:
        position = None

    if position is None or position < 0:
        logger.warning(f"Rejected game id {game_id!r:.40}.")
        raise InvalidIdError(
            f"Game id must be a non-negative integer, got {game_id!r:.40}."
        )
    return position
