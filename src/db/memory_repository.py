"""Implementation of (Game)Repository as a lock-guarded, in-memory list"""

import logging
import threading
from typing import Iterable

from src.core.models import GameModel

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Data stored in a plain list. The index of a record is its id.
    ----
    Ids are NOT stable: deleting position 2 moves every later record down by one.
    All access goes through one lock, so a range check and the mutation that depends on it cannot interleave with another writer.
    """

    def __init__(self, games: Iterable[GameModel] = ()) -> None:
        self._lock = threading.RLock()
        self._games: list[GameModel] = list(games)

    def list_games(self) -> list[GameModel]:
        """All records, in storage order."""
        with self._lock:
            return list(self._games)

    def filter_by_genre(self, genre: str) -> list[GameModel]:
        """Records whose genre matches exactly (case-sensitive), in storage order."""
        with self._lock:
            return [game for game in self._games if game.genre == genre]

    def get_game(self, position: int) -> GameModel | None:
        """Get game by position, if record exists."""
        with self._lock:
            if not self._in_range(position):
                return None
            return self._games[position]

    def create_game(self, game: GameModel) -> list[GameModel]:
        """Append a new game and return all records."""
        with self._lock:
            self._games.append(game)
            logger.debug(f"Appended {game.title!r}, {len(self._games)} games stored.")
            return list(self._games)

    def update_game(self, position: int, game: GameModel) -> list[GameModel] | None:
        """Overwrite the record at position. None if there is no such position."""
        with self._lock:
            if not self._in_range(position):
                return None
            self._games[position] = game
            logger.debug(f"Replaced position {position} with {game.title!r}.")
            return list(self._games)

    def delete_game(self, position: int) -> list[GameModel] | None:
        """Remove the record at position. None if there is no such position."""
        with self._lock:
            if not self._in_range(position):
                return None
            removed = self._games.pop(position)
            logger.debug(
                f"Removed {removed.title!r} from position {position}, {len(self._games)} games stored."
            )
            return list(self._games)

    def count(self) -> int:
        with self._lock:
            return len(self._games)

    def reset(self, games: Iterable[GameModel]) -> None:
        """Replace every record (seeding, tests)."""
        with self._lock:
            self._games = list(games)
            logger.debug(f"Repository reset with {len(self._games)} games.")

    def _in_range(self, position: int) -> bool:
        # Negative positions must not fall through to python's index-from-the-end.
        return 0 <= position < len(self._games)
