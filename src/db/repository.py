"""Protocol repository (the in-memory list is the only implementation, positions are the record ids)"""

from typing import Iterable, Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def list_games(self) -> list[GameModel]:
        """All records, in storage order."""
        ...

    def filter_by_genre(self, genre: str) -> list[GameModel]:
        """Records whose genre matches exactly, in storage order."""
        ...

    def get_game(self, position: int) -> GameModel | None:
        """Get game by position, if record exists."""
        ...

    def create_game(self, game: GameModel) -> list[GameModel]:
        """Append a new game and return all records."""
        ...

    def update_game(self, position: int, game: GameModel) -> list[GameModel] | None:
        """Overwrite the record at position. None if there is no such position."""
        ...

    def delete_game(self, position: int) -> list[GameModel] | None:
        """Remove the record at position. None if there is no such position."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...

    def reset(self, games: Iterable[GameModel]) -> None:
        """Replace every record."""
        ...
