"""Sample records the library starts with (on every process start, nothing is persisted)."""

from src.core.models import GameModel

SEED_GAMES: tuple[GameModel, ...] = (
    GameModel(
        title="The Legend of Zelda: Breath of the Wild",
        genre="Adventure",
        platform="Nintendo Switch",
        year=2017,
        developer="Nintendo",
    ),
    GameModel(
        title="God of War",
        genre="Action",
        platform="PlayStation 4",
        year=2018,
        developer="Santa Monica Studio",
    ),
    GameModel(
        title="Hollow Knight",
        genre="Metroidvania",
        platform="PC",
        year=2017,
        developer="Team Cherry",
    ),
    GameModel(
        title="Forza Horizon 5",
        genre="Racing",
        platform="Xbox Series X|S",
        year=2021,
        developer="Playground Games",
    ),
    GameModel(
        title="Stardew Valley",
        genre="Simulation",
        platform="Nintendo Switch",
        year=2016,
        developer="ConcernedApe",
    ),
    GameModel(
        title="The Legend of Zelda: Ocarina of Time",
        genre="Adventure",
        platform="Nintendo 64",
        year=1998,
        developer="Nintendo",
    ),
    GameModel(
        title="Pokemon Red Version",
        genre="Role-playing Game (RPG)",
        platform="Game Boy",
        year=1996,
        developer="Game Freak",
    ),
)


def seed_games() -> list[GameModel]:
    """Fresh list with the sample records, in their fixed order."""
    return list(SEED_GAMES)
