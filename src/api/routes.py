"""HTTP routes for the game library. Thin wrappers: the service does the validation and raises GameLibraryError."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request, status

from src.api.models import (
    ErrorResponse,
    GameListResponse,
    GameRequest,
    GameResponse,
    HealthResponse,
)
from src.services.game_service import GameLibraryService

router = APIRouter(prefix="/games", tags=["Games"])
system_router = APIRouter(tags=["System"])

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

# Taken as text: the service decides what a valid id is ("-1" and "abc" are InvalidId, not 422).
GameIdPath = Annotated[str, Path(description="Position of the game in the library.")]


def get_service(request: Request) -> GameLibraryService:
    """The service owned by the running app (see create_app)."""
    return request.app.state.service


Service = Annotated[GameLibraryService, Depends(get_service)]


@router.get("", response_model=GameListResponse, summary="List all games")
def list_games(service: Service) -> GameListResponse:
    return service.list_games()


# Must be registered before /{game_id}, otherwise "filter" is read as an id.
@router.get(
    "/filter",
    response_model=GameListResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Filter games by genre",
)
def filter_games(
    service: Service,
    genre: Annotated[str | None, Query(description="Exact, case-sensitive genre.")] = None,
) -> GameListResponse:
    return service.filter_games(genre)


@router.get(
    "/{game_id}",
    response_model=GameResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a game by its position",
)
def get_game(service: Service, game_id: GameIdPath) -> GameResponse:
    return service.get_game(game_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=GameListResponse,
    responses=BAD_REQUEST,
    summary="Add a game",
)
def add_game(service: Service, payload: GameRequest = Body(...)) -> GameListResponse:
    return service.add_game(payload)


@router.put(
    "/{game_id}",
    response_model=GameListResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace the game at a position",
)
def update_game(
    service: Service, game_id: GameIdPath, payload: GameRequest = Body(...)
) -> GameListResponse:
    return service.update_game(game_id, payload)


@router.delete(
    "/{game_id}",
    response_model=GameListResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Remove the game at a position",
)
def delete_game(service: Service, game_id: GameIdPath) -> GameListResponse:
    return service.delete_game(game_id)


# --- SYSTEM ---
@system_router.get("/", summary="API index")
def index(request: Request) -> dict:
    prefix = request.app.state.settings.api_prefix
    return {
        "name": request.app.title,
        "version": request.app.version,
        "endpoints": [
            f"GET {prefix}/games",
            f"GET {prefix}/games/filter?genre=<genre>",
            f"GET {prefix}/games/{{id}}",
            f"POST {prefix}/games",
            f"PUT {prefix}/games/{{id}}",
            f"DELETE {prefix}/games/{{id}}",
        ],
    }


@system_router.get("/health", response_model=HealthResponse, summary="Health check")
def health(service: Service) -> HealthResponse:
    return HealthResponse(status="ok", games=service.count())
