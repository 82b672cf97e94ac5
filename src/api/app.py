"""FastAPI application factory: wires settings, repository, service, routes and error handlers together."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.api.routes import router, system_router
from src.core.config import Settings, configure_logging, get_settings
from src.core.exceptions import GameLibraryError
from src.core.shared_types import ErrorKind
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.seed import seed_games
from src.services.game_service import GameLibraryService

logger = logging.getLogger(__name__)

API_TITLE = "Game Library API"
API_VERSION = "1.0.0"

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def create_app(
    settings: Settings | None = None, repository: GameRepository | None = None
) -> FastAPI:
    """
    Build a new app, with its own game library.
    ----
    Without a repository, a fresh in-memory one is created and seeded with the sample games.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if repository is None:
        repository = InMemoryGameRepository(seed_games())

    app = FastAPI(title=API_TITLE, version=API_VERSION)
    app.state.settings = settings
    app.state.service = GameLibraryService(repository)

    app.include_router(router, prefix=settings.api_prefix)
    app.include_router(system_router)
    app.add_exception_handler(GameLibraryError, handle_library_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    logger.info(
        f"Game library ready with {repository.count()} games under {settings.api_prefix or '/'}"
    )
    return app


# --- Error handlers ---
def error_response(kind: ErrorKind, detail: str) -> JSONResponse:
    body = ErrorResponse(error=kind, detail=detail)
    return JSONResponse(status_code=STATUS_BY_KIND[kind], content=body.model_dump(mode="json"))


async def handle_library_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, GameLibraryError)
    return error_response(exc.kind, exc.message)


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    """Malformed JSON, or a body that fails GameRequest validation."""
    assert isinstance(exc, RequestValidationError)
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    logger.warning(f"Rejected request to {request.url.path}: {'; '.join(problems)}")
    return error_response(ErrorKind.INVALID_BODY, "; ".join(problems) or "Invalid request.")
