"""
Process entrypoint: `python -m src.main` or the `game-library` script.

Importing this module builds nothing. With the uvicorn CLI, use the factory: `uvicorn --factory src.api.app:create_app`.
"""

import uvicorn

from src.api.app import create_app
from src.core.config import get_settings


def run() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
