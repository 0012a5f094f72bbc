"""Run the BoardSync service: python -m boardsync."""

import uvicorn

from boardsync.api.app import create_app
from boardsync.config import Settings
from boardsync.logging import setup_logging


def main() -> None:
    """Start the HTTP server with settings from the environment."""
    setup_logging()
    settings = Settings.from_env()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="info",
    )
    uvicorn.Server(config).run()


if __name__ == "__main__":
    main()
