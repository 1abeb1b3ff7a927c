"""Entry point for the Community Reports API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``community_reports_api.app.core.config``); the data directory from
``DATA_DIR``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from community_reports_api.app.core.config import settings
from community_reports_api.app.main import app


def main() -> None:
    """Serve the API until interrupted.

    A single worker is used: the JSON collection locks only coordinate
    requests inside one process.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://%s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
