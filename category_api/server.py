"""
Process entry point for the Category API.

Reads ``Settings`` from the environment, configures logging, announces
the port on standard output and serves ``category_api.app.main:app``
with uvicorn until the process is stopped.

Usage::

    PORT=9000 python -m category_api
"""

import asyncio
import logging

from uvicorn import Config, Server

from category_api.app.core.config import Settings
from category_api.app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_server(app_settings: Settings) -> Server:
    """Create a uvicorn server for the application described by ``app_settings``."""
    # Imported here so that the app is built after logging is configured.
    from category_api.app.main import create_app

    app = create_app(app_settings)
    config = Config(
        app=app,
        host=app_settings.host,
        port=app_settings.port,
        reload=False,
        log_config=None,
    )
    return Server(config)


async def serve(app_settings: Settings) -> None:
    server = build_server(app_settings)
    print(f"Server running at port {app_settings.port}", flush=True)
    logger.info("Listening on %s:%s", app_settings.host, app_settings.port)
    await server.serve()


def main() -> None:
    """Run the API server in the foreground."""
    app_settings = Settings()
    setup_logging(app_settings.log_level, app_settings.log_file)
    try:
        asyncio.run(serve(app_settings))
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
