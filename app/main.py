import logging
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env before settings are first read
load_dotenv()

from app.api.router import api_router
from app.core.config import BIND_HOST, LogSettings, Settings, get_settings
from app.core.listener import ListenerBindError, bind_listener
from app.core.logging_config import configure_logging
from app.core.request_logging import log_requests

# Fixed name so `python -m app.main` still logs under the app logger
logger = logging.getLogger("app.main")

app = FastAPI(
    title="Health Service",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.middleware("http")(log_requests)
app.include_router(api_router)


def start(settings: Settings) -> None:
    """Bind the listener and serve until the process is stopped.

    A bind failure is fatal: it is logged and the process exits with status 1.
    """
    port = settings.port
    try:
        sock = bind_listener(BIND_HOST, port)
    except ListenerBindError:
        logger.exception("Failed to start server on port %s", port)
        sys.exit(1)

    config = uvicorn.Config(
        app,
        host=BIND_HOST,
        port=port,
        log_config=None,
        access_log=False,
    )
    server = uvicorn.Server(config)

    logger.info("Server running on http://localhost:%s", port)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def run() -> None:
    """Console entry point."""
    log_settings = LogSettings()
    configure_logging(level=log_settings.log_level, log_format=log_settings.log_format)
    start(get_settings())


if __name__ == "__main__":
    run()
