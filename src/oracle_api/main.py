"""Entry point for the oracle datapoints API.

Loads settings, configures logging, builds the document store and serves
the FastAPI app with uvicorn. The lifespan closes the store client on shutdown.
"""

import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from oracle_api.api.app import create_app
from oracle_api.config import AppSettings
from oracle_api.logging import get_logger, setup_logging
from oracle_api.store.elastic_client import ElasticsearchStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and release the store's connections on shutdown."""
    logger = get_logger("oracle_api.main")
    settings: AppSettings = app.state.settings
    logger.info(
        "lifespan_started",
        chain=settings.chain.name,
        store_url=settings.store.url,
        handlers=len(app.state.registry),
    )

    yield

    await app.state.store.close()
    logger.info("oracle_api_stopped")


async def run() -> None:
    """Build the app from environment settings and serve it."""
    settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("oracle_api.main")

    store = ElasticsearchStore(settings.store)
    app = create_app(settings, store, lifespan=lifespan)

    logger.info("starting_api", host=settings.api.host, port=settings.api.port)

    config = uvicorn.Config(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
