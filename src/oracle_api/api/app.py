"""FastAPI application factory for the oracle datapoints API."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from oracle_api.config import AppSettings
from oracle_api.ingestion.registry import DeltaHandlerRegistry
from oracle_api.plugin import DelphioraclePlugin
from oracle_api.query.pipeline import QueryPipeline
from oracle_api.store.client import DocumentStore


def create_app(
    settings: AppSettings,
    store: DocumentStore,
    registry: DeltaHandlerRegistry | None = None,
    lifespan: Any = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application-wide settings. Oracle config is resolved here, once.
        store: Document store the query pipeline searches.
        registry: Ingestion registry to register delta handlers with.
                  A fresh registry is created when omitted.
        lifespan: Optional async context manager for startup/shutdown.

    Returns:
        Configured FastAPI application with the pipeline on app.state.
    """
    app = FastAPI(title="Delphioracle API", lifespan=lifespan)

    plugin = DelphioraclePlugin(settings.oracle.resolve())
    registry = registry if registry is not None else DeltaHandlerRegistry()
    plugin.register(registry)

    app.state.settings = settings
    app.state.store = store
    app.state.registry = registry
    app.state.pipeline = QueryPipeline(
        store=store,
        config=plugin.config,
        chain=settings.chain.name,
    )

    app.include_router(plugin.router)

    return app
