"""Delphioracle plugin: ingestion registration plus the query API routes.

Construction prepares the datapoints delta handler; register() is the
explicit call that hands it to an ingestion registry.
"""

from fastapi import APIRouter

from oracle_api.api import routes
from oracle_api.config import OracleConfig
from oracle_api.ingestion.datapoints import datapoints_handler
from oracle_api.ingestion.registry import DeltaHandler, DeltaHandlerRegistry
from oracle_api.logging import get_logger

logger = get_logger(__name__)


class DelphioraclePlugin:
    """Bundles the oracle delta transform and HTTP routes for one contract table."""

    def __init__(self, config: OracleConfig) -> None:
        self.config = config
        self.delta_handler: DeltaHandler = datapoints_handler(config)
        logger.info(
            "delphioracle_plugin_initialized",
            contract=config.contract,
            table=config.table,
        )

    @property
    def router(self) -> APIRouter:
        return routes.router

    def register(self, registry: DeltaHandlerRegistry) -> None:
        """Register the datapoints transform and its mappings with the ingestion registry."""
        registry.register(self.delta_handler)
