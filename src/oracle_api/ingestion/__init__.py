"""Ingestion side channel: delta transforms registered per contract table."""

from oracle_api.ingestion.datapoints import (
    datapoints_handler,
    datapoints_mappings,
    transform_datapoint,
)
from oracle_api.ingestion.registry import DeltaHandler, DeltaHandlerRegistry

__all__ = [
    "DeltaHandler",
    "DeltaHandlerRegistry",
    "datapoints_handler",
    "datapoints_mappings",
    "transform_datapoint",
]
