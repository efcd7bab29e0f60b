"""Histogram query core: interval classification, request building, response shaping."""

from oracle_api.query.builder import build_histogram_request, delta_index_pattern
from oracle_api.query.intervals import (
    CALENDAR_INTERVALS,
    DEFAULT_INTERVAL,
    FIXED_INTERVALS,
    classify_interval,
)
from oracle_api.query.pipeline import DEFAULT_SCOPE, QueryPipeline
from oracle_api.query.shaping import shape_histogram, total_documents
from oracle_api.query.window import format_timestamp, parse_timestamp, resolve_window

__all__ = [
    "CALENDAR_INTERVALS",
    "DEFAULT_INTERVAL",
    "DEFAULT_SCOPE",
    "FIXED_INTERVALS",
    "QueryPipeline",
    "build_histogram_request",
    "classify_interval",
    "delta_index_pattern",
    "format_timestamp",
    "parse_timestamp",
    "resolve_window",
    "shape_histogram",
    "total_documents",
]
