"""Shared data models for the oracle datapoints API.

Query-side models are frozen: they are built once per request and never mutated.
Response-side models serialize through to_dict() for JSON output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IntervalKind(str, Enum):
    """How the store must bucket an interval."""

    CALENDAR = "calendar"  # calendar-aligned, variable length (month, quarter...)
    FIXED = "fixed"  # exact multiple of a constant-duration unit


@dataclass(frozen=True)
class IntervalSpec:
    """A validated bucketing interval token and its kind."""

    token: str
    kind: IntervalKind


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive time bounds in canonical timestamp text."""

    start: str
    end: str

    def to_dict(self) -> dict:
        return {"from": self.start, "to": self.end}


@dataclass(frozen=True)
class RawQuery:
    """Query-string values exactly as received, before any defaulting."""

    scope: str | None = None
    interval: str | None = None
    after: str | None = None
    before: str | None = None
    size: int | None = None


@dataclass(frozen=True)
class QueryParameters:
    """Fully resolved parameters for one histogram query."""

    scope: str
    contract: str
    table: str
    interval: IntervalSpec
    window: TimeWindow
    size: int = 0


@dataclass(frozen=True)
class AggregationRequest:
    """Search request descriptor: the target index pattern and the search body."""

    index: str
    body: dict[str, Any]


@dataclass
class HistogramBucket:
    """One interval's document count and price statistics.

    A statistic is None when the store computed no value for the bucket.
    """

    timestamp: str | int
    doc_count: int
    average_price: float | None = None
    min_price: float | None = None
    max_price: float | None = None
    median_price: float | None = None

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "doc_count": self.doc_count,
            "average_price": self.average_price,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "median_price": self.median_price,
        }


@dataclass
class HistogramResponse:
    """API response for a datapoints histogram query."""

    scope: str
    contract: str
    table: str
    interval: str
    time_range: TimeWindow
    total_documents: int = 0
    histogram: list[HistogramBucket] = field(default_factory=list)
    query_time_ms: int = 0

    def to_dict(self) -> dict:
        """Serialize to the JSON response shape."""
        return {
            "query_time_ms": self.query_time_ms,
            "scope": self.scope,
            "contract": self.contract,
            "table": self.table,
            "interval": self.interval,
            "time_range": self.time_range.to_dict(),
            "total_documents": self.total_documents,
            "histogram": [bucket.to_dict() for bucket in self.histogram],
        }
