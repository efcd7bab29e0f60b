"""Reshape raw store search results into the histogram response."""

from typing import Any

from oracle_api.models import HistogramBucket

STATISTICS = ("average_price", "min_price", "max_price", "median_price")


def total_documents(result: dict[str, Any]) -> int:
    """Extract the match total from a search result.

    Accepts both the bare integer form and the {"value": n, "relation": ...}
    object form. Returns 0 when the store reports no total.
    """
    total = (result.get("hits") or {}).get("total")
    if isinstance(total, dict):
        total = total.get("value")
    return int(total) if total is not None else 0


def _statistic(bucket: dict[str, Any], name: str) -> float | None:
    aggregation = bucket.get(name)
    if not isinstance(aggregation, dict):
        return None
    return aggregation.get("value")


def shape_bucket(bucket: dict[str, Any]) -> HistogramBucket:
    """Convert one raw date_histogram bucket, nulling missing statistics."""
    timestamp = bucket.get("key_as_string") or bucket.get("key")
    return HistogramBucket(
        timestamp=timestamp,
        doc_count=int(bucket.get("doc_count", 0)),
        **{name: _statistic(bucket, name) for name in STATISTICS},
    )


def shape_histogram(result: dict[str, Any]) -> list[HistogramBucket]:
    """Convert all histogram buckets in store order. No buckets yields []."""
    aggregations = result.get("aggregations") or {}
    buckets = (aggregations.get("histogram") or {}).get("buckets") or []
    return [shape_bucket(bucket) for bucket in buckets]
