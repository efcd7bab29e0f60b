"""Search request construction for datapoints histogram queries."""

from typing import Any

from oracle_api.models import AggregationRequest, IntervalKind, QueryParameters

TIMESTAMP_FIELD = "@timestamp"
DELTA_INDEX_SUFFIX = "-delta-*"


def delta_index_pattern(chain: str) -> str:
    """Index pattern covering every delta index of a chain."""
    return chain + DELTA_INDEX_SUFFIX


def _date_histogram(params: QueryParameters) -> dict[str, Any]:
    if params.interval.kind is IntervalKind.CALENDAR:
        interval_field = "calendar_interval"
    else:
        interval_field = "fixed_interval"
    return {"field": TIMESTAMP_FIELD, interval_field: params.interval.token}


def _price_aggregations(table: str) -> dict[str, Any]:
    # Delta documents carry the decoded row under "@<table>"
    value_field = f"@{table}.value"
    median_field = f"@{table}.median"
    return {
        "average_price": {"avg": {"field": value_field}},
        "min_price": {"min": {"field": value_field}},
        "max_price": {"max": {"field": value_field}},
        "median_price": {"avg": {"field": median_field}},
    }


def _filters(params: QueryParameters) -> list[dict[str, Any]]:
    return [
        {
            "range": {
                TIMESTAMP_FIELD: {
                    "format": "strict_date_optional_time",
                    "gte": params.window.start,
                    "lte": params.window.end,
                }
            }
        },
        {"term": {"code": {"value": params.contract}}},
        {"term": {"table": {"value": params.table}}},
        {"term": {"scope": {"value": params.scope}}},
    ]


def build_histogram_request(params: QueryParameters, chain: str) -> AggregationRequest:
    """Build the date-histogram search for one query.

    The result is a pure function of its inputs: equal parameters always
    produce equal requests.
    """
    body = {
        "aggs": {
            "histogram": {
                "date_histogram": _date_histogram(params),
                "aggs": _price_aggregations(params.table),
            }
        },
        "size": params.size,
        "query": {"bool": {"must": _filters(params)}},
    }
    return AggregationRequest(index=delta_index_pattern(chain), body=body)
