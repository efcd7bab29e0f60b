"""Tests for histogram search request construction."""

from oracle_api.models import IntervalKind, IntervalSpec, QueryParameters, TimeWindow
from oracle_api.query.builder import build_histogram_request, delta_index_pattern


def _params(**overrides) -> QueryParameters:
    values = dict(
        scope="tlosusd",
        contract="delphioracle",
        table="datapoints",
        interval=IntervalSpec("1h", IntervalKind.CALENDAR),
        window=TimeWindow("2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"),
        size=0,
    )
    values.update(overrides)
    return QueryParameters(**values)


def test_index_pattern_is_chain_scoped():
    assert delta_index_pattern("telos") == "telos-delta-*"
    assert build_histogram_request(_params(), "wax").index == "wax-delta-*"


def test_calendar_interval_uses_calendar_field():
    body = build_histogram_request(_params(), "telos").body

    histogram = body["aggs"]["histogram"]["date_histogram"]
    assert histogram == {"field": "@timestamp", "calendar_interval": "1h"}


def test_fixed_interval_uses_fixed_field():
    params = _params(interval=IntervalSpec("15m", IntervalKind.FIXED))
    body = build_histogram_request(params, "telos").body

    histogram = body["aggs"]["histogram"]["date_histogram"]
    assert histogram == {"field": "@timestamp", "fixed_interval": "15m"}


def test_price_statistics_reference_table_fields():
    aggs = build_histogram_request(_params(), "telos").body["aggs"]["histogram"]["aggs"]

    assert aggs == {
        "average_price": {"avg": {"field": "@datapoints.value"}},
        "min_price": {"min": {"field": "@datapoints.value"}},
        "max_price": {"max": {"field": "@datapoints.value"}},
        "median_price": {"avg": {"field": "@datapoints.median"}},
    }


def test_filters_cover_window_contract_table_and_scope():
    body = build_histogram_request(_params(scope="tlosbtc"), "telos").body

    must = body["query"]["bool"]["must"]
    assert must[0] == {
        "range": {
            "@timestamp": {
                "format": "strict_date_optional_time",
                "gte": "2024-01-01T00:00:00Z",
                "lte": "2024-01-02T00:00:00Z",
            }
        }
    }
    assert {"term": {"code": {"value": "delphioracle"}}} in must
    assert {"term": {"table": {"value": "datapoints"}}} in must
    assert {"term": {"scope": {"value": "tlosbtc"}}} in must
    assert len(must) == 4


def test_size_is_passed_through():
    assert build_histogram_request(_params(), "telos").body["size"] == 0
    assert build_histogram_request(_params(size=25), "telos").body["size"] == 25


def test_custom_table_changes_field_paths():
    body = build_histogram_request(_params(table="prices"), "telos").body

    aggs = body["aggs"]["histogram"]["aggs"]
    assert aggs["average_price"]["avg"]["field"] == "@prices.value"
    assert aggs["median_price"]["avg"]["field"] == "@prices.median"


def test_same_parameters_build_equal_requests():
    assert build_histogram_request(_params(), "telos") == build_histogram_request(
        _params(), "telos"
    )
