"""Shared test fixtures for the oracle datapoints API."""

import copy
from unittest.mock import AsyncMock

import pytest

from oracle_api.config import (
    AppSettings,
    ChainSettings,
    OracleConfig,
    OracleSettings,
    StoreSettings,
)

# Mimics an Elasticsearch 7+ response for a 1h calendar histogram
SAMPLE_SEARCH_RESULT = {
    "took": 4,
    "timed_out": False,
    "hits": {"total": {"value": 5, "relation": "eq"}, "max_score": None, "hits": []},
    "aggregations": {
        "histogram": {
            "buckets": [
                {
                    "key_as_string": "2024-01-01T00:00:00.000Z",
                    "key": 1704067200000,
                    "doc_count": 3,
                    "average_price": {"value": 2150.0},
                    "min_price": {"value": 2100.0},
                    "max_price": {"value": 2200.0},
                    "median_price": {"value": 2148.0},
                },
                {
                    "key_as_string": "2024-01-01T01:00:00.000Z",
                    "key": 1704070800000,
                    "doc_count": 0,
                    "average_price": {"value": None},
                    "min_price": {"value": None},
                    "max_price": {"value": None},
                    "median_price": {"value": None},
                },
                {
                    "key_as_string": "2024-01-01T02:00:00.000Z",
                    "key": 1704074400000,
                    "doc_count": 2,
                    "average_price": {"value": 2205.5},
                    "min_price": {"value": 2201.0},
                    "max_price": {"value": 2210.0},
                    "median_price": {"value": 2204.0},
                },
            ]
        }
    },
}


@pytest.fixture
def oracle_config() -> OracleConfig:
    """Default delphioracle/datapoints configuration."""
    return OracleConfig()


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults and no oracle overrides."""
    return AppSettings(
        log_level="DEBUG",
        oracle=OracleSettings(contract=None, table=None),
        chain=ChainSettings(name="telos"),
        store=StoreSettings(url="http://store.test:9200"),
    )


@pytest.fixture
def sample_search_result() -> dict:
    """A fresh copy of SAMPLE_SEARCH_RESULT, safe to mutate."""
    return copy.deepcopy(SAMPLE_SEARCH_RESULT)


@pytest.fixture
def mock_store(sample_search_result: dict) -> AsyncMock:
    """Mock DocumentStore returning the sample search result."""
    store = AsyncMock()
    store.search = AsyncMock(return_value=sample_search_result)
    return store
