"""Tests for DeltaHandlerRegistry."""

from unittest.mock import AsyncMock

import pytest

from oracle_api.ingestion.registry import DeltaHandler, DeltaHandlerRegistry


def _handler(contract: str = "delphioracle", table: str = "datapoints", mappings=None):
    return DeltaHandler(
        contract=contract,
        table=table,
        handler=AsyncMock(),
        mappings=mappings or {},
    )


def test_handlers_for_filters_by_contract_and_table():
    registry = DeltaHandlerRegistry()
    first = _handler()
    other_table = _handler(table="stats")
    other_contract = _handler(contract="eosio.token")
    second = _handler()
    for h in (first, other_table, other_contract, second):
        registry.register(h)

    assert registry.handlers_for("delphioracle", "datapoints") == [first, second]
    assert registry.handlers_for("delphioracle", "stats") == [other_table]
    assert registry.handlers_for("nobody", "datapoints") == []
    assert len(registry) == 4


def test_mappings_merge_per_index_type():
    registry = DeltaHandlerRegistry()
    registry.register(_handler(mappings={"delta": {"@datapoints": {"properties": {}}}}))
    registry.register(
        _handler(table="stats", mappings={"delta": {"@stats": {"properties": {}}}})
    )

    assert registry.mappings() == {
        "delta": {
            "@datapoints": {"properties": {}},
            "@stats": {"properties": {}},
        }
    }


@pytest.mark.asyncio
async def test_dispatch_runs_matching_handlers_only():
    registry = DeltaHandlerRegistry()
    matching = _handler()
    unrelated = _handler(table="stats")
    registry.register(matching)
    registry.register(unrelated)

    delta = {"code": "delphioracle", "table": "datapoints", "data": {}}
    returned = await registry.dispatch(delta)

    assert returned is delta
    matching.handler.assert_awaited_once_with(delta)
    unrelated.handler.assert_not_awaited()


@pytest.mark.asyncio
async def test_dispatch_without_code_is_noop():
    registry = DeltaHandlerRegistry()
    h = _handler()
    registry.register(h)

    await registry.dispatch({"data": {}})

    h.handler.assert_not_awaited()
