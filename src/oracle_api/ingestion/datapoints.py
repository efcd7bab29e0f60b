"""Delta transform for oracle datapoints rows.

Raw deltas carry the decoded table row under "data". Rows with a value,
median and owner are moved to "@<table>" with numeric fields as integers,
matching the long mappings declared for them.
"""

from typing import Any

from oracle_api.config import OracleConfig
from oracle_api.ingestion.registry import Delta, DeltaHandler, DeltaTransform


def datapoints_mappings(table: str) -> dict[str, Any]:
    """Index mapping for the derived "@<table>" object on delta documents."""
    return {
        "delta": {
            f"@{table}": {
                "properties": {
                    "value": {"type": "long"},
                    "owner": {"type": "keyword"},
                    "median": {"type": "long"},
                }
            }
        }
    }


def transform_datapoint(delta: Delta, table: str) -> bool:
    """Rewrite one delta in place. Returns True if it was rewritten.

    Deltas missing any of value/median/owner are left untouched.
    """
    data = delta.get("data") or {}
    value, median, owner = data.get("value"), data.get("median"), data.get("owner")
    if not (value and median and owner):
        return False
    delta[f"@{table}"] = {
        "owner": owner,
        "value": int(value),
        "median": int(median),
    }
    del delta["data"]
    return True


def make_datapoints_transform(table: str) -> DeltaTransform:
    async def _handle(delta: Delta) -> None:
        transform_datapoint(delta, table)

    return _handle


def datapoints_handler(config: OracleConfig) -> DeltaHandler:
    """Build the DeltaHandler for the configured oracle contract table."""
    return DeltaHandler(
        contract=config.contract,
        table=config.table,
        handler=make_datapoints_transform(config.table),
        mappings=datapoints_mappings(config.table),
    )
