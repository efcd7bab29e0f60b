"""Registry of per-table delta transforms for the ingestion pipeline.

Plugins register a DeltaHandler keyed by (contract, table) together with the
index mapping for the fields their transform adds. The ingestion side asks
the registry which handlers apply to a delta and which mappings to install.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from oracle_api.logging import get_logger

logger = get_logger(__name__)

Delta = dict[str, Any]
DeltaTransform = Callable[[Delta], Awaitable[None]]


@dataclass(frozen=True)
class DeltaHandler:
    """A transform applied in place to every delta of one contract table."""

    contract: str
    table: str
    handler: DeltaTransform
    mappings: dict[str, Any] = field(default_factory=dict)


class DeltaHandlerRegistry:
    """Holds registered delta handlers and dispatches deltas to them."""

    def __init__(self) -> None:
        self._handlers: list[DeltaHandler] = []

    def register(self, handler: DeltaHandler) -> None:
        """Add a handler. Several handlers may share a (contract, table) key."""
        self._handlers.append(handler)
        logger.info(
            "delta_handler_registered",
            contract=handler.contract,
            table=handler.table,
        )

    def handlers_for(self, contract: str, table: str) -> list[DeltaHandler]:
        """Handlers registered for the given contract table, in registration order."""
        return [
            h for h in self._handlers if h.contract == contract and h.table == table
        ]

    def mappings(self) -> dict[str, Any]:
        """Merge the mapping declarations of all handlers, grouped by index type."""
        merged: dict[str, Any] = {}
        for h in self._handlers:
            for index_type, properties in h.mappings.items():
                merged.setdefault(index_type, {}).update(properties)
        return merged

    async def dispatch(self, delta: Delta) -> Delta:
        """Run every handler matching the delta's code/table over it, in place."""
        for h in self.handlers_for(delta.get("code", ""), delta.get("table", "")):
            await h.handler(delta)
        return delta

    def __len__(self) -> int:
        return len(self._handlers)
