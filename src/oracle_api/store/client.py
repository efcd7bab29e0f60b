"""Abstract document store interface.

Defines the contract the query pipeline depends on, keeping
Elasticsearch transport details isolated in the concrete implementation.
"""

from abc import ABC, abstractmethod
from typing import Any


class DocumentStore(ABC):
    """Abstract base class for search-capable document stores."""

    @abstractmethod
    async def search(self, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """Run a search with aggregations against an index or index pattern.

        Returns the decoded response, containing at least `hits.total` and,
        when aggregations were requested, an `aggregations` section.

        Raises:
            StoreError: If the store rejects the request or cannot be reached.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connections held by the client."""
        ...
