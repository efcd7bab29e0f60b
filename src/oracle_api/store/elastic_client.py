"""Elasticsearch document store over httpx.

Talks to the `_search` REST endpoint directly. One request per search;
no retries. Timeouts come from StoreSettings.
"""

from typing import Any

import httpx

from oracle_api.config import StoreSettings
from oracle_api.exceptions import StoreError
from oracle_api.logging import get_logger
from oracle_api.store.client import DocumentStore

logger = get_logger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Best-effort human-readable reason from an error response.

    Elasticsearch errors look like {"error": {"type": ..., "reason": ...},
    "status": 400}; older nodes and proxies may send a plain string or
    non-JSON text instead.
    """
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        reason = error.get("reason")
        root_causes = error.get("root_cause") or []
        if not reason and root_causes and isinstance(root_causes[0], dict):
            reason = root_causes[0].get("reason")
        error_type = error.get("type")
        if reason and error_type:
            return f"{error_type}: {reason}"
        if reason or error_type:
            return str(reason or error_type)
    elif error:
        return str(error)
    return response.text or f"HTTP {response.status_code}"


class ElasticsearchStore(DocumentStore):
    """Concrete document store backed by an Elasticsearch cluster."""

    def __init__(self, settings: StoreSettings) -> None:
        self._settings = settings
        auth = None
        if settings.username:
            auth = httpx.BasicAuth(settings.username, settings.password.get_secret_value())
        self._client = httpx.AsyncClient(
            base_url=settings.url.rstrip("/"),
            auth=auth,
            timeout=settings.timeout_seconds,
            verify=settings.verify_tls,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "ElasticsearchStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def search(self, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST the body to /<index>/_search and return the decoded response."""
        try:
            response = await self._client.post(f"/{index}/_search", json=body)
        except httpx.HTTPError as e:
            logger.error("store_request_failed", index=index, error=str(e))
            raise StoreError(f"Search request failed: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.error(
                "store_search_rejected",
                index=index,
                status=response.status_code,
                error=message,
            )
            raise StoreError(message, status_code=response.status_code)

        try:
            result = response.json()
        except ValueError as e:
            raise StoreError("Search response was not valid JSON") from e

        logger.debug("store_search_completed", index=index, took_ms=result.get("took"))
        return result

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
