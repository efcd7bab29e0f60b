"""Datapoints histogram query pipeline.

One run() per inbound request: resolve parameters, classify the interval,
build the search, execute it against the store, and shape the result.
Holds only immutable configuration, so a single instance serves
concurrent requests.
"""

import time
from collections.abc import Callable
from datetime import datetime, timezone

from oracle_api.config import OracleConfig
from oracle_api.logging import get_logger
from oracle_api.models import HistogramResponse, QueryParameters, RawQuery
from oracle_api.query.builder import build_histogram_request
from oracle_api.query.intervals import classify_interval
from oracle_api.query.shaping import shape_histogram, total_documents
from oracle_api.query.window import resolve_window
from oracle_api.store.client import DocumentStore

logger = get_logger(__name__)

DEFAULT_SCOPE = "tlosusd"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class QueryPipeline:
    """Turns raw histogram queries into shaped responses.

    Args:
        store: Document store to search.
        config: Static contract/table configuration.
        chain: Chain name used to select the delta index family.
        clock: Source of the current time; defaults to UTC now.
    """

    def __init__(
        self,
        store: DocumentStore,
        config: OracleConfig,
        chain: str,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store = store
        self._config = config
        self._chain = chain
        self._clock = clock

    def resolve(self, raw: RawQuery) -> QueryParameters:
        """Apply defaults and validation to a raw query.

        Raises:
            InvalidTimeWindowError: On an unparseable or inverted window.
        """
        return QueryParameters(
            scope=raw.scope or DEFAULT_SCOPE,
            contract=self._config.contract,
            table=self._config.table,
            interval=classify_interval(raw.interval),
            window=resolve_window(raw.after, raw.before, now=self._clock()),
            size=raw.size or 0,
        )

    async def run(self, raw: RawQuery) -> HistogramResponse:
        """Execute one histogram query end to end.

        Store errors propagate to the caller unchanged.
        """
        started = time.perf_counter()
        params = self.resolve(raw)
        request = build_histogram_request(params, self._chain)

        logger.debug(
            "histogram_query_built",
            index=request.index,
            interval=params.interval.token,
            interval_kind=params.interval.kind.value,
            start=params.window.start,
            end=params.window.end,
        )

        result = await self._store.search(request.index, request.body)

        response = HistogramResponse(
            scope=params.scope,
            contract=params.contract,
            table=params.table,
            interval=params.interval.token,
            time_range=params.window,
            total_documents=total_documents(result),
            histogram=shape_histogram(result),
        )
        response.query_time_ms = int((time.perf_counter() - started) * 1000)

        logger.info(
            "histogram_query_completed",
            buckets=len(response.histogram),
            total_documents=response.total_documents,
            query_time_ms=response.query_time_ms,
        )
        return response
