"""Oracle API routes: readiness message and datapoints histogram."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from oracle_api.exceptions import InvalidTimeWindowError
from oracle_api.logging import bind_request_context, get_logger
from oracle_api.models import RawQuery
from oracle_api.query.pipeline import QueryPipeline

log = get_logger(__name__)

router = APIRouter()


@router.get("/v2/history/get_oracle_datapoints")
async def get_oracle_datapoints() -> JSONResponse:
    """Readiness message for the oracle plugin."""
    return JSONResponse(content={"message": "Delphioracle API is running!"})


@router.get("/v2/oracle/get_datapoints_histogram")
async def get_datapoints_histogram(
    request: Request,
    scope: str | None = None,
    interval: str | None = None,
    after: str | None = None,
    before: str | None = None,
    size: int | None = Query(default=None, ge=0),
) -> JSONResponse:
    """Time-bucketed price statistics for one oracle scope.

    Query params:
        scope: Oracle scope (asset pair), default "tlosusd".
        interval: Bucket interval token, default "1h". Unknown tokens use the default.
        after: Window start (ISO 8601), default 24 hours before now.
        before: Window end (ISO 8601), default now.
        size: Raw matching documents to return alongside the buckets, default 0.

    Returns:
        JSON histogram response; 400 on an invalid window, 500 on any other failure.
    """
    pipeline: QueryPipeline = request.app.state.pipeline
    raw = RawQuery(scope=scope, interval=interval, after=after, before=before, size=size)
    bind_request_context(route="get_datapoints_histogram", scope=scope, interval=interval)

    try:
        response = await pipeline.run(raw)
    except InvalidTimeWindowError as e:
        log.warning("invalid_time_window", after=after, before=before, error=str(e))
        return JSONResponse(
            content={"error": "Bad request", "message": str(e)}, status_code=400
        )
    except Exception as e:
        log.exception("get_datapoints_histogram_failed", error=str(e))
        return JSONResponse(
            content={"error": "Internal server error", "message": str(e)},
            status_code=500,
        )

    return JSONResponse(content=response.to_dict())
