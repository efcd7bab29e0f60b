"""Interval token classification.

The store needs calendar units (month, quarter...) and fixed durations in
different request fields, so every token is classified before a request is
built. Unknown tokens fall back to the default rather than failing the query.
"""

from oracle_api.models import IntervalKind, IntervalSpec

# Single-unit calendar intervals accepted by date_histogram.calendar_interval
CALENDAR_INTERVALS: tuple[str, ...] = ("1m", "1h", "1d", "1w", "1M", "1q", "1y")

# Multiples accepted by date_histogram.fixed_interval, 1 minute to 2 weeks
FIXED_INTERVALS: tuple[str, ...] = (
    "1m", "2m", "5m", "10m", "15m", "20m", "30m",
    "1h", "2h", "3h", "4h", "5h", "6h", "8h", "12h",
    "1d", "2d", "3d", "7d",
    "1w", "2w",
)

DEFAULT_INTERVAL = IntervalSpec(token="1h", kind=IntervalKind.CALENDAR)

# Calendar entries are applied last so tokens in both lists classify as calendar.
_KIND_BY_TOKEN: dict[str, IntervalKind] = {
    **{token: IntervalKind.FIXED for token in FIXED_INTERVALS},
    **{token: IntervalKind.CALENDAR for token in CALENDAR_INTERVALS},
}


def classify_interval(token: str | None) -> IntervalSpec:
    """Map an interval token to a validated IntervalSpec.

    Empty, absent and unrecognised tokens all resolve to DEFAULT_INTERVAL.
    """
    if not token:
        return DEFAULT_INTERVAL
    kind = _KIND_BY_TOKEN.get(token)
    if kind is None:
        return DEFAULT_INTERVAL
    return IntervalSpec(token=token, kind=kind)
