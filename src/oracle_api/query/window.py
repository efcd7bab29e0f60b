"""Time window resolution and canonical timestamp formatting."""

from datetime import datetime, timedelta, timezone

from oracle_api.exceptions import InvalidTimeWindowError
from oracle_api.models import TimeWindow

DEFAULT_LOOKBACK = timedelta(hours=24)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 date or date-time into an aware UTC datetime.

    Naive values are taken as UTC.

    Raises:
        InvalidTimeWindowError: If the value is not a recognisable timestamp.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        # Offsets near year 1 or 9999 can shift the instant out of range
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise InvalidTimeWindowError(f"Invalid timestamp: {value!r}") from e


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as canonical UTC text, e.g. '2024-01-01T00:00:00Z'.

    Milliseconds are included only when non-zero, so whole-second ISO inputs
    come back unchanged.
    """
    moment = moment.astimezone(timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    millis = moment.microsecond // 1000
    if millis:
        text += f".{millis:03d}"
    return text + "Z"


def resolve_window(
    after: str | None,
    before: str | None,
    now: datetime,
) -> TimeWindow:
    """Resolve the query's time window.

    Missing `after` defaults to now - 24h and missing `before` to now.

    Raises:
        InvalidTimeWindowError: On an unparseable bound or when start is after end.
    """
    start = parse_timestamp(after) if after else now - DEFAULT_LOOKBACK
    end = parse_timestamp(before) if before else now
    if start > end:
        raise InvalidTimeWindowError(
            f"Invalid time window: after ({format_timestamp(start)}) "
            f"is later than before ({format_timestamp(end)})"
        )
    return TimeWindow(start=format_timestamp(start), end=format_timestamp(end))
