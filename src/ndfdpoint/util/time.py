from __future__ import annotations

from datetime import UTC, datetime, timedelta

from dateutil import parser as dtparser

from ..errors import InvalidInputError
from ..models import ForecastWindow


def to_utc(value: int | float | str | datetime) -> datetime:
    if isinstance(value, bool):
        raise InvalidInputError(f"Unsupported reference time: {value!r}")
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        try:
            dt = datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidInputError(f"Reference time out of range: {value!r}") from exc
    elif isinstance(value, str):
        try:
            dt = dtparser.isoparse(value.strip())
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Unparseable reference time: {value!r}") from exc
    else:
        raise InvalidInputError(f"Unsupported reference time: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def forecast_window(reference: datetime, hours: int = 1) -> ForecastWindow:
    start = to_utc(reference)
    return ForecastWindow(start=start, end=start + timedelta(hours=hours))


def format_iso(dt: datetime) -> str:
    return to_utc(dt).isoformat(timespec="seconds")
