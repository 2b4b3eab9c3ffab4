from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import MONTH_ABBREVIATIONS
from ..core.enums import Weekday


def now_local() -> datetime:
    """Current local time.

    Clock-dependent operations take a `now=` keyword and fall back to this.
    """
    return datetime.now()


def to_epoch_millis(ts: datetime) -> int:
    return int(round(ts.timestamp() * 1000))


def from_epoch_millis(value: int | float) -> datetime:
    """Epoch milliseconds to a naive local datetime.

    Raises ValueError for values the platform clock cannot represent.
    """
    try:
        return datetime.fromtimestamp(float(value) / 1000)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Epoch milliseconds out of range: {value!r}") from e


def weekday_of(ts: datetime | date) -> Weekday:
    return Weekday.from_index(ts.weekday())


def week_start(ts: datetime | date) -> date:
    """Monday of the week containing ``ts``."""
    d = ts.date() if isinstance(ts, datetime) else ts
    return d - timedelta(days=d.weekday())


def month_start(ts: datetime | date) -> date:
    return date(ts.year, ts.month, 1)


def previous_month_start(ts: datetime | date) -> date:
    if ts.month == 1:
        return date(ts.year - 1, 12, 1)
    return date(ts.year, ts.month - 1, 1)


def start_of_day(d: date) -> datetime:
    return datetime(d.year, d.month, d.day)


def day_key(ts: datetime | date) -> str:
    """Calendar date bucket, e.g. ``2026-10-19``."""
    return ts.strftime("%Y-%m-%d")


def week_key(ts: datetime | date) -> str:
    """Monday-to-Sunday bucket, e.g. ``2026-10-19 to 2026-10-25``."""
    start = week_start(ts)
    end = start + timedelta(days=6)
    return f"{day_key(start)} to {day_key(end)}"


def month_key(ts: datetime | date) -> str:
    """Month bucket, e.g. ``Oct 2026``."""
    return f"{MONTH_ABBREVIATIONS[ts.month - 1]} {ts.year}"
