from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..analytics.model import AttendanceTally


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid.

    ``attendance`` is None both for padding days of adjacent months and for
    days of the month with no records at all.
    """

    date: date
    day_of_month: int
    is_current_month: bool
    attendance: Optional[AttendanceTally] = None
