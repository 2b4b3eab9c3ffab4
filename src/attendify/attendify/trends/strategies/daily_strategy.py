from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import day_key
from .base import BucketStrategy


class DailyStrategy(BucketStrategy):
    """One bucket per calendar day (YYYY-MM-DD)."""

    def key(self, ts: datetime) -> str:
        return day_key(ts)
