from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import month_key
from .base import BucketStrategy


class MonthlyStrategy(BucketStrategy):
    def key(self, ts: datetime) -> str:
        return month_key(ts)
