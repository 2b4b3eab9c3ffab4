from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import week_key
from .base import BucketStrategy


class WeeklyStrategy(BucketStrategy):
    """Monday-to-Sunday weeks."""

    def key(self, ts: datetime) -> str:
        return week_key(ts)
