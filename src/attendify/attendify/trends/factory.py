from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import TrendGranularity
from .strategies.base import BucketStrategy
from .strategies.daily_strategy import DailyStrategy
from .strategies.monthly_strategy import MonthlyStrategy
from .strategies.weekly_strategy import WeeklyStrategy


@dataclass
class TrendStrategyFactory:
    """Factory Pattern: choose the bucketing strategy for a trend granularity."""

    def for_granularity(self, granularity: TrendGranularity | str) -> BucketStrategy:
        granularity = TrendGranularity(granularity)
        if granularity == TrendGranularity.DAILY:
            return DailyStrategy()
        if granularity == TrendGranularity.MONTHLY:
            return MonthlyStrategy()
        return WeeklyStrategy()
