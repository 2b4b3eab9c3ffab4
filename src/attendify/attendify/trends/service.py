from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..analytics.model import AttendanceTally
from ..core.enums import AttendanceMark, TrendGranularity
from ..subjects.model import AttendanceRecord, Subject
from .factory import TrendStrategyFactory
from .model import TrendSeries


class TrendService:
    def __init__(self, *, strategy_factory: Optional[TrendStrategyFactory] = None):
        self._factory = strategy_factory or TrendStrategyFactory()

    def _group(self, history: Iterable[AttendanceRecord], granularity: TrendGranularity | str) -> TrendSeries:
        strategy = self._factory.for_granularity(granularity)
        buckets: dict[str, AttendanceTally] = {}
        for r in sorted(history, key=lambda item: item.timestamp):
            label = strategy.key(r.timestamp)
            buckets[label] = buckets.get(label, AttendanceTally()).add(r.status == AttendanceMark.PRESENT)
        return TrendSeries(
            labels=tuple(buckets),
            percentages=tuple(t.percentage for t in buckets.values()),
        )

    def trend(self, subject: Subject, granularity: TrendGranularity | str = TrendGranularity.WEEKLY) -> TrendSeries:
        return self._group(subject.history, granularity)

    def overall_trend(
        self,
        subjects: Sequence[Subject],
        granularity: TrendGranularity | str = TrendGranularity.WEEKLY,
    ) -> TrendSeries:
        """Trend of the combined history of every subject."""
        return self._group((r for s in subjects for r in s.history), granularity)
