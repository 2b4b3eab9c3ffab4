from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrendSeries:
    """Parallel label/percentage sequences, labels in chronological first-seen order."""

    labels: tuple[str, ...]
    percentages: tuple[float, ...]

    @property
    def is_empty(self) -> bool:
        return not self.labels
