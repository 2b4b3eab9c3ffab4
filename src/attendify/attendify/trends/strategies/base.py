from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class BucketStrategy(ABC):
    """Strategy Pattern: map a record timestamp to its trend bucket label."""

    @abstractmethod
    def key(self, ts: datetime) -> str:
        raise NotImplementedError
