from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import Projection, SafetyInfo


class SafetyCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance policy)."""

    @abstractmethod
    def safety_info(self, present: int, total: int) -> SafetyInfo:
        raise NotImplementedError

    @abstractmethod
    def what_if(self, present: int, total: int, future_present: int, future_absent: int) -> Projection:
        raise NotImplementedError
