from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SafetyStatus


@dataclass(frozen=True)
class SafetyInfo:
    status: SafetyStatus
    percentage: float = 0.0
    bunkable: Optional[int] = None
    needed: Optional[int] = None

    @property
    def message(self) -> str:
        if self.status == SafetyStatus.SAFE:
            return f"You can bunk {self.bunkable} more class(es)."
        if self.status == SafetyStatus.UNSAFE:
            return f"Attend the next {self.needed} class(es) to recover."
        return "Mark attendance to see stats"


@dataclass(frozen=True)
class Projection:
    present: int
    total: int
    percentage: float
