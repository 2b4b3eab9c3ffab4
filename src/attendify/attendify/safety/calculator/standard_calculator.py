from __future__ import annotations

import math

from ...core.constants import SAFE_ATTENDANCE_PERCENTAGE
from ...core.enums import SafetyStatus
from ..model import Projection, SafetyInfo
from .base import SafetyCalculator


class StandardSafetyCalculator(SafetyCalculator):
    """75% rule.

    bunkable: largest k with present / (total + k) >= 0.75, present fixed.
    needed: smallest n with (present + n) / (total + n) >= 0.75.
    """

    def safety_info(self, present: int, total: int) -> SafetyInfo:
        if total == 0:
            return SafetyInfo(status=SafetyStatus.NOT_APPLICABLE)
        percentage = present / total * 100
        if percentage >= SAFE_ATTENDANCE_PERCENTAGE:
            bunkable = math.floor((4 * present - 3 * total) / 3)
            return SafetyInfo(status=SafetyStatus.SAFE, percentage=percentage, bunkable=bunkable)
        needed = math.ceil(3 * total - 4 * present)
        return SafetyInfo(status=SafetyStatus.UNSAFE, percentage=percentage, needed=needed)

    def what_if(self, present: int, total: int, future_present: int, future_absent: int) -> Projection:
        projected_present = present + future_present
        projected_total = total + future_present + future_absent
        percentage = projected_present / projected_total * 100 if projected_total > 0 else 0.0
        return Projection(present=projected_present, total=projected_total, percentage=percentage)
