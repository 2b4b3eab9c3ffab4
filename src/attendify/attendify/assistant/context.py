"""Context handed to the external AI assistant.

Only data shaping lives here; prompting and model calls belong to the
assistant collaborator itself.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.constants import SAFE_ATTENDANCE_PERCENTAGE
from ..subjects.model import Subject


@dataclass(frozen=True)
class AssistantContext:
    summaries: list[dict] = field(default_factory=list)
    subject_name: Optional[str] = None
    notes: str = ""

    def render(self) -> str:
        text = f"Here is the user's current attendance data:\n{json.dumps(self.summaries, indent=2)}\n\n"
        if self.notes:
            text += f"Notes for {self.subject_name}:\n---\n{self.notes}\n---\n\n"
        return text


def subject_summaries(subjects: Sequence[Subject]) -> list[dict]:
    return [
        {
            "name": s.name,
            "percentage": round(s.percentage, 1),
            "status": "Needs attention" if s.total > 0 and s.percentage < SAFE_ATTENDANCE_PERCENTAGE else "Safe",
        }
        for s in subjects
    ]


def notes_context(subject: Subject) -> str:
    return "\n\n---\n\n".join(f"Note Title: {n.title}\n\n{n.content}" for n in subject.notes)


def build_context(subjects: Sequence[Subject], subject_id: Optional[str] = None) -> AssistantContext:
    summaries = subject_summaries(subjects)
    subject = next((s for s in subjects if s.id == subject_id), None) if subject_id else None
    if not subject:
        return AssistantContext(summaries=summaries)
    return AssistantContext(summaries=summaries, subject_name=subject.name, notes=notes_context(subject))
