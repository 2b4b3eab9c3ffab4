from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def load(self) -> Sequence[Subject]:
        """Persisted subjects, or an empty sequence when nothing usable is stored."""
        raise NotImplementedError

    def save(self, subjects: Sequence[Subject]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
