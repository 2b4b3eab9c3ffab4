from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import STORAGE_KEY
from ..storage.kv_store import KeyValueStore
from .mapper import subjects_from_json, subjects_to_json
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class KeyValueSubjectRepository(SubjectRepository):
    """Whole-snapshot persistence: the subject array lives under one key."""

    def __init__(self, store: KeyValueStore, *, key: str = STORAGE_KEY):
        self._store = store
        self._key = key

    def load(self) -> Sequence[Subject]:
        raw = self._store.get(self._key)
        if raw is None:
            return []
        try:
            return subjects_from_json(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding malformed snapshot under %r: %s", self._key, e)
            return []

    def save(self, subjects: Sequence[Subject]) -> None:
        self._store.set(self._key, subjects_to_json(subjects))

    def clear(self) -> None:
        self._store.remove(self._key)
