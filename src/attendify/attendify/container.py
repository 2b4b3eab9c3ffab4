from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType

from .analytics.service import AnalyticsService
from .attendance.service import AttendanceService
from .core.constants import STORAGE_KEY
from .heatmap.service import HeatmapService
from .safety.calculator.base import SafetyCalculator
from .safety.calculator.standard_calculator import StandardSafetyCalculator
from .schedules.service import ScheduleService
from .storage.bootstrap import apply_schema
from .storage.connection import DBConfig, DatabaseConnection
from .storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore
from .subjects.importer import TimetableImporter
from .subjects.kv_subject_repository import KeyValueSubjectRepository
from .subjects.service import SubjectStore
from .trends.service import TrendService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    subjects_repo: KeyValueSubjectRepository

    subject_store: SubjectStore
    timetable_importer: TimetableImporter
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    schedule_service: ScheduleService
    heatmap_service: HeatmapService
    trend_service: TrendService
    safety_calculator: SafetyCalculator


def build_kv_store(settings: ModuleType) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileKeyValueStore(getattr(settings, "DATA_FILE"))
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(settings: ModuleType, *, kv_store: KeyValueStore | None = None) -> Container:
    kv_store = kv_store or build_kv_store(settings)
    logger.info("Storage backend: %s", type(kv_store).__name__)

    subjects_repo = KeyValueSubjectRepository(kv_store, key=getattr(settings, "STORAGE_KEY", STORAGE_KEY))
    subject_store = SubjectStore(subjects_repo)

    schedule_service = ScheduleService(subject_store)

    return Container(
        kv_store=kv_store,
        subjects_repo=subjects_repo,
        subject_store=subject_store,
        timetable_importer=TimetableImporter(subject_store),
        attendance_service=AttendanceService(subject_store, schedule_service),
        analytics_service=AnalyticsService(subject_store),
        schedule_service=schedule_service,
        heatmap_service=HeatmapService(subject_store),
        trend_service=TrendService(),
        safety_calculator=StandardSafetyCalculator(),
    )
