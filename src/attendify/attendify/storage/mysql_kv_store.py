from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)


class MySQLKeyValueStore:
    """Key-value collaborator backed by the ``kv_store`` table (see ``bootstrap``)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT v FROM kv_store WHERE k=%s", (key,))
            r = fetchone(cur)
        if not r:
            return None
        try:
            return json.loads(r["v"])
        except ValueError:
            logger.warning("Ignoring unreadable kv_store value for key %r", key)
            return None

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(k, v)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, payload),
            )

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE k=%s", (key,))
