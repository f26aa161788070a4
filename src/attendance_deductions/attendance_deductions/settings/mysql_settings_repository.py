from __future__ import annotations

import json
from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT setting_value FROM system_settings WHERE setting_key=%s",
                (key,),
            )
            r = fetchone(cur)
            if not r:
                return None
            # Raises ValueError on a corrupted value; callers decide the fallback.
            return json.loads(r["setting_value"])

    def save(self, key: str, value: dict[str, Any], category: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO system_settings(setting_key, setting_value, category)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value), category=VALUES(category)
                """,
                (key, json.dumps(value, ensure_ascii=False), category),
            )

