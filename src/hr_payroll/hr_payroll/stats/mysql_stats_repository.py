from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MonthlyStats
from .repository import StatsRepository


class MySQLStatsRepository(StatsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_period(self, *, employee_id: str, employee_name: str, year: int, month: int) -> Optional[MonthlyStats]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, employee_name, year, month, attendance_total_times, attendance_overtime
                FROM monthly_stats
                WHERE employee_id=%s AND employee_name=%s AND year=%s AND month=%s
                """,
                (employee_id, employee_name, int(year), int(month)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlyStats(
                employee_id=str(r["employee_id"]),
                employee_name=r["employee_name"],
                year=int(r["year"]),
                month=int(r["month"]),
                attendance_total_times=r.get("attendance_total_times"),
                attendance_overtime=r.get("attendance_overtime"),
            )
