from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, ShiftInfo
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        employee_name: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, employee_name, department_name, date,
                       shift_total_hour, shift_total_minutes, total_km
                FROM attendance
                WHERE employee_id=%s AND employee_name=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC, attendance_id ASC
                """,
                (employee_id, employee_name, start, end),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    employee_id=str(r["employee_id"]),
                    employee_name=r["employee_name"],
                    department_name=r["department_name"],
                    date=r["date"],
                    shift_info=ShiftInfo(
                        total_hour=r.get("shift_total_hour"),
                        total_minutes=r.get("shift_total_minutes"),
                    ),
                    total_km=r.get("total_km"),
                )
                for r in rows
            ]
