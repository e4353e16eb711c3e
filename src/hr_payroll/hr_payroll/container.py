from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_QUERY_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .salary.service import SalaryService
from .stats.mysql_stats_repository import MySQLStatsRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    stats_repo: MySQLStatsRepository
    salaries_repo: MySQLSalaryRepository

    salary_service: SalaryService

    def close(self) -> None:
        self.conn.close()


def build_container(*, db_config: dict, query_workers: int = DEFAULT_QUERY_WORKERS) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    stats_repo = MySQLStatsRepository(conn)
    salaries_repo = MySQLSalaryRepository(conn)

    salary_service = SalaryService(
        employees_repo,
        attendance_repo,
        stats_repo,
        salaries_repo,
        query_workers=query_workers,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        salaries_repo=salaries_repo,
        salary_service=salary_service,
    )
