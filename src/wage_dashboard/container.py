from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .common.ids import IdGenerator
from .core.constants import DEFAULT_LANGUAGE, DEFAULT_REPORT_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .database.json_store import JsonFileStore
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .i18n.service import LocaleService
from .records.json_record_repository import JsonDailyRecordRepository
from .records.mysql_record_repository import MySQLDailyRecordRepository
from .records.repository import DailyRecordRepository
from .records.service import RecordService
from .reports.exporters import ReportExporterFactory
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.static_user_repository import StaticUserRepository


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    records_repo: DailyRecordRepository
    users_repo: UserRepository

    auth_service: AuthService
    employee_service: EmployeeService
    record_service: RecordService
    report_service: ReportService
    locale_service: LocaleService
    exporters: ReportExporterFactory

    conn: Optional[DatabaseConnection] = None


def _setting(settings: Any, name: str, default: Any = None) -> Any:
    return getattr(settings, name, default)


def build_container(settings: Any, *, id_generator: Optional[IdGenerator] = None) -> Container:
    backend = str(_setting(settings, "STORAGE_BACKEND", "json")).lower()
    conn: Optional[DatabaseConnection] = None

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(_setting(settings, "DB_CONFIG", {})))
        employees_repo: EmployeeRepository = MySQLEmployeeRepository(conn, id_generator=id_generator)
        records_repo: DailyRecordRepository = MySQLDailyRecordRepository(conn, id_generator=id_generator)
        users_repo: UserRepository = MySQLUserRepository(conn)
    elif backend == "json":
        store = JsonFileStore(_setting(settings, "DATA_DIR", "instance/data"))
        employees_repo = JsonEmployeeRepository(store, id_generator=id_generator)
        records_repo = JsonDailyRecordRepository(store, id_generator=id_generator)
        users_repo = StaticUserRepository(_setting(settings, "DEMO_USERS", []))
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")

    return Container(
        employees_repo=employees_repo,
        records_repo=records_repo,
        users_repo=users_repo,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(employees_repo),
        record_service=RecordService(records_repo, employees_repo),
        report_service=ReportService(
            employees_repo,
            records_repo,
            default_days=int(_setting(settings, "DEFAULT_REPORT_DAYS", DEFAULT_REPORT_DAYS)),
        ),
        locale_service=LocaleService(default_language=_setting(settings, "DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)),
        exporters=ReportExporterFactory(pdf_font_path=_setting(settings, "PDF_FONT_PATH")),
        conn=conn,
    )
