from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access_log.mysql_access_log_repository import MySQLAccessLogRepository
from .access_log.repository import AccessLogRepository
from .access_log.service import AccessLogService
from .admin.service import AdminAuthService, ExportService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .salary_tiers.mysql_salary_tier_repository import MySQLSalaryTierRepository
from .salary_tiers.repository import SalaryTierRepository
from .salary_tiers.service import SalaryTierService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    holidays_repo: HolidayRepository
    salary_tiers_repo: SalaryTierRepository
    access_log_repo: AccessLogRepository

    holiday_service: HolidayService
    salary_tier_service: SalaryTierService
    access_log_service: AccessLogService
    admin_auth_service: AdminAuthService
    export_service: ExportService
    payroll_service: PayrollService


def build_services(
    *,
    holidays_repo: HolidayRepository,
    salary_tiers_repo: SalaryTierRepository,
    access_log_repo: AccessLogRepository,
    admin_password_hash: Optional[str],
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""

    holiday_service = HolidayService(holidays_repo)
    salary_tier_service = SalaryTierService(salary_tiers_repo)
    access_log_service = AccessLogService(access_log_repo)
    admin_auth_service = AdminAuthService(admin_password_hash)
    export_service = ExportService(access_log_repo, salary_tiers_repo)
    payroll_service = PayrollService(
        salary_tier_service,
        holidays_repo,
        calculator=StandardPayrollCalculator(),
    )

    return Container(
        conn=conn,
        holidays_repo=holidays_repo,
        salary_tiers_repo=salary_tiers_repo,
        access_log_repo=access_log_repo,
        holiday_service=holiday_service,
        salary_tier_service=salary_tier_service,
        access_log_service=access_log_service,
        admin_auth_service=admin_auth_service,
        export_service=export_service,
        payroll_service=payroll_service,
    )


def build_container(*, db_config: dict, admin_password_hash: Optional[str] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        holidays_repo=MySQLHolidayRepository(conn),
        salary_tiers_repo=MySQLSalaryTierRepository(conn),
        access_log_repo=MySQLAccessLogRepository(conn),
        admin_password_hash=admin_password_hash,
        conn=conn,
    )
