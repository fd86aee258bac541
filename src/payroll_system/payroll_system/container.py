from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .benefits.mysql_benefit_repository import MySQLBenefitRepository
from .benefits.repository import BenefitRepository
from .benefits.service import BenefitService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollGenerator, PayrollReportService
from .requests.mysql_request_repository import MySQLRequestRepository
from .requests.repository import RequestRepository
from .requests.service import RequestService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    benefits_repo: BenefitRepository
    payroll_repo: PayrollRepository
    requests_repo: RequestRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    benefit_service: BenefitService
    payroll_generator: PayrollGenerator
    payroll_report_service: PayrollReportService
    request_service: RequestService


def wire(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    benefits_repo: BenefitRepository,
    payroll_repo: PayrollRepository,
    requests_repo: RequestRepository,
    conn: Optional[DatabaseConnection] = None,
    withhold_tax: bool = False,
) -> Container:
    """Build services on top of any repository implementations."""
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        benefits_repo=benefits_repo,
        payroll_repo=payroll_repo,
        requests_repo=requests_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        benefit_service=BenefitService(benefits_repo, employees_repo),
        payroll_generator=PayrollGenerator(
            employees_repo,
            attendance_repo,
            benefits_repo,
            payroll_repo,
            calculator=StandardPayrollCalculator(withhold_tax=withhold_tax),
        ),
        payroll_report_service=PayrollReportService(payroll_repo),
        request_service=RequestService(requests_repo, employees_repo),
    )


def build_container(*, db_config: dict, withhold_tax: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return wire(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        benefits_repo=MySQLBenefitRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        requests_repo=MySQLRequestRepository(conn),
        withhold_tax=withhold_tax,
    )
