from __future__ import annotations

from enum import Enum


class SalaryType(str, Enum):
    """How an employee's salary rate is applied."""

    HOURLY = "hourly"
    MONTHLY = "monthly"


class PayComponent(str, Enum):
    """Payroll accumulator a benefit amount flows into."""

    ALLOWANCES = "allowances"
    BONUSES = "bonuses"
    OTHER_DEDUCTIONS = "other_deductions"
    INFORMATIONAL = "informational"


class BenefitType(str, Enum):
    """Benefit/deduction entry types stored in the benefits table."""

    SSS = "SSS"
    PHILHEALTH = "PhilHealth"
    PAG_IBIG = "Pag-IBIG"
    ALLOWANCE = "Allowance"
    BONUS = "Bonus"
    THIRTEENTH_MONTH = "13th_month"
    DEDUCTION = "Deduction"

    @property
    def component(self) -> PayComponent:
        return BENEFIT_COMPONENTS[self]


# Statutory entries recorded as benefits are informational only; the
# generator computes SSS/PhilHealth/Pag-IBIG from gross pay itself.
BENEFIT_COMPONENTS: dict[BenefitType, PayComponent] = {
    BenefitType.SSS: PayComponent.INFORMATIONAL,
    BenefitType.PHILHEALTH: PayComponent.INFORMATIONAL,
    BenefitType.PAG_IBIG: PayComponent.INFORMATIONAL,
    BenefitType.ALLOWANCE: PayComponent.ALLOWANCES,
    BenefitType.BONUS: PayComponent.BONUSES,
    BenefitType.THIRTEENTH_MONTH: PayComponent.BONUSES,
    BenefitType.DEDUCTION: PayComponent.OTHER_DEDUCTIONS,
}


class RequestStatus(str, Enum):
    """Review workflow state for HRIS requests."""

    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class RequestKind(str, Enum):
    LEAVE = "leave"
    OVERTIME = "overtime"
    CORRECTION = "corrections"


class LeaveType(str, Enum):
    SICK = "sick"
    VACATION = "vacation"
    PERSONAL = "personal"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    EMERGENCY = "emergency"


class CorrectionType(str, Enum):
    TIME_IN = "time_in"
    TIME_OUT = "time_out"
    HOURS = "hours"
