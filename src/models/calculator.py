from dataclasses import dataclass
from enum import Enum

from src.models.loan import Schedule


class CalculationType(Enum):
    EMI = "emi"
    LOAN_AMOUNT = "loan_amount"  # Solve principal from a target EMI
    TENURE = "tenure"  # Solve months from a target EMI


class TenureUnit(Enum):
    MONTHS = "months"
    YEARS = "years"


@dataclass(frozen=True)
class CalculatorInputs:
    calculation_type: CalculationType = CalculationType.EMI
    loan_amount: float | None = None
    interest_rate: float = 0.0  # Annual, percent
    loan_tenure: float | None = None  # In tenure_unit
    tenure_unit: TenureUnit = TenureUnit.MONTHS
    target_emi: float | None = None


@dataclass(frozen=True)
class CalculationResult:
    calculation_type: CalculationType
    principal: float
    term_months: int
    schedule: Schedule
    solved_tenure: float | None = None  # Real-valued months, tenure mode only
