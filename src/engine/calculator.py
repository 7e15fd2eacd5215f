"""Calculator orchestration: pick a mode, resolve the unknown, build the schedule.

Applies the calculator's input bounds (max rate, max tenure) from settings on
top of the engine's numeric domain checks.
"""

import logging

from src.config import Settings, settings as default_settings
from src.engine.amortization import compute_schedule
from src.engine.errors import InvalidArgument
from src.engine.solvers import solve_max_principal, solve_required_tenure, whole_months
from src.engine.validation import require_finite, require_positive
from src.models.calculator import (
    CalculationResult,
    CalculationType,
    CalculatorInputs,
    TenureUnit,
)

logger = logging.getLogger(__name__)

WHOLE_MONTH_TOLERANCE = 1e-9


def tenure_in_months(loan_tenure: float | None, unit: TenureUnit) -> int:
    """Convert a tenure in months or years to a whole number of months."""
    if loan_tenure is None:
        raise InvalidArgument("loan_tenure is required for this calculation")
    months = require_positive("loan_tenure", loan_tenure)
    if unit is TenureUnit.YEARS:
        months *= 12
    whole = round(months)
    if abs(months - whole) > WHOLE_MONTH_TOLERANCE:
        raise InvalidArgument(f"Tenure must be a whole number of months, got {months!r}")
    return whole


def _check_rate(rate: float, settings: Settings) -> float:
    rate = require_finite("interest_rate", rate)
    if rate < 0 or rate > settings.max_annual_rate_percent:
        raise InvalidArgument(
            f"Interest rate must be between 0% and {settings.max_annual_rate_percent:g}%, got {rate!r}"
        )
    return rate


def _check_term(term_months: int, settings: Settings) -> int:
    if term_months < 1 or term_months > settings.max_term_months:
        raise InvalidArgument(
            f"Tenure must be between 1 and {settings.max_term_months} months, got {term_months}"
        )
    return term_months


def _require(name: str, value: float | None) -> float:
    if value is None:
        raise InvalidArgument(f"{name} is required for this calculation")
    return require_positive(name, value)


def run_calculation(
    inputs: CalculatorInputs,
    settings: Settings | None = None,
) -> CalculationResult:
    """Run one calculator request.

    Modes:
        emi:         loan_amount + rate + tenure -> schedule
        loan_amount: target_emi + rate + tenure  -> max principal -> schedule
        tenure:      loan_amount + target_emi + rate -> months (rounded up) -> schedule
    """
    settings = settings or default_settings
    rate = _check_rate(inputs.interest_rate, settings)
    mode = inputs.calculation_type

    if mode is CalculationType.EMI:
        principal = _require("loan_amount", inputs.loan_amount)
        months = _check_term(tenure_in_months(inputs.loan_tenure, inputs.tenure_unit), settings)
        solved = None

    elif mode is CalculationType.LOAN_AMOUNT:
        target = _require("target_emi", inputs.target_emi)
        months = _check_term(tenure_in_months(inputs.loan_tenure, inputs.tenure_unit), settings)
        principal = solve_max_principal(target, rate, months)
        solved = None

    elif mode is CalculationType.TENURE:
        principal = _require("loan_amount", inputs.loan_amount)
        target = _require("target_emi", inputs.target_emi)
        solved = solve_required_tenure(principal, target, rate)
        months = whole_months(solved)
        if months > settings.max_term_months:
            raise InvalidArgument(
                f"Required tenure of {months} months exceeds the maximum of "
                f"{settings.max_term_months}; increase the EMI"
            )

    else:
        raise InvalidArgument(f"Unknown calculation type: {mode}")

    logger.debug("%s: principal=%s rate=%s months=%d", mode.value, principal, rate, months)
    schedule = compute_schedule(principal, rate, months)

    return CalculationResult(
        calculation_type=mode,
        principal=principal,
        term_months=months,
        schedule=schedule,
        solved_tenure=solved,
    )
