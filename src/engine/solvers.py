"""Inverse solvers: fix the payment, solve for principal or tenure.

Both are closed-form inversions of the annuity formula. Pure functions.
"""

import logging
import math

from src.engine.amortization import compound_growth, monthly_rate
from src.engine.errors import InvalidArgument, UnamortizableLoan
from src.engine.validation import require_non_negative, require_positive, require_term

logger = logging.getLogger(__name__)

# Slack before rounding a solved tenure up to the next whole month
TENURE_TOLERANCE = 1e-9


def solve_max_principal(
    target_payment: float,
    annual_rate_percent: float,
    term_months: int,
) -> float:
    """Largest principal a fixed payment can fully amortize in term_months.

    P = M * [(1+r)^n - 1] / [r(1+r)^n]
    """
    target_payment = require_positive("target_payment", target_payment)
    annual_rate_percent = require_non_negative("annual_rate_percent", annual_rate_percent)
    term_months = require_term("term_months", term_months)

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return target_payment * term_months

    try:
        factor, factor_minus_one = compound_growth(r, term_months)
    except OverflowError:
        # Discount factor underflows to zero: the limit is a perpetuity
        return target_payment / r
    principal = target_payment * factor_minus_one / (r * factor)
    if not math.isfinite(principal) or principal <= 0:
        raise InvalidArgument(
            f"Cannot solve principal for payment {target_payment!r} at {annual_rate_percent!r}%"
        )
    return principal


def solve_required_tenure(
    principal: float,
    target_payment: float,
    annual_rate_percent: float,
) -> float:
    """Real-valued number of months needed to repay principal at target_payment.

    (1+r)^n = M / (M - P*r)  =>  n = -ln(1 - P*r/M) / ln(1 + r)

    Only defined while M > P*r, i.e. the payment covers more than the first
    month's interest. Callers round up (see whole_months) before building a
    schedule.
    """
    principal = require_positive("principal", principal)
    target_payment = require_positive("target_payment", target_payment)
    annual_rate_percent = require_non_negative("annual_rate_percent", annual_rate_percent)

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return principal / target_payment

    first_interest = principal * r
    if target_payment <= first_interest:
        logger.warning(
            "Payment %s does not cover monthly interest %s on %s",
            target_payment, first_interest, principal,
        )
        raise UnamortizableLoan(
            f"Payment {target_payment:.2f} does not exceed the monthly interest "
            f"of {first_interest:.2f}; the loan would never be repaid"
        )

    # log1p keeps precision when P*r/M or r is small
    tenure = -math.log1p(-first_interest / target_payment) / math.log1p(r)
    if not math.isfinite(tenure) or tenure <= 0:
        raise UnamortizableLoan(
            f"Tenure for payment {target_payment!r} on {principal!r} is not finite"
        )
    return tenure


def whole_months(tenure: float) -> int:
    """Round a solved tenure up to whole months, ignoring float noise."""
    return max(1, math.ceil(tenure - TENURE_TOLERANCE))


def required_whole_tenure(
    principal: float,
    target_payment: float,
    annual_rate_percent: float,
) -> int:
    """Whole number of months; the final EMI will not exceed target_payment."""
    return whole_months(solve_required_tenure(principal, target_payment, annual_rate_percent))
