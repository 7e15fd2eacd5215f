"""Equal-installment amortization schedule computation.

Pure functions: floats in, dataclass out. No I/O, no rounding; display
rounding belongs to export/presentation.
"""

import logging
import math

from src.engine.errors import InvalidArgument
from src.engine.validation import require_non_negative, require_positive, require_term
from src.models.loan import LoanTerms, PaymentScheduleEntry, Schedule, YearlySummary

logger = logging.getLogger(__name__)

# Residual left in the final period by floating-point drift: one cent, or a
# relative 1e-12 of the principal for loans in large nominal units
FINAL_BALANCE_TOLERANCE = 0.01
FINAL_BALANCE_RELATIVE_TOLERANCE = 1e-12


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual nominal percentage into a monthly decimal rate."""
    return annual_rate_percent / (12 * 100)


def compound_growth(rate: float, term_months: int) -> tuple[float, float]:
    """Return ((1+r)^n, (1+r)^n - 1).

    The second value is computed with expm1/log1p so tiny rates do not lose
    it to cancellation. Raises OverflowError when (1+r)^n is not representable.
    """
    growth_minus_one = math.expm1(term_months * math.log1p(rate))
    return growth_minus_one + 1, growth_minus_one


def _annuity_payment(principal: float, rate: float, term_months: int) -> float:
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor, factor_minus_one = compound_growth(rate, term_months)
    except OverflowError:
        raise InvalidArgument(
            f"Rate {rate!r} over {term_months} months overflows the payment formula"
        ) from None
    if factor_minus_one == 0:
        raise InvalidArgument(f"Monthly rate {rate!r} is too small to distinguish from zero")
    payment = principal * rate * factor / factor_minus_one
    if not math.isfinite(payment):
        raise InvalidArgument("Payment formula did not produce a finite value")
    return payment


def emi(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Fixed monthly payment that fully amortizes the loan."""
    principal = require_positive("principal", principal)
    annual_rate_percent = require_non_negative("annual_rate_percent", annual_rate_percent)
    term_months = require_term("term_months", term_months)

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return principal / term_months
    return _annuity_payment(principal, r, term_months)


def compute_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
) -> Schedule:
    """Generate the full month-by-month schedule.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual nominal rate in percent (e.g. 8.5 for 8.5%)
        term_months: Number of equal monthly payments

    The balance is carried forward period by period rather than recomputed
    from the closed form, so the last balance carries the accumulated drift
    before it is snapped to zero.
    """
    pmt = emi(principal, annual_rate_percent, term_months)
    r = monthly_rate(annual_rate_percent)
    entries: list[PaymentScheduleEntry] = []
    snap = max(FINAL_BALANCE_TOLERANCE, principal * FINAL_BALANCE_RELATIVE_TOLERANCE)

    if r == 0:
        for period in range(1, term_months + 1):
            balance = principal - pmt * period
            if period == term_months and abs(balance) < snap:
                balance = 0.0
            entries.append(PaymentScheduleEntry(
                period_index=period,
                payment_amount=pmt,
                principal_component=pmt,
                interest_component=0.0,
                remaining_balance=max(0.0, balance),
            ))
        logger.debug("Straight-line schedule: %s over %d months", principal, term_months)
        return Schedule(
            payment=pmt,
            total_paid=principal,
            total_interest=0.0,
            entries=entries,
        )

    balance = principal
    for period in range(1, term_months + 1):
        interest = balance * r
        principal_paid = pmt - interest
        balance -= principal_paid

        if period == term_months and abs(balance) < snap:
            balance = 0.0

        entries.append(PaymentScheduleEntry(
            period_index=period,
            payment_amount=pmt,
            principal_component=principal_paid,
            interest_component=interest,
            remaining_balance=max(0.0, balance),
        ))

    total_paid = pmt * term_months
    logger.debug(
        "Amortized %s at %s%% over %d months: payment %s",
        principal, annual_rate_percent, term_months, pmt,
    )
    return Schedule(
        payment=pmt,
        total_paid=total_paid,
        total_interest=total_paid - principal,
        entries=entries,
    )


def compute_schedule_for_terms(terms: LoanTerms) -> Schedule:
    return compute_schedule(terms.principal, terms.annual_rate_percent, terms.term_months)


def yearly_summary(schedule: Schedule) -> list[YearlySummary]:
    """Aggregate a schedule into 12-month buckets.

    The last bucket is partial when the term is not a whole number of years.
    """
    yearly: list[YearlySummary] = []
    year_principal = 0.0
    year_interest = 0.0
    year_payments = 0.0

    for entry in schedule.entries:
        year_principal += entry.principal_component
        year_interest += entry.interest_component
        year_payments += entry.payment_amount

        if entry.period_index % 12 == 0 or entry.period_index == len(schedule.entries):
            yearly.append(YearlySummary(
                year=(entry.period_index - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                payments=year_payments,
                ending_balance=entry.remaining_balance,
            ))
            year_principal = 0.0
            year_interest = 0.0
            year_payments = 0.0

    return yearly
