"""Flat delimited-text rendering of a schedule (the calculator's CSV export)."""

from decimal import Decimal, ROUND_HALF_UP

from src.models.loan import Schedule

TWO_PLACES = Decimal("0.01")

SCHEDULE_HEADER = ("Month", "Payment", "Principal", "Interest", "Balance")


def _money(value: float) -> str:
    # repr() keeps 1.005 from becoming 1.00499999...; "+ 0" drops "-0.00"
    return str(Decimal(repr(value)).quantize(TWO_PLACES, ROUND_HALF_UP) + 0)


def schedule_rows(schedule: Schedule) -> list[list[str]]:
    """Header row plus one row per period, all fields as display strings."""
    rows = [list(SCHEDULE_HEADER)]
    for entry in schedule.entries:
        rows.append([
            str(entry.period_index),
            _money(entry.payment_amount),
            _money(entry.principal_component),
            _money(entry.interest_component),
            _money(entry.remaining_balance),
        ])
    return rows


def format_schedule_as_delimited_text(schedule: Schedule, delimiter: str = ",") -> str:
    """Render the schedule as delimited text, one line per row.

    An empty schedule renders as the header line alone.
    """
    return "\n".join(delimiter.join(row) for row in schedule_rows(schedule))
