"""CLI for the EMI calculator.

Every command runs through the calculator service, so the rate and tenure
bounds from settings apply here exactly as they do in the API.

Usage:
    python -m src.cli schedule                # reset values from settings
    python -m src.cli schedule 100000 8.5 12
    python -m src.cli schedule 250000 7 20 --years --yearly
    python -m src.cli schedule 120000 0 12 --csv > emi-breakdown.csv
    python -m src.cli max-principal 1000 8.5 12
    python -m src.cli tenure 100000 5000 8.5
"""

import argparse
import logging

from src.config import settings
from src.engine.amortization import yearly_summary
from src.engine.calculator import run_calculation
from src.engine.errors import LoanCalculationError
from src.engine.export import format_schedule_as_delimited_text
from src.models.calculator import CalculationType, CalculatorInputs, TenureUnit
from src.models.loan import Schedule


def print_schedule(schedule: Schedule, show_yearly: bool = False) -> None:
    print(f"\n{'=' * 60}")
    print(f"  EMI Schedule: {schedule.term_months} months")
    print(f"{'=' * 60}")
    print(f"  Monthly EMI:      ${schedule.payment:,.2f}")
    print(f"  Total Amount:     ${schedule.total_paid:,.2f}")
    print(f"  Total Interest:   ${schedule.total_interest:,.2f}")
    print(f"  Principal/Int.:   {schedule.principal_share:.1f}% / {schedule.interest_share:.1f}%")
    print()

    if show_yearly:
        print(f"  {'Year':>4}  {'Principal':>14}  {'Interest':>12}  {'Balance':>14}")
        for y in yearly_summary(schedule):
            print(f"  {y.year:>4}  {y.principal:>14,.2f}  {y.interest:>12,.2f}  {y.ending_balance:>14,.2f}")
    else:
        print(f"  {'Month':>5}  {'Principal':>12}  {'Interest':>12}  {'Balance':>14}")
        for e in schedule.entries:
            print(
                f"  {e.period_index:>5}  {e.principal_component:>12,.2f}"
                f"  {e.interest_component:>12,.2f}  {e.remaining_balance:>14,.2f}"
            )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="EMI calculator")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("schedule", help="Amortization schedule for a loan")
    p.add_argument("principal", type=float, nargs="?", default=settings.default_loan_amount,
                   help=f"Loan amount (default: {settings.default_loan_amount:g})")
    p.add_argument("rate", type=float, nargs="?", default=settings.default_interest_rate,
                   help=f"Annual interest rate in percent (default: {settings.default_interest_rate:g})")
    p.add_argument("tenure", type=float, nargs="?", default=settings.default_loan_tenure,
                   help=f"Tenure, months unless --years (default: {settings.default_loan_tenure})")
    p.add_argument("--years", action="store_true", help="Tenure is in years")
    p.add_argument("--csv", action="store_true", help="Print the delimited export instead")
    p.add_argument("--yearly", action="store_true", help="Summarize by year")

    p = sub.add_parser("max-principal", help="Largest loan a payment can repay")
    p.add_argument("payment", type=float, help="Affordable monthly payment")
    p.add_argument("rate", type=float, help="Annual interest rate in percent")
    p.add_argument("tenure", type=float, help="Tenure (months unless --years)")
    p.add_argument("--years", action="store_true", help="Tenure is in years")

    p = sub.add_parser("tenure", help="Months needed to repay a loan at a payment")
    p.add_argument("principal", type=float, help="Loan amount")
    p.add_argument("payment", type=float, help="Affordable monthly payment")
    p.add_argument("rate", type=float, help="Annual interest rate in percent")

    return parser


def inputs_from_args(args: argparse.Namespace) -> CalculatorInputs:
    """Map a sub-command onto the calculator's modes."""
    unit = TenureUnit.YEARS if getattr(args, "years", False) else TenureUnit.MONTHS
    if args.command == "schedule":
        return CalculatorInputs(
            calculation_type=CalculationType.EMI,
            loan_amount=args.principal,
            interest_rate=args.rate,
            loan_tenure=args.tenure,
            tenure_unit=unit,
        )
    if args.command == "max-principal":
        return CalculatorInputs(
            calculation_type=CalculationType.LOAN_AMOUNT,
            interest_rate=args.rate,
            loan_tenure=args.tenure,
            tenure_unit=unit,
            target_emi=args.payment,
        )
    return CalculatorInputs(
        calculation_type=CalculationType.TENURE,
        loan_amount=args.principal,
        interest_rate=args.rate,
        target_emi=args.payment,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    try:
        result = run_calculation(inputs_from_args(args), settings)
    except LoanCalculationError as e:
        parser.error(str(e))

    if args.command == "schedule":
        if args.csv:
            print(format_schedule_as_delimited_text(result.schedule, delimiter=settings.export_delimiter))
        else:
            print_schedule(result.schedule, show_yearly=args.yearly)

    elif args.command == "max-principal":
        print(f"  Max loan amount:  ${result.principal:,.2f} over {result.term_months} months")

    elif args.command == "tenure":
        print(f"  Required tenure:  {result.solved_tenure:.2f} months ({result.term_months} payments)")


if __name__ == "__main__":
    main()
