"""EMI calculator routes."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from src.api.deps import get_settings
from src.api.schemas import (
    CalculateRequest,
    CalculateResponse,
    MaxPrincipalRequest,
    MaxPrincipalResponse,
    ScheduleEntryResponse,
    ScheduleRequest,
    ScheduleResponse,
    TenureRequest,
    TenureResponse,
    YearlySummaryResponse,
)
from src.config import Settings
from src.engine.amortization import compute_schedule, yearly_summary
from src.engine.calculator import run_calculation
from src.engine.errors import LoanCalculationError
from src.engine.export import format_schedule_as_delimited_text
from src.engine.solvers import solve_max_principal, solve_required_tenure, whole_months
from src.models.calculator import CalculatorInputs
from src.models.loan import Schedule

router = APIRouter(prefix="/api/v1/emi", tags=["emi"])


def _schedule_to_response(schedule: Schedule) -> ScheduleResponse:
    """Convert engine Schedule to API response."""
    entries = [
        ScheduleEntryResponse(
            month=e.period_index,
            payment=e.payment_amount,
            principal=e.principal_component,
            interest=e.interest_component,
            balance=e.remaining_balance,
        )
        for e in schedule.entries
    ]
    yearly = [
        YearlySummaryResponse(
            year=y.year,
            principal=y.principal,
            interest=y.interest,
            payments=y.payments,
            ending_balance=y.ending_balance,
        )
        for y in yearly_summary(schedule)
    ]
    return ScheduleResponse(
        payment=schedule.payment,
        total_amount=schedule.total_paid,
        total_interest=schedule.total_interest,
        principal_share=schedule.principal_share,
        interest_share=schedule.interest_share,
        entries=entries,
        yearly=yearly,
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: ScheduleRequest):
    """Full amortization schedule for a principal/rate/term triple."""
    try:
        result = compute_schedule(req.principal, req.annual_rate_percent, req.term_months)
    except LoanCalculationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _schedule_to_response(result)


@router.post("/schedule/export", response_class=PlainTextResponse)
async def export_schedule(req: ScheduleRequest, cfg: Settings = Depends(get_settings)):
    """Schedule as a downloadable CSV file."""
    try:
        result = compute_schedule(req.principal, req.annual_rate_percent, req.term_months)
    except LoanCalculationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return PlainTextResponse(
        format_schedule_as_delimited_text(result, delimiter=cfg.export_delimiter),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={cfg.export_filename}"},
    )


@router.post("/solve/principal", response_model=MaxPrincipalResponse)
async def max_principal(req: MaxPrincipalRequest):
    """Largest loan the target payment can repay over the term."""
    try:
        principal = solve_max_principal(req.target_payment, req.annual_rate_percent, req.term_months)
    except LoanCalculationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return MaxPrincipalResponse(principal=principal)


@router.post("/solve/tenure", response_model=TenureResponse)
async def tenure(req: TenureRequest):
    """Months needed to repay the principal at the target payment."""
    try:
        months = solve_required_tenure(req.principal, req.target_payment, req.annual_rate_percent)
        whole = whole_months(months)
    except LoanCalculationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TenureResponse(tenure=months, whole_months=whole)


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(req: CalculateRequest, cfg: Settings = Depends(get_settings)):
    """Calculator entry point: EMI, loan amount or tenure mode."""
    inputs = CalculatorInputs(
        calculation_type=req.calculation_type,
        loan_amount=req.loan_amount,
        interest_rate=req.interest_rate,
        loan_tenure=req.loan_tenure,
        tenure_unit=req.tenure_unit,
        target_emi=req.target_emi,
    )
    try:
        result = run_calculation(inputs, cfg)
    except LoanCalculationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return CalculateResponse(
        calculation_type=result.calculation_type,
        principal=result.principal,
        term_months=result.term_months,
        solved_tenure=result.solved_tenure,
        schedule=_schedule_to_response(result.schedule),
    )
