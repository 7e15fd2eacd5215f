"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from src.models.calculator import CalculationType, TenureUnit


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    principal: float = Field(..., gt=0, description="Loan amount")
    annual_rate_percent: float = Field(..., ge=0, description="Annual nominal rate, e.g. 8.5")
    term_months: int = Field(..., ge=1, description="Number of monthly payments")


class MaxPrincipalRequest(BaseModel):
    target_payment: float = Field(..., gt=0, description="Affordable monthly payment")
    annual_rate_percent: float = Field(..., ge=0)
    term_months: int = Field(..., ge=1)


class TenureRequest(BaseModel):
    principal: float = Field(..., gt=0)
    target_payment: float = Field(..., gt=0)
    annual_rate_percent: float = Field(..., ge=0)


class CalculateRequest(BaseModel):
    """Calculator form: which fields are required depends on calculation_type."""
    calculation_type: CalculationType = CalculationType.EMI
    loan_amount: float | None = None
    interest_rate: float = 0.0
    loan_tenure: float | None = None
    tenure_unit: TenureUnit = TenureUnit.MONTHS
    target_emi: float | None = None


# ---- Response schemas ----

class ScheduleEntryResponse(BaseModel):
    month: int
    payment: float
    principal: float
    interest: float
    balance: float


class YearlySummaryResponse(BaseModel):
    year: int
    principal: float
    interest: float
    payments: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    payment: float
    total_amount: float
    total_interest: float
    principal_share: float
    interest_share: float
    entries: list[ScheduleEntryResponse]
    yearly: list[YearlySummaryResponse] = []


class MaxPrincipalResponse(BaseModel):
    principal: float


class TenureResponse(BaseModel):
    tenure: float  # Real-valued months
    whole_months: int


class CalculateResponse(BaseModel):
    calculation_type: CalculationType
    principal: float
    term_months: int
    solved_tenure: float | None = None
    schedule: ScheduleResponse
