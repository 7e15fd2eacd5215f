from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate_percent: float  # Nominal, e.g. 8.5 for 8.5%
    term_months: int


@dataclass(frozen=True)
class PaymentScheduleEntry:
    period_index: int  # 1-based
    payment_amount: float
    principal_component: float
    interest_component: float
    remaining_balance: float  # Never negative


@dataclass(frozen=True)
class Schedule:
    payment: float  # EMI
    total_paid: float
    total_interest: float
    entries: list[PaymentScheduleEntry] = field(default_factory=list)

    @property
    def principal(self) -> float:
        return self.total_paid - self.total_interest

    @property
    def term_months(self) -> int:
        return len(self.entries)

    @property
    def interest_share(self) -> float:
        """Interest as a percentage of everything paid."""
        if self.total_paid == 0:
            return 0.0
        return self.total_interest / self.total_paid * 100

    @property
    def principal_share(self) -> float:
        return 100 - self.interest_share


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal: float
    interest: float
    payments: float
    ending_balance: float
