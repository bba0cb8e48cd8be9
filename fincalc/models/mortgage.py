from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoanPlan:
    principal: float
    annual_rate: float  # Percent, e.g. 2.0 for 2%
    monthly_payment: float


@dataclass(frozen=True)
class PaymentRecord:
    period: int
    interest: int
    principal: int
    remaining: int  # Floored at zero
    payment: int


@dataclass(frozen=True)
class MortgageResult:
    # nan/inf when the payment cannot amortize the loan
    total_months: int | float
    years: int | float
    months: int | float
    total_payment: float
    total_interest: float
    interest_rate: float  # Interest as percent of total payment, 1 decimal
    schedule: list[PaymentRecord] = field(default_factory=list)  # Preview only


@dataclass(frozen=True)
class PlanComparison:
    plan1: MortgageResult
    plan2: MortgageResult
    months_saved: int | float
    years_saved: float  # Rounded to 1 decimal, a number rather than a display string
    interest_saved: float
    monthly_diff: float
