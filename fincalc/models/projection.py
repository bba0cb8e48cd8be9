from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContributionStage:
    """Fixed monthly contribution over an inclusive month range (1-indexed)."""
    start_month: int
    end_month: int
    monthly_amount: float
    # Portfolio mode only: fund code -> percent of monthly_amount
    allocation: dict[str, float] | None = None


@dataclass(frozen=True)
class MonthlyRecord:
    month: int
    year: int
    month_in_year: int
    monthly_investment: float
    total_invested: float
    current_value: float
    cumulative_return: float
    return_rate: float  # Percent of total invested
    annual_dividend: float = 0.0  # Only set at year end (month % 12 == 0)


@dataclass(frozen=True)
class YearlyRecord:
    year: int
    year_investment: float
    total_invested: float
    current_value: float
    cumulative_return: float
    return_rate: float
    annual_dividend: float


@dataclass(frozen=True)
class ProjectionSummary:
    total_months: int
    total_invested: float
    final_value: float
    cumulative_return: float
    return_rate: float
    avg_annual_return: float  # Percent
    estimated_annual_dividend: float


@dataclass(frozen=True)
class ProjectionResult:
    summary: ProjectionSummary
    monthly_data: list[MonthlyRecord] = field(default_factory=list)
    yearly_data: list[YearlyRecord] = field(default_factory=list)


@dataclass(frozen=True)
class HoldingValue:
    fund_code: str
    name: str
    shares: float
    value: float
    percentage: float  # Share of portfolio total, percent


@dataclass(frozen=True)
class PortfolioValuation:
    total_value: float
    breakdown: list[HoldingValue] = field(default_factory=list)


@dataclass(frozen=True)
class PortfolioSummary:
    total_months: int
    initial_value: float
    total_invested: float
    final_value: float
    cumulative_return: float
    return_rate: float
    avg_annual_return: float  # Percent
    estimated_annual_dividend: float
    estimated_monthly_dividend: float


@dataclass(frozen=True)
class PortfolioProjection:
    """Blended multi-fund projection plus the per-fund runs it was built from."""

    current_portfolio: PortfolioValuation
    summary: PortfolioSummary
    monthly_data: list[MonthlyRecord] = field(default_factory=list)
    yearly_data: list[YearlyRecord] = field(default_factory=list)
    fund_projections: dict[str, ProjectionResult] = field(default_factory=dict)
