"""Multi-fund portfolio projection.

Runs the single-fund projection once per holding, each with its own slice of
the contribution stages, then sums the per-fund series month by month.

Pure computation. No I/O.
"""

import logging
from dataclasses import replace

from fincalc.engine.catalog import get_fund
from fincalc.engine.projection import (
    MONTHS_PER_YEAR,
    aggregate_yearly,
    annualized_return,
    project_investment,
    return_rate,
)
from fincalc.engine.valuation import current_value, portfolio_value
from fincalc.models.fund import Holding
from fincalc.models.projection import (
    ContributionStage,
    MonthlyRecord,
    PortfolioProjection,
    PortfolioSummary,
    ProjectionResult,
)

logger = logging.getLogger(__name__)


def allocate_stages(stages: list[ContributionStage], fund_code: str) -> list[ContributionStage]:
    """Scale each stage's monthly amount by the fund's allocation percent.

    A fund missing from a stage's allocation gets nothing for that stage.
    Allocations are not required to sum to 100.
    """
    allocated = []
    for stage in stages:
        pct = (stage.allocation or {}).get(fund_code) or 0
        allocated.append(ContributionStage(
            start_month=stage.start_month,
            end_month=stage.end_month,
            monthly_amount=stage.monthly_amount * (pct / 100),
        ))
    return allocated


def _sum_month(month: int, projections: list[ProjectionResult]) -> MonthlyRecord:
    records = [p.monthly_data[month - 1] for p in projections]
    total_invested = sum((r.total_invested for r in records), 0.0)
    cumulative = sum((r.cumulative_return for r in records), 0.0)
    return MonthlyRecord(
        month=month,
        year=(month - 1) // MONTHS_PER_YEAR + 1,
        month_in_year=(month - 1) % MONTHS_PER_YEAR + 1,
        monthly_investment=sum((r.monthly_investment for r in records), 0.0),
        total_invested=total_invested,
        current_value=sum((r.current_value for r in records), 0.0),
        cumulative_return=cumulative,
        return_rate=return_rate(cumulative, total_invested),
    )


def project_portfolio(
    holdings: list[Holding],
    stages: list[ContributionStage],
    total_months: int,
    custom_returns: dict[str, float] | None = None,
) -> PortfolioProjection:
    """Project a multi-fund portfolio with staged, allocated contributions.

    Args:
        holdings: Current positions; each seeds its fund's initial value
        stages: Contribution stages with per-fund allocation percents
        total_months: Length of the simulation
        custom_returns: Optional fund code -> annual return overrides
    """
    custom_returns = custom_returns or {}
    current_portfolio = portfolio_value(holdings)

    # Keyed by fund code: a repeated code replaces the earlier run
    fund_projections: dict[str, ProjectionResult] = {}
    for holding in holdings:
        fund = get_fund(holding.fund_code)
        annual_return = custom_returns.get(holding.fund_code) or fund.avg_annual_return

        fund_projections[holding.fund_code] = project_investment(
            stages=allocate_stages(stages, holding.fund_code),
            total_months=total_months,
            initial_investment=current_value(holding.fund_code, holding.shares, holding.price),
            annual_return=annual_return,
            reinvest_dividend=True,
            dividend_yield=fund.dividend_yield,
        )

    logger.debug(
        "Aggregating %d fund projections over %d months", len(fund_projections), total_months
    )

    projections = list(fund_projections.values())
    monthly_data = [_sum_month(month, projections) for month in range(1, total_months + 1)]

    yearly_data = []
    for year in aggregate_yearly(monthly_data):
        year_end_month = min(year.year * MONTHS_PER_YEAR, total_months)
        dividend = sum(
            (
                projection.monthly_data[year_end_month - 1].current_value
                * get_fund(code).dividend_yield
                for code, projection in fund_projections.items()
            ),
            0.0,
        )
        yearly_data.append(replace(year, annual_dividend=dividend))

    initial_total = current_portfolio.total_value
    if monthly_data:
        final = monthly_data[-1]
        total_invested = final.total_invested
        final_value = final.current_value
        cumulative = final.cumulative_return
        final_rate = final.return_rate
    else:
        total_invested = final_value = initial_total
        cumulative = 0.0
        final_rate = 0.0

    if total_months > 0 and initial_total > 0:
        avg_annual = annualized_return(final_value, initial_total, total_months)
    else:
        avg_annual = 0.0

    estimated_dividend = sum(
        (
            projection.summary.final_value * get_fund(code).dividend_yield
            for code, projection in fund_projections.items()
        ),
        0.0,
    )

    summary = PortfolioSummary(
        total_months=total_months,
        initial_value=initial_total,
        total_invested=total_invested,
        final_value=final_value,
        cumulative_return=cumulative,
        return_rate=final_rate,
        avg_annual_return=avg_annual * 100,
        estimated_annual_dividend=estimated_dividend,
        estimated_monthly_dividend=estimated_dividend / MONTHS_PER_YEAR,
    )

    return PortfolioProjection(
        current_portfolio=current_portfolio,
        summary=summary,
        monthly_data=monthly_data,
        yearly_data=yearly_data,
        fund_projections=fund_projections,
    )
