"""Periodic-investment projection for a single fund.

Month-by-month compounding with staged contributions. Dividend yield, when
reinvested, is folded into the growth rate rather than simulated as payouts.

Pure functions: floats in, dataclasses out. No I/O.
"""

import logging
import math

from fincalc.config import settings
from fincalc.models.projection import (
    ContributionStage,
    MonthlyRecord,
    ProjectionResult,
    ProjectionSummary,
    YearlyRecord,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def contribution_schedule(stages: list[ContributionStage], total_months: int) -> dict[int, float]:
    """Map month -> contribution amount.

    Stages are expanded in order; a later stage overwrites an earlier one on
    overlapping months. Months past total_months are dropped.
    """
    schedule: dict[int, float] = {}
    for stage in stages:
        start = max(stage.start_month, 1)
        end = min(stage.end_month, total_months)
        for month in range(start, end + 1):
            schedule[month] = stage.monthly_amount
    return schedule


def return_rate(cumulative_return: float, total_invested: float) -> float:
    """Cumulative return as a percent of money put in (0 when nothing invested)."""
    if total_invested > 0:
        return cumulative_return / total_invested * 100
    return 0.0


def annualized_return(final_value: float, initial_value: float, months: int) -> float:
    """Geometric average annual return, as a fraction.

    Zero initial value has no meaningful answer: returns inf/nan instead of
    raising, and the caller decides what to show.
    """
    if months <= 0:
        return 0.0
    if initial_value == 0:
        logger.warning("Annualized return requested with zero initial investment")
        return math.inf if final_value > 0 else math.nan
    ratio = final_value / initial_value
    if ratio < 0:
        return math.nan
    try:
        return ratio ** (MONTHS_PER_YEAR / months) - 1
    except OverflowError:
        return math.inf


def aggregate_yearly(monthly_data: list[MonthlyRecord]) -> list[YearlyRecord]:
    """Roll monthly records into 12-month buckets (last bucket may be shorter)."""
    yearly: list[YearlyRecord] = []
    for start in range(0, len(monthly_data), MONTHS_PER_YEAR):
        bucket = monthly_data[start:start + MONTHS_PER_YEAR]
        year_end = bucket[-1]
        yearly.append(YearlyRecord(
            year=start // MONTHS_PER_YEAR + 1,
            year_investment=sum((m.monthly_investment for m in bucket), 0.0),
            total_invested=year_end.total_invested,
            current_value=year_end.current_value,
            cumulative_return=year_end.cumulative_return,
            return_rate=year_end.return_rate,
            annual_dividend=year_end.annual_dividend,
        ))
    return yearly


def project_investment(
    stages: list[ContributionStage],
    total_months: int,
    initial_investment: float = 0.0,
    annual_return: float = 0.0,
    reinvest_dividend: bool | None = None,
    dividend_yield: float = 0.0,
) -> ProjectionResult:
    """Project a periodic investment plan month by month.

    Args:
        stages: Contribution stages; overlapping months take the later stage
        total_months: Length of the simulation
        initial_investment: Value already invested at month 0
        annual_return: Expected price return (e.g. 0.07 for 7%)
        reinvest_dividend: Add dividend yield to the growth rate.
            Defaults to settings.default_reinvest_dividend.
        dividend_yield: Annual dividend yield (e.g. 0.03 for 3%)
    """
    if reinvest_dividend is None:
        reinvest_dividend = settings.default_reinvest_dividend

    monthly_rate = annual_return / MONTHS_PER_YEAR
    if reinvest_dividend:
        monthly_rate += dividend_yield / MONTHS_PER_YEAR

    contributions = contribution_schedule(stages, total_months)
    logger.debug(
        "Projecting %d months: initial=%s, monthly_rate=%.6f, %d contribution months",
        total_months, initial_investment, monthly_rate, len(contributions),
    )

    value = initial_investment
    total_invested = initial_investment
    monthly_data: list[MonthlyRecord] = []

    for month in range(1, total_months + 1):
        contribution = contributions.get(month, 0.0)

        # Grow last month's balance, then add this month's contribution
        value = value * (1 + monthly_rate)
        value += contribution
        total_invested += contribution

        cumulative = value - total_invested
        monthly_data.append(MonthlyRecord(
            month=month,
            year=(month - 1) // MONTHS_PER_YEAR + 1,
            month_in_year=(month - 1) % MONTHS_PER_YEAR + 1,
            monthly_investment=contribution,
            total_invested=total_invested,
            current_value=value,
            cumulative_return=cumulative,
            return_rate=return_rate(cumulative, total_invested),
            # Point-in-time estimate, reported at year end only
            annual_dividend=value * dividend_yield if month % MONTHS_PER_YEAR == 0 else 0.0,
        ))

    cumulative = value - total_invested
    summary = ProjectionSummary(
        total_months=total_months,
        total_invested=total_invested,
        final_value=value,
        cumulative_return=cumulative,
        return_rate=return_rate(cumulative, total_invested),
        avg_annual_return=annualized_return(value, initial_investment, total_months) * 100,
        estimated_annual_dividend=value * dividend_yield,
    )

    return ProjectionResult(
        summary=summary,
        monthly_data=monthly_data,
        yearly_data=aggregate_yearly(monthly_data),
    )
