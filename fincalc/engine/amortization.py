"""Fixed-payment mortgage amortization.

Given a principal, an annual rate in percent and a fixed monthly payment,
solve for how long the loan runs and how each payment splits between
interest and principal.

A payment too small to ever cover the interest has no finite payoff period.
Those cases come back as nan/inf rather than raising; callers check with
math.isfinite before displaying.

Pure functions. No I/O.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_CEILING

from fincalc.config import settings
from fincalc.models.mortgage import LoanPlan, MortgageResult, PaymentRecord, PlanComparison

logger = logging.getLogger(__name__)

WHOLE = Decimal("1")
ONE_PLACE = Decimal("0.1")
MONTHS_PER_YEAR = 12


def _round_half_ceiling(value: float, places: Decimal = WHOLE) -> float:
    """Round halves toward +inf (-0.5 -> 0); nan/inf pass through untouched."""
    if not math.isfinite(value):
        return value
    rounded = Decimal(str(value)).quantize(places, ROUND_HALF_CEILING)
    return int(rounded) if places == WHOLE else float(rounded)


def _monthly_rate(annual_rate: float) -> float:
    return annual_rate / 100 / MONTHS_PER_YEAR


def period_count(principal: float, annual_rate: float, monthly_payment: float) -> float:
    """Number of monthly payments to retire the loan (fractional).

    n = -ln(1 - P*r/A) / ln(1 + r), or P/A when the rate is zero.
    """
    r = _monthly_rate(annual_rate)

    if r == 0:
        if monthly_payment == 0:
            logger.warning("Zero monthly payment on a zero-rate loan of %s", principal)
            return math.nan if principal == 0 else math.copysign(math.inf, principal)
        return principal / monthly_payment

    if monthly_payment == 0:
        logger.warning("Zero monthly payment can never amortize %s", principal)
        return math.nan

    arg = 1 - principal * r / monthly_payment
    if arg <= 0:
        logger.warning(
            "Monthly payment %s does not cover interest on %s at %s%%",
            monthly_payment, principal, annual_rate,
        )
        return math.inf if arg == 0 else math.nan

    return -math.log(arg) / math.log(1 + r)


def years_months(total_months: float) -> tuple[float, float]:
    """Split a (possibly fractional) month count into whole years and months.

    Leftover months are rounded up, so 11.5 months reads as 0 years 12 months.
    """
    if not math.isfinite(total_months):
        return total_months / MONTHS_PER_YEAR, math.nan
    years = math.floor(total_months / MONTHS_PER_YEAR)
    months = math.ceil(math.fmod(total_months, MONTHS_PER_YEAR))
    return years, months


def payment_schedule(
    principal: float,
    annual_rate: float,
    monthly_payment: float,
    periods: int | None = None,
) -> list[PaymentRecord]:
    """Period-by-period interest/principal split, rounded to whole units.

    Args:
        principal: Outstanding balance
        annual_rate: Annual interest rate in percent (e.g. 2.0 for 2%)
        monthly_payment: Fixed payment each period
        periods: Periods to generate; defaults to the full payoff period count.
            Generation stops early once the balance reaches zero.
    """
    r = _monthly_rate(annual_rate)

    if not periods:
        n = period_count(principal, annual_rate, monthly_payment)
        if not math.isfinite(n):
            logger.warning("No finite payoff period; returning empty schedule")
            return []
        periods = math.ceil(n)

    schedule: list[PaymentRecord] = []
    remaining = principal

    for period in range(1, periods + 1):
        interest = remaining * r
        principal_paid = monthly_payment - interest
        remaining -= principal_paid

        # Last payment overshoots the balance
        if remaining < 0:
            remaining = 0.0

        schedule.append(PaymentRecord(
            period=period,
            interest=_round_half_ceiling(interest),
            principal=_round_half_ceiling(principal_paid),
            remaining=_round_half_ceiling(remaining),
            payment=_round_half_ceiling(monthly_payment),
        ))

        if remaining <= 0:
            break

    return schedule


def totals(principal: float, annual_rate: float, monthly_payment: float) -> tuple[float, float]:
    """(total_payment, total_interest) over the unrounded payoff period, rounded."""
    n = period_count(principal, annual_rate, monthly_payment)
    total_payment = monthly_payment * n
    total_interest = total_payment - principal
    return _round_half_ceiling(total_payment), _round_half_ceiling(total_interest)


def mortgage(principal: float, annual_rate: float, monthly_payment: float) -> MortgageResult:
    """Payoff period, totals and a short schedule preview for one loan.

    The schedule is truncated to settings.schedule_preview_periods; call
    payment_schedule() directly for the full table.
    """
    n = period_count(principal, annual_rate, monthly_payment)
    years, months = years_months(n)
    total_payment, total_interest = totals(principal, annual_rate, monthly_payment)
    schedule = payment_schedule(
        principal, annual_rate, monthly_payment, settings.schedule_preview_periods
    )

    if total_payment == 0:
        interest_share = math.nan
    else:
        interest_share = _round_half_ceiling(total_interest / total_payment * 100, ONE_PLACE)

    return MortgageResult(
        total_months=_round_half_ceiling(n),
        years=years,
        months=months,
        total_payment=total_payment,
        total_interest=total_interest,
        interest_rate=interest_share,
        schedule=schedule,
    )


def compare_plans(plan1: LoanPlan, plan2: LoanPlan) -> PlanComparison:
    """Side-by-side of two repayment plans; positive savings favour plan2.

    Plans are compared as given: differing principals are not normalised.
    """
    result1 = mortgage(plan1.principal, plan1.annual_rate, plan1.monthly_payment)
    result2 = mortgage(plan2.principal, plan2.annual_rate, plan2.monthly_payment)

    months_saved = result1.total_months - result2.total_months
    return PlanComparison(
        plan1=result1,
        plan2=result2,
        months_saved=months_saved,
        years_saved=_round_half_ceiling(months_saved / MONTHS_PER_YEAR, ONE_PLACE),
        interest_saved=result1.total_interest - result2.total_interest,
        monthly_diff=plan2.monthly_payment - plan1.monthly_payment,
    )
