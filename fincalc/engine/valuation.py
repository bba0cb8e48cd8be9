"""Market value of current holdings.

Pure functions. No I/O.
"""

from fincalc.engine.catalog import get_fund
from fincalc.models.fund import Holding
from fincalc.models.projection import HoldingValue, PortfolioValuation


def current_value(fund_code: str, shares: float, price: float | None = None) -> float:
    """Value = shares * price, falling back to the fund's reference price."""
    fund = get_fund(fund_code)
    return shares * (price or fund.reference_price)


def portfolio_value(holdings: list[Holding]) -> PortfolioValuation:
    """Total market value with each holding's share of the total."""
    values = [current_value(h.fund_code, h.shares, h.price) for h in holdings]
    total = sum(values, 0.0)

    breakdown = [
        HoldingValue(
            fund_code=h.fund_code,
            name=get_fund(h.fund_code).name,
            shares=h.shares,
            value=value,
            percentage=(value / total) * 100 if total > 0 else 0.0,
        )
        for h, value in zip(holdings, values)
    ]
    return PortfolioValuation(total_value=total, breakdown=breakdown)
