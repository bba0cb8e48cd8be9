from dataclasses import dataclass


class UnknownFundError(KeyError):
    """Raised when a fund code is not in the catalog."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown ETF code: {self.code}"


@dataclass(frozen=True)
class FundProfile:
    code: str
    name: str
    full_name: str
    tracking_index: str
    avg_annual_return: float  # e.g. 0.07 for 7%
    dividend_yield: float  # Annual, fraction of value
    dividend_frequency: int  # Payouts per year
    expense_ratio: float
    reference_price: float  # Used when a holding has no price of its own


@dataclass(frozen=True)
class Holding:
    fund_code: str
    shares: float
    price: float | None = None  # Overrides the fund's reference price
