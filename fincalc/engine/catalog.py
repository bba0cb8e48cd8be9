"""Static ETF catalog.

Read-only: built once at import and exposed as a mapping proxy.
Reference prices as of 2024/12.
"""

from types import MappingProxyType

from fincalc.models.fund import FundProfile, UnknownFundError

_FUNDS = (
    FundProfile(
        code="0050",
        name="元大台灣50",
        full_name="元大台灣卓越50證券投資信託基金",
        tracking_index="台灣50指數",
        avg_annual_return=0.07,
        dividend_yield=0.03,
        dividend_frequency=2,
        expense_ratio=0.0032,
        reference_price=62.20,
    ),
    FundProfile(
        code="0056",
        name="元大高股息",
        full_name="元大台灣高股息證券投資信託基金",
        tracking_index="台灣高股息指數",
        avg_annual_return=0.065,
        dividend_yield=0.055,
        dividend_frequency=4,  # Quarterly
        expense_ratio=0.0074,
        reference_price=36.40,
    ),
    FundProfile(
        code="0061",
        name="元大寶滬深",
        full_name="元大標智滬深300證券投資信託基金",
        tracking_index="滬深300指數",
        avg_annual_return=0.08,
        dividend_yield=0.02,
        dividend_frequency=1,
        expense_ratio=0.0099,
        reference_price=19.0,
    ),
    FundProfile(
        code="00878",
        name="國泰永續高股息",
        full_name="國泰台灣ESG永續高股息ETF基金",
        tracking_index="MSCI臺灣ESG永續高股息精選30指數",
        avg_annual_return=0.075,
        dividend_yield=0.05,
        dividend_frequency=4,  # Quarterly
        expense_ratio=0.0054,
        reference_price=23.0,
    ),
    FundProfile(
        code="00919",
        name="群益台灣精選高息",
        full_name="群益台灣精選高息ETF基金",
        tracking_index="臺灣指數公司特選高息50指數",
        avg_annual_return=0.07,
        dividend_yield=0.06,
        dividend_frequency=12,  # Monthly
        expense_ratio=0.0054,
        reference_price=18.0,
    ),
)

FUND_CATALOG: MappingProxyType[str, FundProfile] = MappingProxyType(
    {fund.code: fund for fund in _FUNDS}
)


def get_fund(code: str) -> FundProfile:
    """Look up a fund profile by code. Raises UnknownFundError if absent."""
    fund = FUND_CATALOG.get(code)
    if fund is None:
        raise UnknownFundError(code)
    return fund
