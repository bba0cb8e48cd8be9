"""Canonical test fixtures used across all engine tests.

Fixture portfolio: 1,000 shares of 0050 and 2,000 shares of 0056 at
reference prices, topped up 10,000/month for two years (60/40 split) then
20,000/month for three more.
"""

import pytest

from fincalc.models.fund import Holding
from fincalc.models.projection import ContributionStage


@pytest.fixture
def two_fund_holdings() -> list[Holding]:
    return [
        Holding(fund_code="0050", shares=1000),
        Holding(fund_code="0056", shares=2000),
    ]


@pytest.fixture
def staged_allocation() -> list[ContributionStage]:
    return [
        ContributionStage(
            start_month=1,
            end_month=24,
            monthly_amount=10000,
            allocation={"0050": 60, "0056": 40},
        ),
        ContributionStage(
            start_month=25,
            end_month=60,
            monthly_amount=20000,
            allocation={"0050": 50, "0056": 50},
        ),
    ]


@pytest.fixture
def single_stage() -> list[ContributionStage]:
    """5,000/month for 10 years."""
    return [ContributionStage(start_month=1, end_month=120, monthly_amount=5000)]
