from dataclasses import FrozenInstanceError

import pytest

from fincalc.engine.catalog import FUND_CATALOG, get_fund
from fincalc.models.fund import UnknownFundError


class TestFundCatalog:
    def test_known_codes(self):
        assert set(FUND_CATALOG) == {"0050", "0056", "0061", "00878", "00919"}

    def test_keys_match_profile_codes(self):
        for code, fund in FUND_CATALOG.items():
            assert fund.code == code

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            FUND_CATALOG["0050"] = FUND_CATALOG["0056"]

    def test_profiles_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            FUND_CATALOG["0050"].avg_annual_return = 0.5


class TestGetFund:
    def test_lookup(self):
        fund = get_fund("0056")
        assert fund.dividend_yield == 0.055
        assert fund.dividend_frequency == 4
        assert fund.reference_price == 36.40

    def test_unknown_code(self):
        with pytest.raises(UnknownFundError) as exc_info:
            get_fund("9999")
        assert exc_info.value.code == "9999"
        assert "9999" in str(exc_info.value)

    def test_unknown_code_is_key_error(self):
        with pytest.raises(KeyError):
            get_fund("")
