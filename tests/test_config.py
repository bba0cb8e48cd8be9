from fincalc.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FINCALC_SCHEDULE_PREVIEW_PERIODS", raising=False)
        monkeypatch.delenv("FINCALC_DEFAULT_REINVEST_DIVIDEND", raising=False)
        s = Settings(_env_file=None)
        assert s.schedule_preview_periods == 3
        assert s.default_reinvest_dividend is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FINCALC_SCHEDULE_PREVIEW_PERIODS", "12")
        monkeypatch.setenv("FINCALC_DEFAULT_REINVEST_DIVIDEND", "false")
        s = Settings(_env_file=None)
        assert s.schedule_preview_periods == 12
        assert s.default_reinvest_dividend is False
