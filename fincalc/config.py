from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINCALC_", "extra": "ignore"}

    # Mortgage summary keeps only the first few periods of the schedule
    schedule_preview_periods: int = 3

    # Projection
    default_reinvest_dividend: bool = True


settings = Settings()
