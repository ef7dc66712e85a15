"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "debt-planner"
    log_level: str = "INFO"

    # Simulation horizons (months)
    default_horizon_months: int = 120  # full payoff schedule, 10 years
    projection_horizon_months: int = 60  # debt/wealth forecast, 5 years
    projection_min_months: int = 12  # keep forecasting this long after payoff
    max_horizon_months: int = 600  # upper bound accepted from requests

    # Reminders
    reminder_lookahead_days: int = 3


settings = Settings()
