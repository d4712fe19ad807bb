from datetime import time

from pydantic import model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from contribart.services.level_service import ThresholdPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    An invalid threshold policy fails here, at startup, rather than on the
    first request that needs it.
    """

    github_graphql_url: str = "https://api.github.com/graphql"
    github_api_url: str = "https://api.github.com"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    rate_limit_per_minute: int = 30
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"

    min_year: int = 2008
    ceiling_floor: int = 10
    level_fractions: tuple[float, float] = (0.25, 0.5)
    commit_time: time = time(12, 0, 0)
    commit_message: str = "contribart pattern"
    default_font: str = "block"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def check_threshold_policy(self) -> "Settings":
        self.threshold_policy()
        return self

    def threshold_policy(self) -> ThresholdPolicy:
        return ThresholdPolicy(
            floor=self.ceiling_floor,
            fractions=self.level_fractions,
        )
