"""Configuration management using Pydantic Settings"""

from typing import List, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from approu_calculators.domain.rate_tables import RateTables


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./approu.db"

    # Service
    service_name: str = "approu-calculators"
    log_level: str = "INFO"

    # Lending rules (Canadian defaults; override when the regulator publishes new tables)
    gds_ratio: float = 0.35
    tds_ratio: float = 0.42
    principal_interest_share: float = 0.80
    insured_price_cap: float = 1_000_000
    min_down_first_tier_limit: float = 500_000
    min_down_first_tier_rate: float = 0.05
    min_down_second_tier_rate: float = 0.10
    min_down_over_cap_rate: float = 0.20
    insurance_free_down_percent: float = 20.0
    # JSON in env, e.g. INSURANCE_PREMIUM_TIERS='[[15, 0.028], [10, 0.031], [5, 0.04]]'
    insurance_premium_tiers: List[Tuple[float, float]] = [(15.0, 0.028), (10.0, 0.031), (5.0, 0.040)]

    def rate_tables(self) -> RateTables:
        """Freeze the configured lending rules into the table the calculators consume"""
        return RateTables(
            gds_ratio=self.gds_ratio,
            tds_ratio=self.tds_ratio,
            principal_interest_share=self.principal_interest_share,
            insured_price_cap=self.insured_price_cap,
            min_down_first_tier_limit=self.min_down_first_tier_limit,
            min_down_first_tier_rate=self.min_down_first_tier_rate,
            min_down_second_tier_rate=self.min_down_second_tier_rate,
            min_down_over_cap_rate=self.min_down_over_cap_rate,
            insurance_free_down_percent=self.insurance_free_down_percent,
            insurance_premium_tiers=tuple(
                sorted(((float(t), float(r)) for t, r in self.insurance_premium_tiers), reverse=True)
            ),
        )


settings = Settings()
