"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_calculator.domain.models import RateConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-calculator"
    log_level: str = "INFO"

    # Rates (annual, percent)
    base_rate: Decimal = Decimal("15")
    insurance_discount: Decimal = Decimal("3")
    salary_client_discount: Decimal = Decimal("1")

    # Flat insurance cost added to the financed amount
    insurance_cost: Decimal = Decimal("100000")

    # Request minimums
    min_loan_amount: Decimal = Decimal("20000")
    min_scoring_amount: Decimal = Decimal("10000")
    min_term_months: int = 6

    # Policy toggles for gender-based rules
    non_binary_refusal_enabled: bool = True
    gender_age_discount_enabled: bool = True

    @model_validator(mode="after")
    def check_rate_parameters(self) -> "Settings":
        for name in ("base_rate", "insurance_discount", "salary_client_discount", "insurance_cost"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        # Cheapest offer must still carry a positive rate
        if self.base_rate - self.insurance_discount - self.salary_client_discount <= 0:
            raise ValueError("base_rate must exceed the sum of insurance and salary-client discounts")
        return self

    def rate_config(self) -> RateConfig:
        """Freeze the rate parameters into the config passed to the domain layer"""
        return RateConfig(
            base_rate=self.base_rate,
            insurance_cost=self.insurance_cost,
            insurance_discount=self.insurance_discount,
            salary_client_discount=self.salary_client_discount,
            non_binary_refusal_enabled=self.non_binary_refusal_enabled,
            gender_age_discount_enabled=self.gender_age_discount_enabled,
        )


settings = Settings()
