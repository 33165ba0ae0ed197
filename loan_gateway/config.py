"""Configuration management using Pydantic Settings"""

from dataclasses import fields

from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.models import DecisionConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Loan boundaries (amount in euros, period in months)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 48

    # Credit segments
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000
    credit_score_threshold: float = 0.1

    # Age eligibility
    min_age: int = 18
    life_expectancy_estonia: int = 84
    life_expectancy_latvia: int = 82
    life_expectancy_lithuania: int = 86

    def decision_config(self) -> DecisionConfig:
        """Freeze the decision constants into the value passed to the engine"""
        return DecisionConfig(**{f.name: getattr(self, f.name) for f in fields(DecisionConfig)})


settings = Settings()
