"""Configuration settings for the credit engine."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ambient settings loaded from environment variables.

    The point tables are business constants and live in
    ``credit_engine.scoring.tables``, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDIT_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service identification
    service_name: str = "credit-engine"

    # Logging
    log_level: str = "INFO"

    # Prometheus instrumentation of CreditCalculator
    metrics_enabled: bool = True


settings = Settings()
