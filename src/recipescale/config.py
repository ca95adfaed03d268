"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Quantity formatting policy
    fraction_denominators: list[int] = [2, 3, 4, 8, 16]
    fraction_max_error: float = 0.035
    decimal_places: int = 2

    @field_validator("fraction_denominators")
    @classmethod
    def _sorted_positive_denominators(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one denominator is required")
        if any(d <= 0 for d in value):
            raise ValueError("denominators must be positive")
        return sorted(set(value))

    @field_validator("fraction_max_error")
    @classmethod
    def _error_in_unit_interval(cls, value: float) -> float:
        if not 0 <= value < 1:
            raise ValueError("fraction_max_error must be in [0, 1)")
        return value

    @field_validator("decimal_places")
    @classmethod
    def _non_negative_places(cls, value: int) -> int:
        if value < 0:
            raise ValueError("decimal_places must be >= 0")
        return value

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
