"""Application configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Excellence eligibility settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Excellence Eligibility"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Eligibility rule (changes between seasons: 0.30 in 2023-24, 0.40 after)
    EXCELLENCE_PERCENTILE: float = Field(default=0.40, gt=0.0, lt=1.0)
    EXCELLENCE_AWARD_KEYWORD: str = Field(default="Excellence Award", min_length=1)
    GRADE_SPLIT_MIN_AWARDS: int = Field(
        default=2,
        ge=2,
        description="Number of excellence awards at which an event splits them by grade",
    )

    # Event data source
    ROBOTEVENTS_TOKEN: Optional[SecretStr] = None

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has a data source token."""
        if self.APP_ENV == "production" and self.ROBOTEVENTS_TOKEN is None:
            raise ValueError("ROBOTEVENTS_TOKEN is required in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
