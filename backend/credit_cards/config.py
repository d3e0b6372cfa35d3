"""Application configuration using pydantic-settings."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Decision policy
    AUTO_ACCEPT_MIN_INCOME: Decimal = Decimal("100000")
    AUTO_DECLINE_BELOW_INCOME: Decimal = Decimal("20000")
    REFER_BELOW_AGE: int = 20
    DETAILED_VALIDATION_MIN_AGE: int = 30
    EXPIRED_LICENSE_KEY: str = "EXPIRED"

    # Frequent flyer validator
    VALIDATOR_LICENSE_KEY: str = "ACTIVE"
    VALIDATOR_ACCEPTED_PREFIXES: str = "x,y,z"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def validator_accepted_prefixes_list(self) -> list[str]:
        """Parse accepted frequent flyer prefixes, skipping blanks."""
        return [
            prefix.strip()
            for prefix in self.VALIDATOR_ACCEPTED_PREFIXES.split(",")
            if prefix.strip()
        ]


# Global settings instance
settings = Settings()
