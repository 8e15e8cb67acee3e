from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration read from environment variables."""

    app_name: str = Field(default="Box Office")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(levelname)s %(name)s %(message)s")

    # Demo runner configuration
    demo_price: Decimal = Field(default=Decimal("49.99"), ge=0)
    demo_sector: str = Field(default="C", min_length=1, max_length=1)

    model_config = SettingsConfigDict(
        env_prefix="BOXOFFICE_",
        env_file=".env",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()
