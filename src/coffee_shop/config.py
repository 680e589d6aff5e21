"""Application configuration via pydantic-settings.

Reads `COFFEE_SHOP_*` environment variables and an optional .env file in the
working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coffee_shop.domain.models import PreparationDelays


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Preparation (seconds) ---
    initial_delay: float = Field(default=2.0, ge=0)
    milk_delay: float = Field(default=1.0, ge=0)
    syrup_delay: float = Field(default=1.0, ge=0)

    # --- Logging ---
    log_level: str = "INFO"

    def delays(self) -> PreparationDelays:
        return PreparationDelays(initial=self.initial_delay, milk=self.milk_delay, syrup=self.syrup_delay)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
