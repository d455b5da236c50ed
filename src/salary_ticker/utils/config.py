# src/salary_ticker/utils/config.py
"""
Environment-driven settings. Everything has a default, so a bare
checkout runs without a .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SETTINGS_PATH = Path.home() / ".salary_ticker" / "settings.json"


class TickerSettings(BaseSettings):
    """
    Configuration loaded from environment variables and .env.
    """
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    # Quote service (optional; no key -> static quotes only)
    gemini_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    quote_timeout: float = 10.0

    # Local settings blob
    settings_path: Path = Field(
        default=DEFAULT_SETTINGS_PATH,
        validation_alias=AliasChoices("SALARY_TICKER_SETTINGS_PATH", "SETTINGS_PATH"),
    )

    # Dashboard refresh cadence in seconds
    refresh_interval: float = 0.1

    def __repr__(self):
        return f"<TickerSettings settings_path={self.settings_path} model={self.gemini_model}>"


# Singleton
config = TickerSettings()
