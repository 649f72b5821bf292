"""
Ambient configuration via pydantic-settings.

Settings are loaded from environment variables (and .env file). The WeCom
provider configuration itself is declarative (webhook-url / overrides) and
lives in schemas.models.alert_provider; these settings only cover the
process-level concerns around it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Deadline for one webhook call; the provider itself never retries
    alert_http_timeout_seconds: float = 10.0


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"

    # Hours east of UTC used for the "update time" line of alert messages
    alert_utc_offset_hours: int = 8

    http: Optional[HttpClientSettings] = None
    logging: Optional[LoggingSettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        if self.http is None:
            self.http = HttpClientSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
