"""
WeCom alert provider configuration.

Declarative schema::

    webhook-url: https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=...
    default-alert:
      description: "health check failed"
      send-on-resolved: true
    overrides:
      - group: infra
        webhook-url: https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=...

Overrides are matched by exact group name in their configured order.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from errors import ConfigurationError
from schemas.models.alert import Alert
from schemas.models.base import ConfigModel


class Override(ConfigModel):
    """A group whose alerts go to a different webhook than the default."""

    group: str = ""
    webhook_url: str = Field(default="", alias="webhook-url")


class WeComProviderConfig(ConfigModel):
    webhook_url: str = Field(default="", alias="webhook-url")
    default_alert: Optional[Alert] = Field(default=None, alias="default-alert")
    overrides: tuple[Override, ...] = ()

    @field_validator("overrides", mode="before")
    @classmethod
    def _absent_overrides(cls, value):
        # `overrides:` with no entries parses to None
        return () if value is None else value

    def validation_errors(self) -> list[str]:
        """Return every structural problem, in override order."""
        problems: list[str] = []
        registered_groups: set[str] = set()
        for index, override in enumerate(self.overrides):
            if not override.group:
                problems.append(f"overrides[{index}]: group must not be empty")
            elif override.group in registered_groups:
                problems.append(
                    f"overrides[{index}]: group {override.group!r} is already registered"
                )
            if not override.webhook_url:
                problems.append(f"overrides[{index}]: webhook-url must not be empty")
            registered_groups.add(override.group)
        if not self.webhook_url:
            problems.append("webhook-url must not be empty")
        return problems

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def ensure_valid(self) -> "WeComProviderConfig":
        problems = self.validation_errors()
        if problems:
            raise ConfigurationError(problems[0], details=problems)
        return self

    def webhook_url_for_group(self, group: str) -> str:
        """Return the webhook of the first override for *group*, else the default."""
        for override in self.overrides:
            if override.group == group:
                return override.webhook_url
        return self.webhook_url
