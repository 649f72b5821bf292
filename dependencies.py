"""
Dependency providers for the alert dispatch engine.

Plain functions that build the objects an engine needs: settings, the
shared HTTP client and configured alert providers. The engine owns the
returned HttpClient and must close it on shutdown.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional

from config import AppSettings
from infrastructure.http_client import HttpClient
from infrastructure.webhook.protocol import AlertProvider
from infrastructure.webhook.wecom import WeComAlertProvider
from schemas.models.alert_provider import WeComProviderConfig
from shared.datetime_utils import fixed_offset
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide AppSettings, loaded once."""
    return AppSettings()


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """Re-apply logging setup using LoggingSettings instead of raw env defaults."""
    settings = settings or get_settings()
    setup_logging(settings.logging.log_level, settings.logging.log_format)


def get_http_client(settings: Optional[AppSettings] = None) -> HttpClient:
    settings = settings or get_settings()
    return HttpClient.from_settings(settings.http)


def build_wecom_provider(
    raw_config: Optional[Mapping[str, Any]],
    http_client: HttpClient,
    settings: Optional[AppSettings] = None,
) -> WeComAlertProvider:
    """Parse and validate a ``wecom`` provider section.

    Raises:
        ConfigurationError: the section does not match the schema or fails
            WeComProviderConfig validation.
    """
    settings = settings or get_settings()
    config = WeComProviderConfig.from_mapping(raw_config).ensure_valid()
    log.info(
        "wecom_provider_configured",
        override_groups=[override.group for override in config.overrides],
        has_default_alert=config.default_alert is not None,
    )
    return WeComAlertProvider(
        config,
        http_client,
        tz=fixed_offset(settings.alert_utc_offset_hours),
    )


def build_alert_providers(
    alerting: Optional[Mapping[str, Any]],
    http_client: HttpClient,
    settings: Optional[AppSettings] = None,
) -> dict[str, AlertProvider]:
    """Build a provider for every supported section of an ``alerting`` block.

    Sections for provider types this package does not implement are left to
    other packages and skipped.
    """
    providers: dict[str, AlertProvider] = {}
    for provider_type, raw_config in (alerting or {}).items():
        if provider_type == "wecom":
            providers[provider_type] = build_wecom_provider(raw_config, http_client, settings)
        else:
            log.debug("alert_provider_skipped", provider_type=provider_type)
    return providers
