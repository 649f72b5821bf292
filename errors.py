"""
Alerting error hierarchy.

AlertingError is the base for all typed errors raised by alert providers.
Callers (the alert dispatch engine) catch AlertingError and decide whether
and when to retry; providers never retry or swallow failures themselves.
"""

from __future__ import annotations

from typing import Any, Optional


class AlertingError(Exception):
    """Base alerting error. All typed errors inherit from this."""

    error_code: str = "alerting_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(AlertingError):
    error_code = "configuration_error"


class TransportError(AlertingError):
    """The request could not be built or sent. The cause is chained."""

    error_code = "transport_error"


class DeliveryError(AlertingError):
    """The webhook answered with an error status (>= 400)."""

    error_code = "delivery_error"

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(
            f"call to provider alert returned status code {status_code}: {body}",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
