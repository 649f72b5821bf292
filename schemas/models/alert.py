"""
Alert descriptor.

An endpoint declares one Alert per provider type. Fields left unset (None)
are inherited from the provider's ``default-alert`` via with_defaults().
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from schemas.models.base import ConfigModel


class Alert(ConfigModel):
    type: str = "wecom"
    enabled: Optional[bool] = None
    failure_threshold: Optional[int] = Field(
        default=None, alias="failure-threshold", ge=1
    )
    success_threshold: Optional[int] = Field(
        default=None, alias="success-threshold", ge=1
    )
    description: Optional[str] = None
    send_on_resolved: Optional[bool] = Field(default=None, alias="send-on-resolved")

    def get_description(self) -> str:
        return self.description or ""

    def with_defaults(self, default: Optional["Alert"]) -> "Alert":
        """Return a copy with every unset field taken from *default*.

        Fields explicitly set on this alert always win, even when the
        default carries a different value. The alert type is never
        inherited.
        """
        if default is None:
            return self
        inherited = {
            name: getattr(default, name)
            for name in type(self).model_fields
            if name != "type"
            and getattr(self, name) is None
            and getattr(default, name) is not None
        }
        if not inherited:
            return self
        return self.model_copy(update=inherited)
