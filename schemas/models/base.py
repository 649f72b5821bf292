"""
Base model for declarative alerting configuration.

Configuration is parsed once at startup from a YAML-like mapping whose keys
are hyphenated (``webhook-url``, ``default-alert``). Field aliases map those
keys to Python identifiers, and models are frozen so a parsed configuration
cannot change while alerts are being sent.

from_mapping() converts a raw mapping → model instance and reports schema
problems as ConfigurationError instead of pydantic's ValidationError.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from errors import ConfigurationError


class ConfigModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]):
        """Build a model from a raw configuration mapping.

        ``None`` is treated as an empty mapping so that an absent section
        yields a model with its defaults.
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"invalid {cls.__name__} configuration: expected a mapping, "
                f"got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"invalid {cls.__name__} configuration",
                details=e.errors(include_url=False),
            ) from e

    def to_mapping(self) -> dict:
        """Return the configuration using its declarative (hyphenated) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
