"""
Sender defaults — the values saved in ~/.unifiedpush/config.json.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ValidationError, field_validator

from unifiedpush_sender.builders.state import Builder
from unifiedpush_sender.errors import ConfigError


class MessageDefaults(BaseModel):
    sound: Optional[str] = None
    action_category: Optional[str] = None
    ttl: Optional[int] = None
    variants: Optional[list[str]] = None
    categories: Optional[list[str]] = None
    device_types: Optional[list[str]] = None

    model_config = {"extra": "forbid"}

    @field_validator("variants", "categories", "device_types", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @classmethod
    def load(cls, data: dict[str, Any]) -> MessageDefaults:
        """Validate raw config data, raising ConfigError on bad values or unknown keys."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid sender defaults: {e}", details={"errors": e.errors()})

    def apply(self, builder: Builder) -> Builder:
        """Seed a builder with every default that is set."""
        if self.sound is not None:
            builder.message().sound(self.sound)
        if self.action_category is not None:
            builder.message().action_category(self.action_category)
        if self.variants is not None:
            builder.criteria().variants(self.variants)
        if self.categories is not None:
            builder.criteria().categories(self.categories)
        if self.device_types is not None:
            builder.criteria().device_type(self.device_types)
        if self.ttl is not None:
            builder.config().time_to_live(self.ttl)
        return builder
