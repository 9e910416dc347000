"""
UnifiedMessage — a push message in the format the UnifiedPush server expects.

The format is a generic map split in three groups: ``message`` (what the
device shows), ``criteria`` (who receives it) and ``config`` (how it is
delivered). Build one through the fluent builders::

    message = (
        UnifiedMessage.with_message()
        .alert("Hello")
        .sound("default")
        .criteria()
        .variants("c3f0a94f-48de-4b77-a08e-68114460857e")  # e.g. HR Premium
        .aliases("mike", "john")
        .categories("sport", "world cup")
        .device_type("iPad", "AndroidTablet")
        .build()
    )

A built message owns a private copy of its groups. Changing the builders
afterwards, or changing what the accessors return, never alters it.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Optional

from unifiedpush_sender.models.keys import ConfigKey, CriteriaKey, MessageKey

if TYPE_CHECKING:
    from unifiedpush_sender.builders.config import ConfigBuilder
    from unifiedpush_sender.builders.criteria import CriteriaBuilder
    from unifiedpush_sender.builders.message import MessageBuilder

MESSAGE = "message"
CRITERIA = "criteria"
CONFIG = "config"


class UnifiedMessage:
    __slots__ = ("_message", "_criteria", "_config")

    def __init__(
        self,
        message: Optional[dict[str, Any]] = None,
        criteria: Optional[dict[str, Any]] = None,
        config: Optional[dict[str, Any]] = None,
    ):
        self._message = copy.deepcopy(message)
        self._criteria = copy.deepcopy(criteria)
        self._config = copy.deepcopy(config)

    @staticmethod
    def with_message() -> MessageBuilder:
        from unifiedpush_sender.builders.state import Builder
        return Builder().message()

    @staticmethod
    def with_criteria() -> CriteriaBuilder:
        from unifiedpush_sender.builders.state import Builder
        return Builder().criteria()

    @staticmethod
    def with_config() -> ConfigBuilder:
        from unifiedpush_sender.builders.state import Builder
        return Builder().config()

    # Attribute groups. An absent group reads as an empty dict.

    @property
    def message(self) -> dict[str, Any]:
        return copy.deepcopy(self._message) or {}

    @property
    def criteria(self) -> dict[str, Any]:
        return copy.deepcopy(self._criteria) or {}

    @property
    def config(self) -> dict[str, Any]:
        return copy.deepcopy(self._config) or {}

    def to_payload(self) -> dict[str, Any]:
        """The three groups keyed by name, leaving out absent or empty ones."""
        groups = {MESSAGE: self._message, CRITERIA: self._criteria, CONFIG: self._config}
        return {name: copy.deepcopy(group) for name, group in groups.items() if group}

    # Single attribute readers

    def _read(self, group: Optional[dict[str, Any]], key: str) -> Any:
        if not group or key not in group:
            return None
        return copy.deepcopy(group[key])

    @property
    def alert(self) -> Optional[str]:
        return self._read(self._message, MessageKey.ALERT)

    @property
    def sound(self) -> Optional[str]:
        return self._read(self._message, MessageKey.SOUND)

    @property
    def badge(self) -> Optional[int]:
        return self._read(self._message, MessageKey.BADGE)

    @property
    def content_available(self) -> bool:
        return bool(self._read(self._message, MessageKey.CONTENT_AVAILABLE))

    @property
    def action_category(self) -> Optional[str]:
        return self._read(self._message, MessageKey.ACTION_CATEGORY)

    @property
    def user_data(self) -> dict[str, Any]:
        return self._read(self._message, MessageKey.USER_DATA) or {}

    @property
    def simple_push(self) -> Optional[str]:
        return self._read(self._message, MessageKey.SIMPLE_PUSH)

    @property
    def aliases(self) -> Optional[list[str]]:
        return self._read(self._criteria, CriteriaKey.ALIASES)

    @property
    def variants(self) -> Optional[list[str]]:
        return self._read(self._criteria, CriteriaKey.VARIANTS)

    @property
    def categories(self) -> Optional[set[str]]:
        return self._read(self._criteria, CriteriaKey.CATEGORIES)

    @property
    def device_type(self) -> Optional[list[str]]:
        return self._read(self._criteria, CriteriaKey.DEVICE_TYPE)

    @property
    def ttl(self) -> Optional[int]:
        return self._read(self._config, ConfigKey.TTL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnifiedMessage):
            return NotImplemented
        return self.to_payload() == other.to_payload()

    def __repr__(self) -> str:
        return f"UnifiedMessage({self.to_payload()!r})"
