"""
Notification content attributes.

Values are stored under the keys the UnifiedPush server expects (see
``models.keys.MessageKey``). Three of them are normalised on the way in:

- ``badge`` is parsed to an int and rejected with InvalidFormat otherwise.
- ``content-available`` is only ever stored as ``True``.
- ``simple-push`` always carries the ``version=`` prefix exactly once.

User data lives in its own mapping and is folded into the group under
``user-data`` whenever the attributes are read.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from unifiedpush_sender.builders.base import AttributeBuilder
from unifiedpush_sender.errors import InvalidFormat
from unifiedpush_sender.models.keys import MessageKey, SIMPLE_PUSH_VERSION_PREFIX

if TYPE_CHECKING:
    from unifiedpush_sender.builders.state import Builder

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_badge(badge: Union[str, int]) -> int:
    if isinstance(badge, int) and not isinstance(badge, bool):
        return badge
    if isinstance(badge, str) and _INTEGER.fullmatch(badge):
        return int(badge)
    logger.debug("Rejecting badge value %r", badge)
    raise InvalidFormat(
        f"Badge must be an integer, got {badge!r}",
        details={"field": MessageKey.BADGE, "value": badge},
    )


def fix_version(version: str) -> str:
    if not version.startswith(SIMPLE_PUSH_VERSION_PREFIX):
        return SIMPLE_PUSH_VERSION_PREFIX + version
    return version


class MessageBuilder(AttributeBuilder):

    def __init__(self, builder: Builder):
        super().__init__(builder)
        self._user_data: dict[str, Any] = {}

    @property
    def attributes(self) -> dict[str, Any]:
        attributes = dict(self._attributes)
        if self._user_data:
            attributes[MessageKey.USER_DATA] = dict(self._user_data)
        return attributes

    def alert(self, message: str) -> MessageBuilder:
        """Text displayed on the alert UI element."""
        self._attributes[MessageKey.ALERT] = message
        return self

    def sound(self, sound: str) -> MessageBuilder:
        """Name of the sound file to play, i.e. ``"default"``."""
        self._attributes[MessageKey.SOUND] = sound
        return self

    def badge(self, badge: Union[str, int]) -> MessageBuilder:
        """Value of the badge icon. Raises InvalidFormat unless it is an integer."""
        self._attributes[MessageKey.BADGE] = parse_badge(badge)
        return self

    def content_available(self) -> MessageBuilder:
        """Mark the payload as 'content-available' (silent / Newsstand notifications on iOS)."""
        self._attributes[MessageKey.CONTENT_AVAILABLE] = True
        return self

    def action_category(self, action_category: str) -> MessageBuilder:
        """Identifier of the action category for interactive notifications (iOS 8+)."""
        self._attributes[MessageKey.ACTION_CATEGORY] = action_category
        return self

    def simple_push(self, version: Optional[str]) -> MessageBuilder:
        """Version for the SimplePush broadcast channel, i.e. ``"version=5"`` or ``"5"``.

        Passing None clears a previously set version.
        """
        if version is None:
            self._attributes.pop(MessageKey.SIMPLE_PUSH, None)
        else:
            self._attributes[MessageKey.SIMPLE_PUSH] = fix_version(version)
        return self

    def user_data(self, key: str, value: Any) -> MessageBuilder:
        self._user_data[key] = value
        return self

    def replace_user_data(self, user_data: Mapping[str, Any]) -> MessageBuilder:
        """Swap out all user data, discarding entries added with user_data()."""
        self._user_data = dict(user_data)
        return self

    def attribute(self, key: str, value: Any) -> MessageBuilder:
        """Set a custom top-level attribute in the message group."""
        self._attributes[key] = value
        return self

    def merge_attributes(self, attributes: Mapping[str, Any]) -> MessageBuilder:
        """Merge custom attributes into the message group, key by key."""
        self._attributes.update(attributes)
        return self
