"""
Delivery configuration attributes.
"""

from __future__ import annotations

from unifiedpush_sender.builders.base import AttributeBuilder
from unifiedpush_sender.models.keys import ConfigKey


class ConfigBuilder(AttributeBuilder):

    def time_to_live(self, seconds: int) -> ConfigBuilder:
        """Specify the Time To Live of the message, in seconds.

        If a device stays offline longer than this, the push networks may drop
        the message instead of delivering it. The value is passed through as-is.
        """
        self._attributes[ConfigKey.TTL] = seconds
        return self
