"""
unifiedpush-sender — build push messages for a UnifiedPush server.

Fluent message, criteria and config builders producing an immutable
UnifiedMessage, ready for whatever transport delivers it.
"""

from unifiedpush_sender.unified_message import UnifiedMessage
from unifiedpush_sender.builders import Builder, MessageBuilder, CriteriaBuilder, ConfigBuilder
from unifiedpush_sender.errors import UnifiedPushError, InvalidFormat, ConfigError
from unifiedpush_sender.models.keys import MessageKey, CriteriaKey, ConfigKey

__version__ = "0.1.0"
__all__ = [
    "UnifiedMessage",
    "Builder",
    "MessageBuilder",
    "CriteriaBuilder",
    "ConfigBuilder",
    "UnifiedPushError",
    "InvalidFormat",
    "ConfigError",
    "MessageKey",
    "CriteriaKey",
    "ConfigKey",
]
