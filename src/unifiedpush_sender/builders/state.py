"""
Builder — the state shared by one message-construction session.

Holds at most one of each sub-builder. The accessors create the sub-builder on
first use and hand back the same instance afterwards, so every chain in the
session writes into the same attribute groups.
"""

from __future__ import annotations

import logging
from typing import Optional

from unifiedpush_sender.builders.config import ConfigBuilder
from unifiedpush_sender.builders.criteria import CriteriaBuilder
from unifiedpush_sender.builders.message import MessageBuilder
from unifiedpush_sender.unified_message import UnifiedMessage

logger = logging.getLogger(__name__)


class Builder:
    def __init__(self) -> None:
        self._message: Optional[MessageBuilder] = None
        self._criteria: Optional[CriteriaBuilder] = None
        self._config: Optional[ConfigBuilder] = None

    def message(self) -> MessageBuilder:
        """Return the session's message builder, creating it on first call."""
        if self._message is None:
            logger.debug("Creating message builder")
            self._message = MessageBuilder(self)
        return self._message

    def criteria(self) -> CriteriaBuilder:
        """Return the session's criteria builder, creating it on first call."""
        if self._criteria is None:
            logger.debug("Creating criteria builder")
            self._criteria = CriteriaBuilder(self)
        return self._criteria

    def config(self) -> ConfigBuilder:
        """Return the session's config builder, creating it on first call."""
        if self._config is None:
            logger.debug("Creating config builder")
            self._config = ConfigBuilder(self)
        return self._config

    def build(self) -> UnifiedMessage:
        """Snapshot whichever groups exist into an immutable UnifiedMessage."""
        message = UnifiedMessage(
            message=self._message.attributes if self._message else None,
            criteria=self._criteria.attributes if self._criteria else None,
            config=self._config.attributes if self._config else None,
        )
        logger.debug("Built %r", message)
        return message
