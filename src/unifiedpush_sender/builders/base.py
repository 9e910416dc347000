"""
Behaviour shared by the message, criteria and config builders.

Each sub-builder holds a reference to the session's Builder so that a chain
can pivot to a sibling (``message().criteria().config()``) without the caller
keeping several handles around.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unifiedpush_sender.builders.config import ConfigBuilder
    from unifiedpush_sender.builders.criteria import CriteriaBuilder
    from unifiedpush_sender.builders.message import MessageBuilder
    from unifiedpush_sender.builders.state import Builder
    from unifiedpush_sender.unified_message import UnifiedMessage


class AttributeBuilder:
    def __init__(self, builder: Builder):
        self._builder = builder
        self._attributes: dict[str, Any] = {}

    @property
    def builder(self) -> Builder:
        return self._builder

    @property
    def attributes(self) -> dict[str, Any]:
        """Shallow copy of the attribute group collected so far."""
        return dict(self._attributes)

    def message(self) -> MessageBuilder:
        return self._builder.message()

    def criteria(self) -> CriteriaBuilder:
        return self._builder.criteria()

    def config(self) -> ConfigBuilder:
        return self._builder.config()

    def build(self) -> UnifiedMessage:
        return self._builder.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attributes!r})"
