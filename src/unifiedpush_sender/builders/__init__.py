from unifiedpush_sender.builders.state import Builder
from unifiedpush_sender.builders.message import MessageBuilder
from unifiedpush_sender.builders.criteria import CriteriaBuilder
from unifiedpush_sender.builders.config import ConfigBuilder

__all__ = ["Builder", "MessageBuilder", "CriteriaBuilder", "ConfigBuilder"]
