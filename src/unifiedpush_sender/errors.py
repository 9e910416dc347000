"""
UnifiedPush sender error types.
"""

from typing import Any, Optional


class UnifiedPushError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidFormat(UnifiedPushError):
    """A value could not be coerced to the shape its attribute requires."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_format", message, details)


class ConfigError(UnifiedPushError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("config_error", message, details)
