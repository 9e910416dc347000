"""
Reserved attribute names — must match the UnifiedPush server exactly.
"""


class MessageKey:
    ALERT = "alert"
    SOUND = "sound"
    BADGE = "badge"
    CONTENT_AVAILABLE = "content-available"
    ACTION_CATEGORY = "action-category"
    USER_DATA = "user-data"
    SIMPLE_PUSH = "simple-push"


class CriteriaKey:
    ALIASES = "alias"
    VARIANTS = "variants"
    CATEGORIES = "categories"
    DEVICE_TYPE = "deviceType"


class ConfigKey:
    TTL = "ttl"


SIMPLE_PUSH_VERSION_PREFIX = "version="
