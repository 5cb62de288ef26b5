"""Domain enums — pure Python, no external dependencies."""

from enum import Enum, IntEnum


class ChoiceKind(str, Enum):
    FREE_TEXT = "free_text"
    FIXED = "fixed"
    ENUMERATED = "enumerated"


class FieldKind(str, Enum):
    HEADER = "header"
    TEXT = "text"
    DROPDOWN = "dropdown"
    REGEX_TEXT = "regex_text"
    COUNTRY_DROPDOWN = "country_dropdown"


class GeoStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ChangeLevel(IntEnum):
    """How strongly a field has changed since the last write."""

    NONE = 0
    STRICT = 1  # re-assigned with a loosely equal value (None <-> "")
    VALUE = 2  # value actually differs
