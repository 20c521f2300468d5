from enum import Enum
from typing import Any, Optional


class Priority(str, Enum):
    """Which source is tried first."""
    CONFIG = 'config'
    ENV = 'env'

    def invert(self) -> 'Priority':
        return Priority.ENV if self is Priority.CONFIG else Priority.CONFIG


class ValueType(str, Enum):
    """Tags used to parse environment variable strings."""
    ARRAY = 'array'
    BOOLEAN = 'boolean'
    FLOAT = 'float'
    INTEGER = 'integer'
    JSON = 'json'
    NULL = 'null'
    STRING = 'string'
    DATE = 'date'


class _Missing:
    """Marker for "no value" (distinct from None, which is a real value)."""
    _instance: Optional['_Missing'] = None

    def __new__(cls) -> '_Missing':
        if cls._instance is None:
            cls._instance = super(_Missing, cls).__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def coerce_enum(enum_cls: type, value: Any) -> Any:
    """Map a member, value or name (any case) to an enum member.

    Unknown input is returned unchanged so callers can report it.
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        for member in enum_cls:
            if member.value == lowered or member.name.lower() == lowered:
                return member
    return value
