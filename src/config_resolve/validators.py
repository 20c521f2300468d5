"""Exceptions raised by config_resolve."""
from typing import Any, Optional


class ConfigError(Exception):
    """Base exception for every configuration resolution failure."""
    pass


class ConfigOptionsError(ConfigError):
    """Raised when a resolution request is empty or names no key."""
    pass


class ConfigValueError(ConfigError):
    def __init__(self, message: str, key: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.key = key
        self.source = source


class ConfigPriorityError(ConfigError):
    def __init__(self, priority: Any):
        super().__init__(f"Invalid priority {priority!r}")
        self.priority = priority


class ConfigFileNotFoundError(ConfigError):
    """Raised when a YAML config file cannot be located."""
    pass


class ConfigFileError(ConfigError):
    """Raised when a YAML config file cannot be parsed."""
    pass
