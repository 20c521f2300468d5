"""
Config Resolve Logger
Loggers accepted by the Resolver: console, stdlib logging adapter and silent.
"""
import os
import sys
import logging
from typing import Literal, Any, Optional

LogLevel = Literal['silent', 'error', 'warn', 'info']

class ConfigLogger:
    def error(self, message: str, *args: Any) -> None: ...
    def warn(self, message: str, *args: Any) -> None: ...
    def info(self, message: str, *args: Any) -> None: ...

LOG_LEVELS = {
    'silent': 0,
    'error': 1,
    'warn': 2,
    'info': 3
}

_current_level: LogLevel = 'info'

# Detect initial log level from env
env_level = os.getenv('CONFIG_RESOLVE_LOG_LEVEL', '').lower()
if env_level in LOG_LEVELS:
    _current_level = env_level # type: ignore

PREFIX = os.getenv('CONFIG_RESOLVE_LOG_PREFIX', '[config-resolve]')

def get_log_level() -> LogLevel:
    return _current_level

def set_log_level(level: LogLevel) -> None:
    global _current_level
    if level in LOG_LEVELS:
        _current_level = level

class ConsoleLogger(ConfigLogger):
    def _should_log(self, level: LogLevel) -> bool:
        return LOG_LEVELS[level] <= LOG_LEVELS[_current_level]

    def _format(self, message: str) -> str:
        return f"{PREFIX} {message}"

    def error(self, message: str, *args: Any) -> None:
        if self._should_log('error'):
            print(self._format(message), *args, file=sys.stderr)

    def warn(self, message: str, *args: Any) -> None:
        if self._should_log('warn'):
            print(self._format(message), *args, file=sys.stderr)

    def info(self, message: str, *args: Any) -> None:
        if self._should_log('info'):
            print(self._format(message), *args, file=sys.stdout)

class StdlibLogger(ConfigLogger):
    """Forwards to a `logging.Logger` (``config_resolve`` unless given)."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('config_resolve')

    def error(self, message: str, *args: Any) -> None:
        self.logger.error(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self.logger.warning(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.logger.info(message, *args)

class SilentLogger(ConfigLogger):
    """Drops every message. Installed when logging is disabled."""

    def error(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

_logger_instance = ConsoleLogger()

def get_logger() -> ConfigLogger:
    return _logger_instance
