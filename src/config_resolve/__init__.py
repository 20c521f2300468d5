from .core import Resolver
from .domain import ResolveOptions, ResolverDefaults, Lookup, LoadResult
from .types import Priority, ValueType, MISSING
from .validators import (
    ConfigError,
    ConfigOptionsError,
    ConfigValueError,
    ConfigPriorityError,
    ConfigFileNotFoundError,
    ConfigFileError
)
from .sources import (
    StructuredSource,
    ProcessEnvironment,
    DictSource,
    YamlConfigSource,
    OsEnvironment,
    DotenvEnvironment
)
from .logger import (
    ConfigLogger,
    ConsoleLogger,
    StdlibLogger,
    SilentLogger,
    get_logger,
    set_log_level,
    get_log_level
)
from .parsing import parse_value

__all__ = [
    "Resolver",
    "ResolveOptions",
    "ResolverDefaults",
    "Lookup",
    "LoadResult",
    "Priority",
    "ValueType",
    "MISSING",
    "ConfigError",
    "ConfigOptionsError",
    "ConfigValueError",
    "ConfigPriorityError",
    "ConfigFileNotFoundError",
    "ConfigFileError",
    "StructuredSource",
    "ProcessEnvironment",
    "DictSource",
    "YamlConfigSource",
    "OsEnvironment",
    "DotenvEnvironment",
    "ConfigLogger",
    "ConsoleLogger",
    "StdlibLogger",
    "SilentLogger",
    "get_logger",
    "set_log_level",
    "get_log_level",
    "parse_value"
]
