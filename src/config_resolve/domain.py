"""Data models for config_resolve."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .logger import ConfigLogger, StdlibLogger
from .types import MISSING, Priority, ValueType, coerce_enum


class ResolveOptions(BaseModel):
    """A single resolution request.

    Every field also accepts the short alias used by ``Resolver.get``:
    ``n``, ``c``, ``pro``, ``d``, ``ty``, ``pri``, ``th``.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra='forbid')

    name: Optional[str] = Field(default=None, alias='n', description="Logical setting name")
    config_name: Optional[str] = Field(default=None, alias='c', description="Key in the structured source")
    process_name: Optional[str] = Field(default=None, alias='pro', description="Environment variable name")
    default_value: Any = Field(default=None, alias='d', description="Returned when no source has a value")
    # Unknown tags are kept as given and reported by the Resolver under its strict/lenient policy
    type: Optional[Union[ValueType, Any]] = Field(default=None, alias='ty', description="ValueType used to parse env strings")
    priority: Optional[Union[Priority, Any]] = Field(default=None, alias='pri', description="Priority: which source is tried first")
    strict: Optional[bool] = Field(default=None, alias='th', description="Raise instead of logging failures")

    @field_validator('type', mode='before')
    @classmethod
    def coerce_type(cls, value: Any) -> Any:
        return coerce_enum(ValueType, value)

    @field_validator('priority', mode='before')
    @classmethod
    def coerce_priority(cls, value: Any) -> Any:
        return coerce_enum(Priority, value)

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def has_key(self) -> bool:
        return any(k is not None for k in (self.name, self.config_name, self.process_name))


class ResolverDefaults(BaseModel):
    """Process-lifetime defaults of a Resolver. Unset fields keep prior values."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    log: Optional[Any] = Field(default=None, description="ConfigLogger (or logging.Logger) to report through")
    disable_log: Optional[bool] = Field(default=None, description="Install a SilentLogger")
    priority: Optional[Priority] = None
    strict: Optional[bool] = None
    type: Optional[ValueType] = None

    @field_validator('log', mode='before')
    @classmethod
    def check_logger(cls, value: Any) -> Any:
        if value is None or isinstance(value, ConfigLogger):
            return value
        if isinstance(value, logging.Logger):
            return StdlibLogger(value)
        for method in ('info', 'warn', 'error'):
            if not callable(getattr(value, method, None)):
                raise ValueError(f"Logger must provide '{method}'")
        return value

    @field_validator('priority', mode='before')
    @classmethod
    def coerce_priority(cls, value: Any) -> Any:
        return coerce_enum(Priority, value)

    @field_validator('type', mode='before')
    @classmethod
    def coerce_type(cls, value: Any) -> Any:
        return coerce_enum(ValueType, value)


@dataclass(frozen=True)
class Lookup:
    """Outcome of one lookup or parse step: a value, or a failure message.

    ``enforce`` is False for failures the strict policy never turns into
    errors (an unset environment variable).
    """
    value: Any = MISSING
    message: Optional[str] = None
    level: str = 'warn'
    enforce: bool = True

    @property
    def found(self) -> bool:
        return self.value is not MISSING

    @classmethod
    def hit(cls, value: Any) -> 'Lookup':
        return cls(value=value)

    @classmethod
    def miss(cls, message: str, level: str = 'warn', enforce: bool = True) -> 'Lookup':
        return cls(message=message, level=level, enforce=enforce)


@dataclass
class LoadResult:
    """Result of loading configuration files."""
    files_loaded: List[str] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    app_env: Optional[str] = None
    merge_order: List[str] = field(default_factory=list)
