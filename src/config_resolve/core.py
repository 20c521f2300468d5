"""Core business logic for the Resolver."""

from typing import Any, Mapping, Optional, Union
from pydantic import ValidationError
from .domain import Lookup, ResolveOptions, ResolverDefaults
from .logger import ConfigLogger, SilentLogger, get_logger
from .parsing import parse_value
from .sources import DictSource, OsEnvironment, ProcessEnvironment, StructuredSource
from .types import Priority, ValueType
from .validators import ConfigOptionsError, ConfigPriorityError, ConfigValueError

RequestLike = Union[ResolveOptions, Mapping[str, Any], None]


class Resolver:
    """Resolve a setting from a structured source or the process environment.

    The source named by the priority is tried first, then the other one,
    then the request's default value is returned. Environment strings are
    parsed according to the request's ``type``; structured values are
    returned untouched.

    Failures either raise ``ConfigError`` (strict) or are logged and fall
    through to the next source (lenient).
    """

    def __init__(
        self,
        defaults: Union[ResolverDefaults, Mapping[str, Any], None] = None,
        *,
        source: Optional[StructuredSource] = None,
        environment: Optional[ProcessEnvironment] = None,
        **overrides: Any
    ):
        self._log: ConfigLogger = get_logger()
        self._priority: Priority = Priority.CONFIG
        self._strict: bool = False
        self._type: ValueType = ValueType.STRING
        self._source: StructuredSource = source if source is not None else DictSource()
        self._environment: ProcessEnvironment = environment if environment is not None else OsEnvironment()
        self.configure(defaults, **overrides)

    # ========== Defaults ==========

    @property
    def logger(self) -> ConfigLogger:
        return self._log

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def type(self) -> ValueType:
        return self._type

    @property
    def source(self) -> StructuredSource:
        return self._source

    @property
    def environment(self) -> ProcessEnvironment:
        return self._environment

    def configure(
        self,
        defaults: Union[ResolverDefaults, Mapping[str, Any], None] = None,
        **overrides: Any
    ) -> None:
        """Update the defaults. Fields left unset keep their current value."""
        opts = self._validate_defaults(defaults, overrides)
        self.set_logger(opts.log, opts.disable_log)
        if opts.priority is not None:
            self._priority = opts.priority
        if opts.strict is not None:
            self._strict = opts.strict
        if opts.type is not None:
            self._type = opts.type

    def set_logger(self, log: Optional[ConfigLogger] = None, disable_log: Optional[bool] = None) -> None:
        if disable_log:
            self._log = SilentLogger()
        elif log is not None:
            self._log = log

    # ========== Public API ==========

    def resolve(self, request: RequestLike = None, **kwargs: Any) -> Any:
        """Return the value of a setting, or the request's default value."""
        opts = self._normalize(self._validate_request(request, kwargs))
        strict = opts.strict if opts.strict is not None else self._strict
        priority = opts.priority if opts.priority is not None else self._priority

        first = self._attempt(priority, opts, strict)
        if first.found:
            return first.value

        # An unrecognised priority falls back to the structured source
        fallback = priority.invert() if isinstance(priority, Priority) else Priority.CONFIG
        second = self._attempt(fallback, opts, strict)
        if second.found:
            return second.value

        return opts.default_value

    def get(self, request: RequestLike = None, **kwargs: Any) -> Any:
        """Shorthand for ``resolve`` taking the short option names::

            resolver.get({'n': 'PORT', 'ty': 'integer', 'd': 8080})
        """
        return self.resolve(request, **kwargs)

    # ========== Internals ==========

    @staticmethod
    def _validate_defaults(
        defaults: Union[ResolverDefaults, Mapping[str, Any], None],
        overrides: Mapping[str, Any]
    ) -> ResolverDefaults:
        if isinstance(defaults, ResolverDefaults) and not overrides:
            return defaults
        data = dict(defaults.model_dump(exclude_unset=True) if isinstance(defaults, ResolverDefaults) else defaults or {})
        data.update(overrides)
        try:
            return ResolverDefaults.model_validate(data)
        except ValidationError as e:
            raise ConfigOptionsError(f"Invalid resolver defaults: {e}") from e

    @staticmethod
    def _validate_request(request: RequestLike, kwargs: Mapping[str, Any]) -> ResolveOptions:
        if isinstance(request, ResolveOptions) and not kwargs:
            opts = request
        else:
            if isinstance(request, ResolveOptions):
                data = request.model_dump(exclude_unset=True)
            else:
                data = dict(request or {})
            data.update(kwargs)
            try:
                opts = ResolveOptions.model_validate(data)
            except ValidationError as e:
                raise ConfigOptionsError(f"Invalid options provided to load config: {e}") from e

        if opts.is_empty():
            raise ConfigOptionsError(f"No options provided to load config {request!r}")
        if not opts.has_key():
            raise ConfigOptionsError(f"No config name provided in params {opts!r}")
        return opts

    @staticmethod
    def _normalize(opts: ResolveOptions) -> ResolveOptions:
        if opts.name is None:
            return opts
        return opts.model_copy(update={
            'config_name': opts.config_name if opts.config_name is not None else opts.name,
            'process_name': opts.process_name if opts.process_name is not None else opts.name,
        })

    def _attempt(self, priority: Any, opts: ResolveOptions, strict: bool) -> Lookup:
        if priority is Priority.CONFIG:
            self._log.info(f"Trying to retrieve config {opts.config_name} through config")
            lookup = self._from_config(opts.config_name)
            return self._settle(lookup, strict, opts.config_name, 'config')

        if priority is Priority.ENV:
            self._log.info(f"Trying to retrieve config {opts.process_name} through env")
            lookup = self._from_env(opts.process_name, opts.type if opts.type is not None else self._type)
            return self._settle(lookup, strict, opts.process_name, 'env')

        if strict:
            raise ConfigPriorityError(priority)
        self._log.error(f"Invalid priority {priority!r}")
        return Lookup.miss(f"Invalid priority {priority!r}", level='error')

    def _from_config(self, key: Optional[str]) -> Lookup:
        if key is None:
            return Lookup.miss("No config key provided", enforce=False)
        if self._source.has(key):
            return Lookup.hit(self._source.get(key))
        return Lookup.miss(f"No value defined for {key}")

    def _from_env(self, key: Optional[str], value_type: Any) -> Lookup:
        raw = self._environment.read(key) if key is not None else None
        if not raw:
            return Lookup.miss(f"No env defined for {key}", enforce=False)

        self._log.info(f"Going to parse process env value of {key}")
        return parse_value(value_type, raw)

    def _settle(self, lookup: Lookup, strict: bool, key: Optional[str], source: str) -> Lookup:
        """Single policy point: raise, log, or pass a found value through."""
        if lookup.found:
            return lookup

        message = lookup.message
        if source == 'env' and lookup.enforce:
            message = f"{message} for {key}"

        if strict and lookup.enforce:
            raise ConfigValueError(message, key=key, source=source)

        if lookup.level == 'error':
            self._log.error(message)
        else:
            self._log.warn(message)
        return lookup
