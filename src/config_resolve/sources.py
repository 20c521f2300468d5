"""Structured sources and process environments the Resolver reads from."""

import os
import yaml
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional
from deepmerge import Merger
from dotenv import dotenv_values
from .domain import LoadResult
from .validators import ConfigFileError, ConfigFileNotFoundError

logger = logging.getLogger(__name__)

# Mappings are merged, lists and scalars from later files replace earlier ones
yaml_merger = Merger(
    [(dict, ["merge"]), (list, ["override"]), (set, ["override"])],
    ["override"],
    ["override"]
)


class StructuredSource:
    """Key/value lookup by (dotted) name."""

    def has(self, key: str) -> bool:
        raise NotImplementedError

    def get(self, key: str) -> Any:
        raise NotImplementedError


class ProcessEnvironment:
    """String lookup by variable name."""

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError


class DictSource(StructuredSource):
    """Structured source over an in-memory mapping.

    Keys are dotted paths into nested mappings (``"db.host"``); a top-level
    key that itself contains dots is matched first.
    """

    def __init__(self, data: Optional[Mapping] = None):
        self._data: Mapping = data if data is not None else {}

    def _walk(self, key: str) -> tuple:
        if key in self._data:
            return True, self._data[key]
        current: Any = self._data
        for part in key.split('.'):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return False, None
        return True, current

    def has(self, key: str) -> bool:
        found, _ = self._walk(key)
        return found

    def get(self, key: str) -> Any:
        found, value = self._walk(key)
        if not found:
            raise KeyError(key)
        return value


class YamlConfigSource(DictSource):
    """Layered YAML configuration: files merged in order, later files win."""

    def __init__(self, data: Optional[Mapping] = None, load_result: Optional[LoadResult] = None):
        super().__init__(data)
        self.load_result = load_result or LoadResult()

    @classmethod
    def load(
        cls,
        files: List[str],
        config_dir: Optional[str] = None,
        app_env: Optional[str] = None
    ) -> 'YamlConfigSource':
        """Load and merge ``files``.

        ``{APP_ENV}`` in a file name is substituted, and ``name.<env>.yaml``
        is preferred over ``name.yaml`` when it exists.
        """
        result = LoadResult()
        env = (app_env or os.getenv('APP_ENV', 'dev')).lower()
        result.app_env = env

        merged: Dict[str, Any] = {}
        for file_path in cls._resolve_paths(files, config_dir, env):
            try:
                with open(file_path, 'r') as f:
                    file_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                msg = f"YAML parsing error in {file_path}: {e}"
                logger.error(msg)
                raise ConfigFileError(msg) from e

            if not isinstance(file_data, dict):
                msg = f"Top level of {file_path} must be a mapping, got {type(file_data).__name__}"
                logger.error(msg)
                raise ConfigFileError(msg)

            yaml_merger.merge(merged, file_data)
            result.files_loaded.append(file_path)
            result.merge_order.append(file_path)

        logger.info(f"YamlConfigSource loaded {len(result.files_loaded)} files (APP_ENV={env})")
        return cls(merged, result)

    @staticmethod
    def _resolve_paths(files: List[str], config_dir: Optional[str], env: str) -> List[str]:
        paths = []
        for file_path in files:
            resolved_name = file_path.replace("{APP_ENV}", env)

            if config_dir and not os.path.isabs(resolved_name):
                resolved_path = os.path.join(config_dir, resolved_name)
            else:
                resolved_path = os.path.abspath(resolved_name)

            base, ext = os.path.splitext(resolved_path)
            env_specific_path = f"{base}.{env}{ext}"

            if os.path.exists(env_specific_path):
                paths.append(env_specific_path)
            elif os.path.exists(resolved_path):
                paths.append(resolved_path)
            else:
                msg = f"Config file not found: {resolved_path} (checked {env_specific_path} as well)"
                logger.error(msg)
                raise ConfigFileNotFoundError(msg)
        return paths


class OsEnvironment(ProcessEnvironment):
    """Reads ``os.environ`` at call time."""

    def read(self, key: str) -> Optional[str]:
        return os.environ.get(key)


class DotenvEnvironment(ProcessEnvironment):
    """Process environment layered with values parsed from dotenv files.

    ``os.environ`` wins over file values unless ``override`` is set. The
    process environment itself is never modified.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None, override: bool = False):
        self._store: Dict[str, str] = dict(values or {})
        self.override = override
        self.load_result = LoadResult()

    @classmethod
    def load(cls, *paths: str, override: bool = False) -> 'DotenvEnvironment':
        instance = cls(override=override)
        for path in paths:
            if not os.path.isfile(path):
                logger.warning(f"Dotenv file not found: {path}")
                instance.load_result.errors.append({"file": path, "error": "not found"})
                continue

            env_vars = dotenv_values(path)
            loaded = 0
            for key, value in env_vars.items():
                if value is None:
                    continue
                instance._store[key] = value
                loaded += 1

            logger.debug(f"Loaded {loaded} vars from {path}")
            instance.load_result.files_loaded.append(path)
        return instance

    def read(self, key: str) -> Optional[str]:
        if self.override and key in self._store:
            return self._store[key]
        value = os.environ.get(key)
        if value is not None:
            return value
        return self._store.get(key)
