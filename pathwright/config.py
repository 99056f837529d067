"""
Config system - Layered typed configuration for the router.

Merge precedence (later overrides earlier):
config files > .env file > environment variables > explicit overrides
"""

from typing import Any, Dict, Optional, Type, get_origin, get_args
from dataclasses import dataclass, fields, is_dataclass, MISSING
from pathlib import Path
import json
import logging
import os

from dotenv import dotenv_values

from .faults import ConfigInvalidFault


logger = logging.getLogger("pathwright.config")


def _with_trailing_slash(value: str) -> str:
    return value.rstrip("/") + "/"


@dataclass
class RouterConfig:
    """
    Router settings.

    Attributes:
        base_uri: URI prefix the application is mounted under
        app_url: Absolute URL of the application, used for host links
        pages_directory: Directory string endpoints are resolved against
        static_directory_uri: URI segment of the static file directory
        error_400_route: Redirect target when parameters fail to decode
        error_404_route: Redirect target when nothing resolves
        strict_generation: Raise generation faults instead of logging them
    """
    base_uri: str = "/"
    app_url: str = ""
    pages_directory: str = "/"
    static_directory_uri: str = "static/"
    error_400_route: str = ""
    error_404_route: str = ""
    strict_generation: bool = False

    def __post_init__(self):
        self.base_uri = _with_trailing_slash(self.base_uri)
        self.pages_directory = _with_trailing_slash(self.pages_directory)
        self.static_directory_uri = _with_trailing_slash(self.static_directory_uri)
        if self.app_url:
            self.app_url = _with_trailing_slash(self.app_url)


class ConfigError(ConfigInvalidFault):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources.

    Router settings live under the ``router`` key, e.g. ``router.base_uri``
    or ``PW_ROUTER__BASE_URI``.
    """

    def __init__(self, env_prefix: str = "PW_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "PW_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "ConfigLoader":
        """
        Load configuration from multiple sources with proper merge strategy.

        Args:
            paths: List of config file paths (glob patterns supported)
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured ConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        for pattern in paths or []:
            loader._load_from_files(pattern)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader._merge_dict(loader.config_data, overrides)

        return loader

    def _load_from_files(self, pattern: str):
        """Load config from JSON or YAML files."""
        from glob import glob

        matched = glob(pattern)
        if not matched:
            logger.debug(f"No config files match '{pattern}'")

        for path_str in matched:
            path = Path(path_str)

            if path.suffix == ".json":
                self._load_json_file(path)
            elif path.suffix in (".yaml", ".yml"):
                self._load_yaml_file(path)

    def _load_json_file(self, path: Path):
        """Load config from JSON file."""
        with open(path) as f:
            data = json.load(f)
            self._merge_dict(self.config_data, data)

    def _load_yaml_file(self, path: Path):
        """Load config from YAML file."""
        import yaml
        with open(path) as f:
            data = yaml.safe_load(f)
            if data:
                self._merge_dict(self.config_data, data)

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        env_path = Path(path)
        if not env_path.exists():
            return

        for key, value in dotenv_values(env_path).items():
            if value is not None and key.startswith(self.env_prefix):
                self._set_nested(key, value)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set_nested(key, value)

    def _set_nested(self, key: str, value: str):
        """Convert PW_ROUTER__BASE_URI to nested dict."""
        key = key[len(self.env_prefix):]

        # Double underscore separates nesting levels
        parts = key.lower().split("__")

        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]

        current[parts[-1]] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        if value.startswith(("{", "[")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _merge_dict(self, target: dict, source: dict):
        """Deep merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._merge_dict(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value by dot-separated path."""
        parts = path.split(".")
        current = self.config_data

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def router_config(self) -> RouterConfig:
        """Build a validated ``RouterConfig`` from the ``router`` section."""
        data = self.get("router", {}) or {}
        if not isinstance(data, dict):
            raise ConfigError("router", "expected a mapping")
        return self._instantiate_dataclass(RouterConfig, data)

    def _instantiate_dataclass(self, config_class: Type, data: dict):
        """Instantiate dataclass config with validation."""
        kwargs = {}
        known = {f.name for f in fields(config_class)}

        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown config key '{key}' for {config_class.__name__}")

        for field_info in fields(config_class):
            field_name = field_info.name
            field_type = field_info.type

            if field_name in data:
                value = self._coerce(data[field_name], field_type)

                if not self._check_type(value, field_type):
                    raise ConfigError(
                        field_name,
                        f"expected {getattr(field_type, '__name__', field_type)}, "
                        f"got {type(value).__name__}",
                    )

                kwargs[field_name] = value
            elif field_info.default is not MISSING:
                kwargs[field_name] = field_info.default
            elif field_info.default_factory is not MISSING:
                kwargs[field_name] = field_info.default_factory()
            else:
                raise ConfigError(field_name, "required field not provided")

        return config_class(**kwargs)

    def _coerce(self, value: Any, expected_type: Type) -> Any:
        """Undo ``_parse_value`` guesses that contradict the declared field type."""
        if expected_type is str and isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if expected_type is bool:
            if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1):
                return bool(value)
            if isinstance(value, str) and value.lower() in ("1", "0", "true", "false", "yes", "no", "on", "off"):
                return value.lower() in ("1", "true", "yes", "on")
        return value

    def _check_type(self, value: Any, expected_type: Type) -> bool:
        """Basic type checking."""
        import types
        origin = get_origin(expected_type)
        if origin is types.UnionType or str(origin) == 'typing.Union':
            args = get_args(expected_type)
            if value is None:
                return True
            if args:
                return self._check_type(value, args[0])

        if origin:
            return isinstance(value, origin)

        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def to_dict(self) -> dict:
        """Export all config as dictionary."""
        return self.config_data.copy()
