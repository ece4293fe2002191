"""
Configuration loading for termdemo.

Configuration comes from built-in defaults, an optional YAML file and
TERMDEMO_* environment variables, in increasing order of precedence.
Command-line flags override all three.

Environment Variable Override Format:
    TERMDEMO_<SECTION>_<SUBSECTION>_<KEY>=value

Examples:
    TERMDEMO_LOGGING_LEVEL=debug
    TERMDEMO_COMMANDS_PROGRESS_DURATION=5
"""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from .constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_GREET_COUNT,
    DEFAULT_GREET_NAME,
)
from .dot_dict import DotDict
from .errors import ConfigError

ENV_PREFIX = "TERMDEMO_"
CONFIG_ENV_VAR = "TERMDEMO_CONFIG"
DEFAULT_CONFIG_PATH = Path("etc") / "termdemo.yaml"

# Maximum config file size (1 MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULTS: dict[str, Any] = {
    "logging": {
        "level": "warning",
        "colors": True,
        "micros": False,
    },
    "commands": {
        "progress": {"duration": DEFAULT_DURATION_SECONDS},
        "greet": {"name": DEFAULT_GREET_NAME, "count": DEFAULT_GREET_COUNT},
        "list": {"items": []},
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries recursively; `override` wins on conflicts.

    Example:
        base = {"a": 1, "b": {"x": 1, "y": 2}}
        override = {"b": {"y": 3}}
        result = {"a": 1, "b": {"x": 1, "y": 3}}
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _convert_env_value(value: str) -> bool | int | float | str | None:
    """Convert an environment variable string to a scalar of the matching type."""
    if value.lower() in ("null", "none", ""):
        return None

    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


def _set_nested_value(data: dict, path: list[str], value: Any) -> None:
    current = data
    for part in path[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[path[-1]] = value


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from a file, raising ConfigError on any problem."""
    try:
        file_size = path.stat().st_size
    except OSError as e:
        raise ConfigError(
            f"cannot read config file: {e.strerror}", path=str(path)
        ) from e

    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"config file exceeds maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(path),
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("top-level YAML document must be a mapping", path=str(path))
    return data


# Sections that must be mappings when present
SECTIONS = (
    "logging",
    "commands",
    "commands.progress",
    "commands.greet",
    "commands.list",
)

# Accepted value types for known keys; unknown keys are left alone
KEY_TYPES: dict[str, tuple[type, ...]] = {
    "logging.level": (str, int),
    "logging.colors": (bool,),
    "logging.micros": (bool,),
    "commands.progress.duration": (int, type(None)),
    "commands.greet.name": (str, type(None)),
    "commands.greet.count": (int, type(None)),
    "commands.list.items": (list, str, type(None)),
}

_MISSING = object()


def _lookup(data: dict, dotted: str) -> Any:
    current: Any = data
    for part in dotted.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _type_names(types: tuple[type, ...]) -> str:
    return " or ".join("null" if t is type(None) else t.__name__ for t in types)


def _validate(data: dict[str, Any], source: Path | None) -> None:
    """
    Check section shapes and the types of known keys.

    Raises:
        ConfigError: On the first section or value of the wrong type
    """
    context = {"path": str(source)} if source is not None else {}

    for section in SECTIONS:
        value = _lookup(data, section)
        if value is not _MISSING and not isinstance(value, dict):
            raise ConfigError(
                f"'{section}' must be a mapping, got {type(value).__name__}",
                key=section,
                **context,
            )

    for key, types in KEY_TYPES.items():
        value = _lookup(data, key)
        if value is _MISSING:
            continue
        # bool is an int subclass; only logging.level accepts it (false disables)
        if isinstance(value, bool) and bool not in types:
            valid = key == "logging.level"
        else:
            valid = isinstance(value, types)
        if not valid:
            raise ConfigError(
                f"'{key}' must be {_type_names(types)}, got {type(value).__name__}",
                key=key,
                **context,
            )

    items = _lookup(data, "commands.list.items")
    if isinstance(items, list) and not all(
        isinstance(item, (str, int, float)) for item in items
    ):
        raise ConfigError(
            "'commands.list.items' entries must be scalars",
            key="commands.list.items",
            **context,
        )


class Config(DotDict):
    """
    Application configuration.

    Example:
        config = Config.load("etc/termdemo.yaml")
        config.logging.level              # "warning"
        config.get("commands.greet.name") # "World"
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

    @classmethod
    def defaults(cls) -> "Config":
        """Create a configuration holding only built-in defaults."""
        return cls(**copy.deepcopy(DEFAULTS))

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        environ: dict[str, str] | None = None,
        enable_env_overrides: bool = True,
    ) -> "Config":
        """
        Load configuration from defaults, a YAML file and the environment.

        Path resolution: explicit `path`, else $TERMDEMO_CONFIG, else
        ./etc/termdemo.yaml if it exists, else defaults only.

        Args:
            path: Explicit config file path (must exist)
            environ: Environment mapping (default: os.environ)
            enable_env_overrides: Whether to apply TERMDEMO_* overrides

        Returns:
            Config instance

        Raises:
            ConfigError: If the selected file is unreadable or malformed, or a
                known section or key has the wrong type
        """
        env = dict(os.environ if environ is None else environ)
        data = copy.deepcopy(DEFAULTS)

        source = cls._resolve_path(path, env)
        if source is not None:
            data = _deep_merge(data, _load_yaml(source))

        if enable_env_overrides:
            data = cls._apply_env_overrides(data, env)

        _validate(data, source)

        config = cls(**data)
        config._source = source  # type: ignore[attr-defined]
        return config

    @staticmethod
    def _resolve_path(path: str | Path | None, env: dict[str, str]) -> Path | None:
        if path is not None:
            return Path(path)
        if env.get(CONFIG_ENV_VAR):
            return Path(env[CONFIG_ENV_VAR])
        if DEFAULT_CONFIG_PATH.is_file():
            return DEFAULT_CONFIG_PATH
        return None

    @staticmethod
    def _apply_env_overrides(
        data: dict[str, Any], env: dict[str, str]
    ) -> dict[str, Any]:
        """Apply TERMDEMO_* overrides, e.g. TERMDEMO_LOGGING_LEVEL -> logging.level."""
        for key, value in env.items():
            if not key.startswith(ENV_PREFIX) or key == CONFIG_ENV_VAR:
                continue
            config_path = key[len(ENV_PREFIX) :].lower().split("_")
            if not all(config_path):
                continue
            _set_nested_value(data, config_path, _convert_env_value(value))
        return data

    @property
    def source(self) -> Path | None:
        """Path of the loaded YAML file, or None when running on defaults."""
        return self.__dict__.get("_source")

    def command_default(self, command: str, key: str, fallback: Any = None) -> Any:
        """Get a per-command flag default from the `commands` section."""
        value = self.get(f"commands.{command}.{key}")
        return fallback if value is None else value
