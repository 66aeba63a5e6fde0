"""
Configuration Management

Settings are declared as dataclasses and layered from these sources, lowest
priority first:

1. Dataclass defaults
2. ``config.yaml`` / ``config.json`` in the configuration directory
3. ``environments/config.<ENVIRONMENT>.yaml`` / ``.json``
4. Environment variables

Every value is coerced to its field's declared type on the way in, so strings
from files or the environment become enums, booleans and integers. Values
that cannot be coerced are logged and skipped when loading, and rejected when
passed to ``ConfigManager.set``.
"""

import os
import json
import yaml
import logging
import logging.handlers
from typing import Any, Dict, Iterator, Optional, Tuple, Union, get_args, get_origin, get_type_hints
from pathlib import Path
from dataclasses import dataclass, field, asdict, is_dataclass
from enum import Enum


class Environment(Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class VectorStoreType(Enum):
    LINEAR = "linear"


@dataclass
class LinearVectorStoreConfig:
    """Linear-scan vector store configuration"""

    name: str = "default_store"
    strict_dimensions: bool = False


@dataclass
class VectorStoreConfig:
    """Vector store configuration"""

    backend: VectorStoreType = VectorStoreType.LINEAR
    linear: LinearVectorStoreConfig = field(default_factory=LinearVectorStoreConfig)


@dataclass
class LoggingConfig:
    """Logging configuration"""

    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    enable_console: bool = True


@dataclass
class AppConfig:
    """Main application configuration"""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    vector_store: VectorStoreConfig = field(default_factory=VectorStoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""

    pass


# Environment variable -> dotted configuration path
ENV_MAPPINGS = {
    "ENVIRONMENT": "environment",
    "DEBUG": "debug",
    "VECTOR_STORE_TYPE": "vector_store.backend",
    "VECTOR_STORE_NAME": "vector_store.linear.name",
    "STRICT_DIMENSIONS": "vector_store.linear.strict_dimensions",
    "LOG_LEVEL": "logging.level",
    "LOG_FORMAT": "logging.format",
    "LOG_FILE": "logging.file_path",
}

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def coerce_value(target_type: Any, value: Any) -> Any:
    """
    Convert a raw file or environment value to a field's declared type.

    Raises:
        ValueError: If the value cannot represent the type
    """
    if get_origin(target_type) is Union:
        members = [arg for arg in get_args(target_type) if arg is not type(None)]
        if value is None:
            return None
        target_type = members[0]

    if isinstance(target_type, type) and issubclass(target_type, Enum):
        if isinstance(value, target_type):
            return value
        for member in target_type:
            if str(member.value).lower() == str(value).lower():
                return member
        choices = ", ".join(str(member.value) for member in target_type)
        raise ValueError(f"{value!r} is not one of: {choices}")

    if target_type is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
            return True
        if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
            return False
        raise ValueError(f"{value!r} is not a boolean")

    if target_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            return int(value.strip())
        raise ValueError(f"{value!r} is not an integer")

    if target_type is str:
        if not isinstance(value, str):
            raise ValueError(f"{value!r} is not a string")
        return value

    return value


def _flatten(data: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            yield from _flatten(value, path)
        else:
            yield path, value


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    return value


class ConfigManager:
    """
    Loads, validates and exposes an AppConfig.

    Each instance is independent; ``get_config`` keeps a default one for
    callers that do not manage their own.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path(__file__).parent.parent.parent / "config"

        self.logger = logging.getLogger(__name__)
        self.config: AppConfig = AppConfig()
        self.reload_configuration()

    def reload_configuration(self):
        """Rebuild the configuration from defaults, files and the environment"""
        self.config = AppConfig()

        env = os.getenv("ENVIRONMENT", "development").lower()
        for filename in (
            "config.yaml",
            "config.json",
            f"environments/config.{env}.yaml",
            f"environments/config.{env}.json",
        ):
            data = self._read_file(filename)
            for path, value in _flatten(data):
                self._apply(path, value, source=filename)

        for env_var, path in ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if value is not None:
                self._apply(path, value, source=env_var)

        self._validate_configuration()

    def _read_file(self, filename: str) -> Dict[str, Any]:
        file_path = self.config_dir / filename
        if not file_path.exists():
            return {}

        try:
            with open(file_path, "r") as f:
                if file_path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            self.logger.warning(f"Failed to load configuration from {filename}: {e}")
            return {}

        if not isinstance(data, dict):
            if data is not None:
                self.logger.warning(f"Ignoring {filename}: top level must be a mapping")
            return {}

        self.logger.info(f"Loaded configuration from {filename}")
        return data

    def _apply(self, path: str, value: Any, source: str):
        try:
            self._assign(path, value)
        except KeyError:
            self.logger.warning(f"Unknown configuration key: {path} (from {source})")
        except ValueError as e:
            self.logger.warning(f"Invalid value for {path} from {source}: {e}")

    def _assign(self, path: str, value: Any):
        """Coerce and store a value at a dotted path; KeyError if the path is unknown"""
        *parents, name = path.split(".")
        section = self.config
        for part in parents:
            section = getattr(section, part, None)
            if not is_dataclass(section):
                raise KeyError(path)

        field_types = get_type_hints(type(section))
        if name not in field_types or is_dataclass(getattr(section, name)):
            raise KeyError(path)

        setattr(section, name, coerce_value(field_types[name], value))

    def _validate_configuration(self):
        errors = []

        if not self.config.vector_store.linear.name.strip():
            errors.append("Vector store name must be a non-empty string")

        if self.config.logging.max_file_size <= 0:
            errors.append("Log file size must be positive")

        if self.config.logging.backup_count < 0:
            errors.append("Log backup count must not be negative")

        if errors:
            raise ConfigValidationError(f"Configuration validation failed: {'; '.join(errors)}")

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        value: Any = self.config
        for part in path.split("."):
            if not is_dataclass(value) or not hasattr(value, part):
                return default
            value = getattr(value, part)
        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value using dot notation.

        Raises:
            ConfigValidationError: If the path is unknown, the value has the
                wrong type, or the result fails validation
        """
        try:
            self._assign(path, value)
        except KeyError:
            raise ConfigValidationError(f"Unknown configuration key: {path}")
        except ValueError as e:
            raise ConfigValidationError(f"Invalid value for {path}: {e}") from e
        self._validate_configuration()

    def to_dict(self) -> Dict[str, Any]:
        """Configuration as plain data, with enums replaced by their values"""
        return _plain(asdict(self.config))

    def save_to_file(self, filename: str, format: str = "yaml"):
        """Write the current configuration as YAML or JSON into config_dir"""
        file_path = self.config_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            if format.lower() == "yaml":
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

        self.logger.info(f"Configuration saved to {filename}")

    def get_vector_store_config(self) -> Dict[str, Any]:
        """
        Get vector store configuration for the store factory.

        Returns:
            Dictionary with backend and backend_config keys
        """
        vector_store = self.config.vector_store
        backend = vector_store.backend.value
        return {"backend": backend, "backend_config": asdict(getattr(vector_store, backend))}


def setup_logging(logging_config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the ``vector_core`` logger from a LoggingConfig.

    Handlers previously installed by this function are replaced, so calling
    it again after a configuration reload does not duplicate output.

    Raises:
        ValueError: If the level or file settings are not usable

    Returns:
        The configured package logger
    """
    logging_config = logging_config or LoggingConfig()
    level = coerce_value(LogLevel, logging_config.level)
    max_file_size = coerce_value(int, logging_config.max_file_size)
    backup_count = coerce_value(int, logging_config.backup_count)

    logger = logging.getLogger("vector_core")
    logger.setLevel(getattr(logging, level.value))

    for handler in list(logger.handlers):
        if getattr(handler, "_vector_core_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(logging_config.format)
    handlers = []

    if logging_config.enable_console:
        handlers.append(logging.StreamHandler())

    if logging_config.file_path:
        log_path = Path(logging_config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_path, maxBytes=max_file_size, backupCount=backup_count
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._vector_core_handler = True
        logger.addHandler(handler)

    return logger


# Default configuration instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the default configuration manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def init_config(config_dir: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Initialize the default configuration manager"""
    global _config_manager
    _config_manager = ConfigManager(config_dir)
    return _config_manager
