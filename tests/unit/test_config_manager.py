"""
Tests for the configuration management system.
"""
import os
import json
import logging
import logging.handlers
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

import vector_core.config.config_manager as config_module
from vector_core.config.config_manager import (
    ConfigManager,
    Environment,
    LogLevel,
    LoggingConfig,
    VectorStoreType,
    ConfigValidationError,
    get_config,
    init_config,
    setup_logging,
)
from vector_core.store import create_vector_store, LinearVectorStore


class TestConfigManager:
    """Test the ConfigManager class."""

    def setup_method(self):
        """Reset the default configuration instance."""
        config_module._config_manager = None

    def test_default_configuration(self):
        """Defaults are used when no files or variables are present."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.environment == Environment.DEVELOPMENT
            assert config.config.debug is False
            assert config.config.vector_store.backend == VectorStoreType.LINEAR
            assert config.config.vector_store.linear.name == "default_store"
            assert config.config.vector_store.linear.strict_dimensions is False
            assert config.config.logging.level == LogLevel.INFO

    def test_yaml_config_loading(self):
        """Values from config.yaml override defaults."""
        with tempfile.TemporaryDirectory() as temp_dir:
            test_config = {
                "environment": "testing",
                "debug": True,
                "vector_store": {
                    "linear": {"name": "digits", "strict_dimensions": True}
                },
                "logging": {"level": "debug"},
            }

            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump(test_config, f)

            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.environment == Environment.TESTING
            assert config.config.debug is True
            assert config.config.vector_store.linear.name == "digits"
            assert config.config.vector_store.linear.strict_dimensions is True
            assert config.config.logging.level == LogLevel.DEBUG

    def test_json_config_loading(self):
        """Values from config.json override defaults."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.json", 'w') as f:
                json.dump({"vector_store": {"linear": {"name": "from_json"}}}, f)

            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.vector_store.linear.name == "from_json"

    def test_environment_specific_config(self):
        """environments/config.<env>.yaml overrides the base file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            env_dir = Path(temp_dir) / "environments"
            env_dir.mkdir()

            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump({"vector_store": {"linear": {"name": "base"}}}, f)
            with open(env_dir / "config.staging.yaml", 'w') as f:
                yaml.dump({"vector_store": {"linear": {"name": "staging"}}}, f)

            with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.environment == Environment.STAGING
            assert config.config.vector_store.linear.name == "staging"

    def test_environment_variable_override(self):
        """Environment variables take priority over files."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump({"vector_store": {"linear": {"name": "from_file"}}}, f)

            env_vars = {
                "VECTOR_STORE_NAME": "from_env",
                "STRICT_DIMENSIONS": "yes",
                "LOG_LEVEL": "warning",
                "DEBUG": "1",
            }
            with patch.dict(os.environ, env_vars, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.vector_store.linear.name == "from_env"
            assert config.config.vector_store.linear.strict_dimensions is True
            assert config.config.logging.level == LogLevel.WARNING
            assert config.config.debug is True

    def test_invalid_environment_value_is_ignored(self, caplog):
        """Invalid environment values are logged and skipped."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {"VECTOR_STORE_TYPE": "kdtree"}, clear=True):
                with caplog.at_level(logging.WARNING):
                    config = ConfigManager(temp_dir)

            assert config.config.vector_store.backend == VectorStoreType.LINEAR
            assert "Invalid value for vector_store.backend from VECTOR_STORE_TYPE" in caplog.text

    def test_unknown_key_is_ignored(self, caplog):
        """Unknown keys in files are logged and skipped."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump({"vector_store": {"bogus": 1}}, f)

            with patch.dict(os.environ, {}, clear=True):
                with caplog.at_level(logging.WARNING):
                    config = ConfigManager(temp_dir)

            assert not hasattr(config.config.vector_store, "bogus")
            assert "Unknown configuration key: vector_store.bogus" in caplog.text

    def test_malformed_file_is_skipped(self, caplog):
        """Unparseable files are logged and defaults kept."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.json", 'w') as f:
                f.write("{not json")

            with patch.dict(os.environ, {}, clear=True):
                with caplog.at_level(logging.WARNING):
                    config = ConfigManager(temp_dir)

            assert config.config.vector_store.linear.name == "default_store"
            assert "Failed to load configuration from config.json" in caplog.text

    def test_validation_error(self):
        """Invalid values raise ConfigValidationError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump({"vector_store": {"linear": {"name": ""}}}, f)

            with patch.dict(os.environ, {}, clear=True):
                with pytest.raises(ConfigValidationError, match="name must be a non-empty"):
                    ConfigManager(temp_dir)

    def test_get_and_set(self):
        """Dot-notation access reads and updates values."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.get("vector_store.linear.name") == "default_store"
            assert config.get("vector_store.missing", "fallback") == "fallback"

            config.set("vector_store.linear.strict_dimensions", True)
            assert config.get("vector_store.linear.strict_dimensions") is True

            with pytest.raises(ConfigValidationError):
                config.set("vector_store.linear.strict_dimensions", "maybe")

    def test_file_values_are_coerced(self):
        """String numbers and booleans from files become typed values."""
        with tempfile.TemporaryDirectory() as temp_dir:
            test_config = {
                "debug": "no",
                "logging": {"max_file_size": "2048", "backup_count": "3"},
                "vector_store": {"backend": "LINEAR", "linear": {"strict_dimensions": "on"}},
            }
            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump(test_config, f)

            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            assert config.config.debug is False
            assert config.config.logging.max_file_size == 2048
            assert config.config.logging.backup_count == 3
            assert config.config.vector_store.backend == VectorStoreType.LINEAR
            assert config.config.vector_store.linear.strict_dimensions is True

    def test_non_numeric_file_size_is_skipped(self, caplog):
        """A string file size that is not a number keeps the default."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with open(Path(temp_dir) / "config.yaml", 'w') as f:
                yaml.dump({"logging": {"max_file_size": "big", "backup_count": None}}, f)

            with patch.dict(os.environ, {}, clear=True):
                with caplog.at_level(logging.WARNING):
                    config = ConfigManager(temp_dir)

            assert config.config.logging.max_file_size == 10 * 1024 * 1024
            assert config.config.logging.backup_count == 5
            assert "Invalid value for logging.max_file_size" in caplog.text
            assert "Invalid value for logging.backup_count" in caplog.text

    def test_set_coerces_strings(self):
        """set() converts strings to the field type."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            config.set("logging.level", "DEBUG")
            config.set("logging.max_file_size", "4096")

            assert config.config.logging.level == LogLevel.DEBUG
            assert config.config.logging.max_file_size == 4096

    def test_set_rejects_unknown_key_and_bad_type(self):
        """set() raises for unknown paths and values of the wrong type."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            with pytest.raises(ConfigValidationError, match="Unknown configuration key"):
                config.set("vector_store.bogus", 1)

            with pytest.raises(ConfigValidationError, match="Invalid value"):
                config.set("logging.max_file_size", "big")

            with pytest.raises(ConfigValidationError, match="Invalid value"):
                config.set("logging.level", "loud")

            assert config.config.logging.max_file_size == 10 * 1024 * 1024

    def test_to_dict_and_save(self):
        """Configuration can be serialized and saved."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)

            config_dict = config.to_dict()
            assert config_dict["vector_store"]["backend"] == "linear"
            assert config_dict["logging"]["level"] == "INFO"

            config.save_to_file("saved.yaml")
            with open(Path(temp_dir) / "saved.yaml") as f:
                saved = yaml.safe_load(f)
            assert saved == config_dict

            config.save_to_file("saved.json", format="json")
            with open(Path(temp_dir) / "saved.json") as f:
                assert json.load(f) == config_dict

    def test_reload_configuration(self):
        """Reloading picks up file changes."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.yaml"
            with open(config_path, 'w') as f:
                yaml.dump({"vector_store": {"linear": {"name": "before"}}}, f)

            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)
                with open(config_path, 'w') as f:
                    yaml.dump({"vector_store": {"linear": {"name": "after"}}}, f)
                config.reload_configuration()

            assert config.config.vector_store.linear.name == "after"

    def test_vector_store_config_builds_store(self):
        """get_vector_store_config() feeds the store factory."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {"STRICT_DIMENSIONS": "true"}, clear=True):
                config = ConfigManager(temp_dir)

            settings = config.get_vector_store_config()
            assert settings == {
                "backend": "linear",
                "backend_config": {"name": "default_store", "strict_dimensions": True},
            }

            store = create_vector_store(settings["backend"], settings["backend_config"])
            assert isinstance(store, LinearVectorStore)
            assert store.strict_dimensions is True

    def test_get_config_and_init_config(self):
        """init_config() replaces the default instance returned by get_config()."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = init_config(temp_dir)

            assert get_config() is config
            assert get_config() is get_config()


class TestSetupLogging:
    """Test logging setup from configuration."""

    def teardown_method(self):
        logger = logging.getLogger("vector_core")
        for handler in list(logger.handlers):
            if getattr(handler, "_vector_core_handler", False):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)

    def test_console_handler(self):
        """A console handler is installed at the configured level."""
        logger = setup_logging(LoggingConfig(level=LogLevel.DEBUG))

        assert logger.name == "vector_core"
        assert logger.level == logging.DEBUG
        installed = [h for h in logger.handlers if getattr(h, "_vector_core_handler", False)]
        assert len(installed) == 1
        assert isinstance(installed[0], logging.StreamHandler)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Calling setup_logging() twice keeps a single set of handlers."""
        setup_logging(LoggingConfig())
        logger = setup_logging(LoggingConfig())

        installed = [h for h in logger.handlers if getattr(h, "_vector_core_handler", False)]
        assert len(installed) == 1

    def test_file_handler(self):
        """A rotating file handler receives store log records."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "logs" / "vector_core.log"
            logger = setup_logging(
                LoggingConfig(level=LogLevel.DEBUG, file_path=str(log_file), enable_console=False)
            )

            installed = [h for h in logger.handlers if getattr(h, "_vector_core_handler", False)]
            assert len(installed) == 1
            assert isinstance(installed[0], logging.handlers.RotatingFileHandler)

            store = LinearVectorStore({"name": "logged"})
            store.add([1.0, 2.0])
            installed[0].flush()

            contents = log_file.read_text()
            assert "Created linear vector store logged" in contents
            assert "Added vector of dimension 2 at index 0" in contents

            self.teardown_method()

    def test_string_level_is_accepted(self):
        """A level given as a plain string is converted."""
        logger = setup_logging(LoggingConfig(level="debug", enable_console=False))
        assert logger.level == logging.DEBUG

    def test_invalid_level_raises(self):
        """An unknown level raises ValueError."""
        with pytest.raises(ValueError):
            setup_logging(LoggingConfig(level="loud"))

    def test_level_after_config_set(self):
        """Logging set up from a ConfigManager after set() uses the new level."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigManager(temp_dir)
            config.set("logging.level", "ERROR")

            logger = setup_logging(config.config.logging)
            assert logger.level == logging.ERROR
