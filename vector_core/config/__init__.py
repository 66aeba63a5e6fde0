from .config_manager import (
    ConfigManager,
    AppConfig,
    LoggingConfig,
    get_config,
    init_config,
    setup_logging,
    ConfigValidationError,
    Environment,
)

__all__ = [
    "ConfigManager",
    "AppConfig",
    "LoggingConfig",
    "get_config",
    "init_config",
    "setup_logging",
    "ConfigValidationError",
    "Environment",
]
