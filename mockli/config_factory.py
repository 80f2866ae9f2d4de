"""
Configuration Factory - Centralized configuration management for Mockli
Provides type-safe configuration with validation and environment-specific settings.
"""

import os
import logging
from typing import Any, Dict, Optional, Type
from enum import Enum
from dataclasses import dataclass

from mockli.core.errors import ErrorCode, MockliError


VALID_LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


class Environment(Enum):
    """Environment types for configuration"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"


class ConfigError(MockliError):
    """Configuration-related errors"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(ErrorCode.CONFIG_ERROR, message, details)


@dataclass
class AppConfig:
    """Library configuration with type safety and validation"""

    # Merge settings
    strict_merge: bool = False  # raise on member name collisions instead of last-write-wins

    # Entry convention
    default_key_field: str = 'id'

    # Fixture files
    fixtures_dir: str = ''

    # Logging
    log_level: str = 'warning'

    # Environment
    environment: Environment = Environment.DEVELOPMENT

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate()

    def _validate(self):
        """Validate configuration values"""
        if not isinstance(self.default_key_field, str) or not self.default_key_field.strip():
            raise ConfigError(f"Invalid default_key_field: {self.default_key_field!r}")

        if not isinstance(self.log_level, str) or self.log_level.lower() not in VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level!r}")

        if not isinstance(self.fixtures_dir, str):
            raise ConfigError(f"Invalid fixtures_dir: {self.fixtures_dir!r}")


class ConfigurationFactory:
    """
    Factory for creating and managing library configuration.

    Features:
    - Environment variable loading with type conversion
    - Configuration validation
    - Singleton pattern for global config access
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[AppConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the configuration factory"""
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger(__name__)
            self._env_overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = 'MOCKLI_') -> AppConfig:
        """
        Load configuration from environment variables.

        Args:
            env_prefix: Prefix for environment variables (default 'MOCKLI_')

        Returns:
            Configured AppConfig instance
        """
        def get_env_var(key: str, default: Any = None, var_type: Type = str) -> Any:
            """Get environment variable with type conversion"""
            env_key = f"{env_prefix}{key}" if env_prefix else key
            value = os.environ.get(env_key)

            if value is None:
                return default

            if var_type == bool:
                return value.lower() in ('true', '1', 'yes', 'on')
            return value

        env_name = get_env_var('ENV', 'development')
        if env_name == 'testing':
            environment = Environment.TESTING
        elif env_name == 'ci':
            environment = Environment.CI
        else:
            environment = Environment.DEVELOPMENT

        config = AppConfig(
            strict_merge=get_env_var('STRICT_MERGE', environment == Environment.CI, bool),
            default_key_field=get_env_var('DEFAULT_KEY_FIELD', 'id'),
            fixtures_dir=get_env_var('FIXTURES_DIR', ''),
            log_level=get_env_var('LOG_LEVEL', 'warning'),
            environment=environment
        )

        # Apply any manual overrides
        for key, value in self._env_overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)
        config._validate()

        self._config = config
        self._logger.info(f"Configuration loaded for environment: {environment.value}")
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> AppConfig:
        """
        Load configuration from dictionary (useful for testing).

        Args:
            config_dict: Dictionary of configuration values

        Returns:
            Configured AppConfig instance
        """
        config_dict = dict(config_dict)
        if 'environment' in config_dict and isinstance(config_dict['environment'], str):
            try:
                config_dict['environment'] = Environment(config_dict['environment'])
            except ValueError:
                valid = [env.value for env in Environment]
                raise ConfigError(f"Invalid environment: {config_dict['environment']!r}", {'valid': valid})

        self._config = AppConfig(**config_dict)
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a specific configuration setting.

        Args:
            key: Configuration key to override
            value: New value for the setting

        Returns:
            Self for method chaining
        """
        self._env_overrides[key] = value

        # Update current config if loaded
        if self._config and hasattr(self._config, key):
            setattr(self._config, key, value)
            self._config._validate()  # Re-validate after change

        return self

    def get_config(self) -> AppConfig:
        """
        Get the current configuration.

        Returns:
            Current AppConfig instance

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def get_config_or_default(self) -> AppConfig:
        """Get the current configuration, or defaults when none has been loaded"""
        if self._config is None:
            return AppConfig()
        return self._config

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._env_overrides.clear()
        return self


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> AppConfig:
    """Get the global library configuration"""
    return _config_factory.get_config()


def get_config_or_default() -> AppConfig:
    """Get the global library configuration, falling back to defaults"""
    return _config_factory.get_config_or_default()


def load_config(env_prefix: str = 'MOCKLI_') -> AppConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> AppConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()
