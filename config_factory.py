"""
Configuration Factory - Centralized configuration management for factory_kit
Provides type-safe configuration with validation, loaded from environment
variables, dictionaries or YAML files.
"""

import os
import logging
from typing import Any, Dict, Optional, Type
from dataclasses import asdict, dataclass, replace

import yaml


LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


@dataclass
class FactoryConfig:
    """Factory configuration with type safety and validation"""

    # Sequence settings
    sequence_start: int = 1  # first value handed out by sequence attributes

    # UUID settings
    uuid_uppercase: bool = True

    # Logging
    log_level: str = 'warning'

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate()

    def _validate(self):
        """Validate configuration values"""
        if isinstance(self.sequence_start, bool) or not isinstance(self.sequence_start, int):
            raise ConfigError(f"Invalid sequence_start: {self.sequence_start!r}")

        if self.sequence_start < 0:
            raise ConfigError(f"Invalid sequence_start: {self.sequence_start}")

        if not isinstance(self.log_level, str) or self.log_level.lower() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}")


class ConfigurationFactory:
    """
    Factory for creating and managing factory_kit configuration.

    Features:
    - Environment variable loading with type conversion
    - YAML file loading
    - Configuration validation
    - Singleton pattern for global config access
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[FactoryConfig] = None

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

    def load_from_environment(self, env_prefix: str = '') -> FactoryConfig:
        """
        Load configuration from environment variables.

        Args:
            env_prefix: Optional prefix for environment variables (e.g., 'FACTORY_KIT_')

        Returns:
            Configured FactoryConfig instance
        """
        def get_env_var(key: str, default: Any = None, var_type: Type = str) -> Any:
            """Get environment variable with type conversion"""
            env_key = f"{env_prefix}{key}" if env_prefix else key
            value = os.environ.get(env_key)

            if value is None:
                return default

            if var_type == bool:
                return value.lower() in ('true', '1', 'yes', 'on')
            elif var_type == int:
                try:
                    return int(value)
                except ValueError:
                    self._logger.warning(f"Invalid integer value for {env_key}: {value}, using default: {default}")
                    return default
            else:
                return value

        config = FactoryConfig(
            sequence_start=get_env_var('SEQUENCE_START', 1, int),
            uuid_uppercase=get_env_var('UUID_UPPERCASE', True, bool),
            log_level=get_env_var('LOG_LEVEL', 'warning')
        )

        self._config = self._apply_overrides(config)
        self._logger.info("Configuration loaded from environment variables")
        return self._config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FactoryConfig:
        """
        Load configuration from dictionary (useful for testing).

        Args:
            config_dict: Dictionary of configuration values

        Returns:
            Configured FactoryConfig instance
        """
        try:
            config = FactoryConfig(**dict(config_dict))
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key: {e}")

        self._config = self._apply_overrides(config)
        return self._config

    def load_from_file(self, file_path: str) -> FactoryConfig:
        """
        Load configuration from a YAML file.

        Args:
            file_path: Path to a YAML document whose root is a mapping

        Returns:
            Configured FactoryConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            yaml.YAMLError: If YAML parsing fails
            ConfigError: If the document is not a mapping or holds invalid values
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file)
        except FileNotFoundError:
            self._logger.error(f"Configuration file not found: {file_path}")
            raise
        except yaml.YAMLError as e:
            self._logger.error(f"YAML parsing error: {e}")
            raise

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("YAML root must be a dictionary")

        config = self.load_from_dict(data)
        self._logger.info(f"Configuration loaded from {file_path}")
        return config

    def _apply_overrides(self, config: FactoryConfig) -> FactoryConfig:
        for key, value in self._env_overrides.items():
            setattr(config, key, value)
        config._validate()
        return config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a specific configuration setting.

        Args:
            key: Configuration key to override
            value: New value for the setting

        Returns:
            Self for method chaining

        Raises:
            ConfigError: If the key is unknown or the value is invalid; nothing
                is changed in that case
        """
        base = self._config if self._config is not None else FactoryConfig()
        try:
            replace(base, **{key: value})
        except TypeError:
            raise ConfigError(f"Unknown configuration key: {key}")

        self._env_overrides[key] = value
        if self._config is not None:
            # mutate in place so factories holding this config see the change
            setattr(self._config, key, value)

        return self

    def get_config(self) -> FactoryConfig:
        """
        Get the current configuration.

        Returns:
            Current FactoryConfig instance

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def is_loaded(self) -> bool:
        """Check whether a configuration has been loaded"""
        return self._config is not None

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._env_overrides.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert current configuration to dictionary"""
        if self._config is None:
            raise ConfigError("Configuration not loaded")

        return asdict(self._config)

    def configure_logging(self, logger_name: str = 'factory_kit') -> logging.Logger:
        """
        Apply the configured log level to the factory_kit logger hierarchy.

        Returns:
            The configured logger
        """
        target = logging.getLogger(logger_name)
        target.setLevel(self.get_config().log_level.upper())
        return target


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> FactoryConfig:
    """Get the global factory configuration"""
    return _config_factory.get_config()


def get_config_or_default() -> FactoryConfig:
    """Get the global configuration, or defaults when none has been loaded"""
    if _config_factory.is_loaded():
        return _config_factory.get_config()
    return FactoryConfig()


def load_config(env_prefix: str = '') -> FactoryConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> FactoryConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def load_config_from_file(file_path: str) -> FactoryConfig:
    """Load configuration from a YAML file"""
    return _config_factory.load_from_file(file_path)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()
