"""Environment-based configuration."""

from params_deserializer.core.config.schema import ConfigSchema, EnvVarSpec
from params_deserializer.core.config.settings import Settings
from params_deserializer.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "ConfigError",
    "ConfigSchema",
    "EnvVarSpec",
    "Settings",
    "load_env_var",
    "validate_all",
]
