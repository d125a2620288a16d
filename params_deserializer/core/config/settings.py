"""Settings loaded from environment variables.

Uses schema-based loading for automatic type coercion and validation.
"""

from dataclasses import dataclass
from pathlib import Path

from params_deserializer.core.config.schema import ConfigSchema
from params_deserializer.core.config.validation import load_env_var


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        log_level: Root log level for the CLI and web integration
        log_deserialization: Whether the web integration logs each body at INFO
        deserializers_dir: Output directory of the generator
        base_import: Module generated code imports ParamsDeserializer from
    """

    log_level: str
    log_deserialization: bool
    deserializers_dir: Path
    base_import: str

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from the environment.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return cls(
            log_level=load_env_var(ConfigSchema.LOG_LEVEL).split()[0].upper(),
            log_deserialization=load_env_var(ConfigSchema.PD_LOG_DESERIALIZATION),
            deserializers_dir=Path(load_env_var(ConfigSchema.PD_DESERIALIZERS_DIR)),
            base_import=load_env_var(ConfigSchema.PD_BASE_IMPORT),
        )
