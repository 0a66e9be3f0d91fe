import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rolekeeper.domain.acl.model.permission import MAX_BIT_INDEX
from rolekeeper.domain.acl.model.role import RoleCatalog


# =============================================================================
# ACL Configuration
# =============================================================================


class AclConfig(BaseModel):
    """Role catalog and audit event settings (nested in Config, uses env_nested_delimiter).

    Roles are fixed at deployment: changing ``roles`` on an existing database
    shifts the bit layout and must be treated as a migration.
    """

    roles: list[str] = ["L1", "L2", "L3"]  # Ordinal = position in this list
    max_bit_index: int = MAX_BIT_INDEX  # Highest bit of the stored mask (128-bit by default)
    storage_prefix: str = "_aclp"  # Namespace of permission keys in the backend
    event_standard: str = "nep297"
    event_version: str = "1.0.0"
    event_prefix: str = "acl_"  # Event names become e.g. "acl_role_granted"

    @field_validator("max_bit_index")
    @classmethod
    def validate_max_bit_index(cls, v: int) -> int:
        # Room for the super-admin bit plus one role
        if v < 2:
            raise ValueError(f"max_bit_index must be >= 2, got {v}")
        return v

    @field_validator("roles")
    @classmethod
    def validate_roles(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one role is required")
        # Roles are looked up case-insensitively
        if len({name.lower() for name in v}) != len(v):
            raise ValueError(f"Role names must be unique (ignoring case): {v}")
        return v

    def build_catalog(self) -> RoleCatalog:
        return RoleCatalog.from_names(self.roles, max_bit_index=self.max_bit_index)


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by ROLEKEEPER_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("ROLEKEEPER_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class DatabaseConfig(BaseModel):
    """Database configuration (nested in Config, uses env_nested_delimiter)."""

    url: str = "sqlite://"  # In-memory SQLite unless overridden
    echo: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from ROLEKEEPER_LOG_FILE env var."""
        return os.environ.get("ROLEKEEPER_LOG_FILE")


class Config(BaseSettings):
    acl: AclConfig = AclConfig()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "ROLEKEEPER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows ROLEKEEPER_DATABASE__URL override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - ROLEKEEPER_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so that all loggers pick
    up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
