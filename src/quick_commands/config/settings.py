"""Application settings management using Pydantic Settings."""

import logging
from pathlib import Path
from typing import Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quick_commands.models.export_import import ImportStrategy


def _get_default_storage_root() -> Path:
    """Get default storage root in the user's home directory."""
    return Path.home() / ".quick_commands"


class Settings(BaseSettings):
    """Application configuration settings.

    All settings can be configured via environment variables with the
    prefix `QUICK_COMMANDS_`. For example, `QUICK_COMMANDS_STORAGE_ROOT`.
    """

    # Storage
    storage_root: Path = Field(
        default_factory=_get_default_storage_root,
        description="Per-installation storage root",
    )
    config_file: str = Field(
        default="config.json",
        description="Configuration store file name under the storage root",
    )

    # Backup
    backup_directory: str = Field(
        default=".backup", description="Backup subdirectory under the storage root"
    )
    backup_filename_prefix: str = Field(
        default="backup", description="Backup file name prefix"
    )

    # Export/Import
    export_directory: Path = Field(
        default_factory=Path.cwd,
        description="Directory suggested for export and import files",
    )
    export_filename_prefix: str = Field(
        default="quick-commands", description="Default export file name prefix"
    )
    max_import_file_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        ge=1,
        description="Maximum import file size in bytes",
    )
    preview_expiry_seconds: int = Field(
        default=300,
        ge=1,
        description="Seconds an import preview stays valid",
    )
    default_import_strategy: ImportStrategy = Field(
        default=ImportStrategy.MERGE, description="Strategy used when none is given"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="QUICK_COMMANDS_", env_file=".env", env_file_encoding="utf-8"
    )

    @model_validator(mode="after")
    def validate_log_level(self) -> Self:
        """Validate the logging level name."""
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")
        self.log_level = level
        return self

    @property
    def backup_path(self) -> Path:
        return self.storage_root / self.backup_directory

    @property
    def config_path(self) -> Path:
        return self.storage_root / self.config_file
