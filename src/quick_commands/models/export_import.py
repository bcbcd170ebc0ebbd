"""Export/Import models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from quick_commands.models.button import Button, ConfigurationTarget
from quick_commands.utils.timestamps import iso_timestamp

EXPORT_FORMAT_VERSION = "1.0"


class ImportStrategy(str, Enum):
    """Rule used to combine existing and imported buttons."""

    MERGE = "merge"
    REPLACE = "replace"


class ExportFormat(BaseModel):
    """Export and backup file payload."""

    model_config = ConfigDict(populate_by_name=True)

    version: StrictStr
    exported_at: StrictStr = Field(alias="exportedAt")
    configuration_target: ConfigurationTarget = Field(alias="configurationTarget")
    buttons: list[Button]

    @field_validator("exported_at")
    @classmethod
    def validate_exported_at(cls, value: str) -> str:
        """Require an ISO 8601 timestamp with a time component."""
        if "T" not in value.upper():
            raise ValueError("Invalid ISO 8601 date string")
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError("Invalid ISO 8601 date string") from e
        return value

    @classmethod
    def create(
        cls, buttons: list[Button], target: ConfigurationTarget
    ) -> "ExportFormat":
        """Build a payload stamped with the current time."""
        return cls(
            version=EXPORT_FORMAT_VERSION,
            exported_at=iso_timestamp(),
            configuration_target=target,
            buttons=buttons,
        )

    def to_json(self) -> str:
        """Serialize with camelCase keys and two-space indentation."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class ValidationResult(BaseModel):
    """Outcome of validating an import payload."""

    success: bool
    data: ExportFormat | None = None
    error: str | None = None


class BackupResult(BaseModel):
    """Result of a backup operation."""

    success: bool
    backup_path: str | None = None
    error: str | None = None


class ExportResult(BaseModel):
    """Result of export operation."""

    success: bool
    file_path: str | None = None
    error: str | None = None


class ImportResult(BaseModel):
    """Result of import operation."""

    success: bool
    imported_count: int = 0
    conflicts_resolved: int | None = None
    backup_path: str | None = None
    error: str | None = None


class ImportConflict(BaseModel):
    """Same-named button whose content differs between existing and imported."""

    existing_button: Button
    imported_button: Button


class ShortcutConflictButton(BaseModel):
    id: str | None = None
    name: str
    source: Literal["existing", "imported"]


class ShortcutConflict(BaseModel):
    """Sibling buttons bound to the same shortcut."""

    shortcut: str
    buttons: list[ShortcutConflictButton] = Field(default_factory=list)


class ImportAnalysis(BaseModel):
    """Classification of imported buttons against existing ones."""

    added: list[Button] = Field(default_factory=list)
    modified: list[ImportConflict] = Field(default_factory=list)
    unchanged: list[Button] = Field(default_factory=list)
    shortcut_conflicts: list[ShortcutConflict] = Field(default_factory=list)


class ImportPreviewData(BaseModel):
    """Analysis awaiting confirmation."""

    buttons: list[Button]
    analysis: ImportAnalysis
    file_uri: str
    source_target: ConfigurationTarget
    target_scope: ConfigurationTarget
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ImportPreviewResult(BaseModel):
    """Result of preview operation."""

    success: bool
    preview: ImportPreviewData | None = None
    error: str | None = None
