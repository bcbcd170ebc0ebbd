"""Data models for Quick Command Buttons."""

from quick_commands.models.button import (
    Button,
    ButtonSet,
    ButtonSetError,
    ButtonSetResult,
    ConfigurationTarget,
)
from quick_commands.models.export_import import (
    EXPORT_FORMAT_VERSION,
    BackupResult,
    ExportFormat,
    ExportResult,
    ImportAnalysis,
    ImportConflict,
    ImportPreviewData,
    ImportPreviewResult,
    ImportResult,
    ImportStrategy,
    ShortcutConflict,
    ShortcutConflictButton,
    ValidationResult,
)

__all__ = [
    # Button models
    "Button",
    "ButtonSet",
    "ButtonSetError",
    "ButtonSetResult",
    "ConfigurationTarget",
    # Export/Import models
    "EXPORT_FORMAT_VERSION",
    "ExportFormat",
    "ValidationResult",
    "BackupResult",
    "ExportResult",
    "ImportResult",
    "ImportStrategy",
    "ImportConflict",
    "ImportAnalysis",
    "ShortcutConflict",
    "ShortcutConflictButton",
    "ImportPreviewData",
    "ImportPreviewResult",
]
