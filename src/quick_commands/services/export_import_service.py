"""Service for configuration export/import."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from quick_commands.adapters.base import ConfigStore, FileSystemOperations
from quick_commands.config import get_settings
from quick_commands.config.settings import Settings
from quick_commands.exceptions import (
    BackupError,
    PreviewExpiredError,
    QuickCommandsError,
    ScopeMismatchError,
    ValidationError,
)
from quick_commands.models.button import Button, ConfigurationTarget
from quick_commands.models.export_import import (
    ExportFormat,
    ExportResult,
    ImportPreviewData,
    ImportPreviewResult,
    ImportResult,
    ImportStrategy,
    ValidationResult,
)
from quick_commands.services.analysis_service import analyze_import_changes
from quick_commands.services.backup_service import BackupService
from quick_commands.services.strategies import apply_import_strategy
from quick_commands.utils.ids import ensure_ids_in_array, strip_ids_in_array
from quick_commands.utils.timestamps import filename_timestamp
from quick_commands.utils.validators import validate_import_data

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"
PREVIEW_EXPIRED_MESSAGE = "Preview has expired. Please re-select the file to import."
SCOPE_CHANGED_MESSAGE = (
    "Configuration scope has changed since preview. Please re-preview the import."
)
IMPORT_DIALOG_TITLE = "Select Configuration File to Import"


def _error_message(error: Exception) -> str:
    return str(error) or UNKNOWN_ERROR


class ExportImportService:
    """Exports, imports and previews button configurations.

    Every public operation returns a result model; failures are reported
    through ``success``/``error`` and never raised to the caller. An import
    only writes to the configuration store after a backup of the current
    state has been written successfully.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        file_system: FileSystemOperations,
        backup_service: BackupService | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize export/import service.

        Args:
            config_store: Live configuration store
            file_system: File system operations and file selection
            backup_service: Backup service (built from file_system if omitted)
            settings: Application settings (defaults to the global instance)
        """
        self.config_store = config_store
        self.file_system = file_system
        self.settings = settings or get_settings()
        self.backup_service = backup_service or BackupService(file_system, self.settings)

    def validate_import_data(self, content: str) -> ValidationResult:
        """Parse and validate raw import file content."""
        return validate_import_data(content)

    async def export_configuration(self, scope: ConfigurationTarget) -> ExportResult:
        """Export the buttons of a scope to a user-chosen file.

        Args:
            scope: Scope to export

        Returns:
            ExportResult with the written path; a cancelled save prompt
            yields ``success=False`` without an error
        """
        try:
            scope = ConfigurationTarget(scope)
            buttons = await self.config_store.get_buttons_for_scope(scope)
            payload = ExportFormat.create(strip_ids_in_array(buttons), scope)

            default_path = self.settings.export_directory / (
                f"{self.settings.export_filename_prefix}-{scope.value}-"
                f"{filename_timestamp()}.json"
            )
            save_path = await self.file_system.show_save_dialog(
                default_path, f"Export Quick Command Buttons ({scope.value})"
            )
            if save_path is None:
                return ExportResult(success=False)

            await self.file_system.write_file(save_path, payload.to_json())
        except Exception as e:
            logger.exception("Export failed: %s", e)
            return ExportResult(success=False, error=_error_message(e))

        logger.info("Exported %d buttons from %s to %s", len(buttons), scope.value, save_path)
        return ExportResult(success=True, file_path=str(save_path))

    async def import_configuration(
        self,
        scope: ConfigurationTarget,
        file_path: Path | None = None,
        strategy: ImportStrategy | None = None,
    ) -> ImportResult:
        """Import an export file into a scope.

        Args:
            scope: Scope to write into
            file_path: Import file (prompted for if omitted)
            strategy: "merge" or "replace" (defaults to the configured strategy)

        Returns:
            ImportResult with counts and the backup path
        """
        try:
            scope = ConfigurationTarget(scope)
            loaded = await self._get_and_validate_import_file(file_path)
            if loaded is None:
                return ImportResult(success=False)

            _, data = loaded
            return await self._execute_import(data.buttons, scope, strategy)
        except QuickCommandsError as e:
            logger.warning("Import aborted: %s", e)
            return ImportResult(success=False, error=_error_message(e))
        except Exception as e:
            logger.exception("Import failed: %s", e)
            return ImportResult(success=False, error=_error_message(e))

    async def preview_import(
        self, scope: ConfigurationTarget, file_path: Path | None = None
    ) -> ImportPreviewResult:
        """Analyze an import file against a scope without writing anything.

        Args:
            scope: Scope the import would be written into
            file_path: Import file (prompted for if omitted)

        Returns:
            ImportPreviewResult carrying a timestamped preview
        """
        try:
            scope = ConfigurationTarget(scope)
            loaded = await self._get_and_validate_import_file(file_path)
            if loaded is None:
                return ImportPreviewResult(success=False)

            path, data = loaded
            imported_buttons = ensure_ids_in_array(data.buttons)
            existing_buttons = await self.config_store.get_buttons_for_scope(scope)
            analysis = analyze_import_changes(existing_buttons, imported_buttons)
        except QuickCommandsError as e:
            logger.warning("Preview aborted: %s", e)
            return ImportPreviewResult(success=False, error=_error_message(e))
        except Exception as e:
            logger.exception("Preview failed: %s", e)
            return ImportPreviewResult(success=False, error=_error_message(e))

        logger.info(
            "Previewed import of %s: %d added, %d modified, %d unchanged, "
            "%d shortcut conflicts",
            path,
            len(analysis.added),
            len(analysis.modified),
            len(analysis.unchanged),
            len(analysis.shortcut_conflicts),
        )
        return ImportPreviewResult(
            success=True,
            preview=ImportPreviewData(
                buttons=imported_buttons,
                analysis=analysis,
                file_uri=str(path),
                source_target=data.configuration_target,
                target_scope=scope,
            ),
        )

    async def confirm_import(
        self,
        preview: ImportPreviewData,
        scope: ConfigurationTarget,
        strategy: ImportStrategy | None = None,
    ) -> ImportResult:
        """Commit a previously previewed import.

        Args:
            preview: Preview returned by ``preview_import``
            scope: Scope to write into; must match the previewed scope
            strategy: "merge" or "replace" (defaults to the configured strategy)

        Returns:
            ImportResult with counts and the backup path
        """
        try:
            self._check_preview(preview, ConfigurationTarget(scope))
            return await self._execute_import(
                preview.buttons, ConfigurationTarget(scope), strategy
            )
        except QuickCommandsError as e:
            logger.warning("Import confirmation rejected: %s", e)
            return ImportResult(success=False, error=_error_message(e))
        except Exception as e:
            logger.exception("Import confirmation failed: %s", e)
            return ImportResult(success=False, error=_error_message(e))

    def _check_preview(self, preview: ImportPreviewData, scope: ConfigurationTarget) -> None:
        """Reject stale previews and previews computed for another scope.

        Raises:
            PreviewExpiredError: If the preview is older than the expiry window
            ScopeMismatchError: If ``scope`` differs from the previewed scope
        """
        timestamp = preview.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        elapsed = datetime.now(timezone.utc) - timestamp
        if elapsed > timedelta(seconds=self.settings.preview_expiry_seconds):
            raise PreviewExpiredError(PREVIEW_EXPIRED_MESSAGE)

        if preview.target_scope != scope:
            raise ScopeMismatchError(SCOPE_CHANGED_MESSAGE)

    async def _get_and_validate_import_file(
        self, file_path: Path | None
    ) -> tuple[Path, ExportFormat] | None:
        """Resolve, size-check, read and validate the import file.

        Returns:
            ``(path, data)``, or None when file selection was cancelled

        Raises:
            ValidationError: If the file is too large or malformed
        """
        path = file_path
        if path is None:
            path = await self.file_system.show_open_dialog(
                self.settings.export_directory
                / f"{self.settings.export_filename_prefix}-*.json",
                IMPORT_DIALOG_TITLE,
            )
        if path is None:
            return None
        path = Path(path)

        file_stat = await self.file_system.stat(path)
        max_size = self.settings.max_import_file_size
        if file_stat.size > max_size:
            raise ValidationError(
                f"File too large: {file_stat.size} bytes (max: {max_size} bytes)"
            )

        content = await self.file_system.read_file(path)
        validation = validate_import_data(content)
        if not validation.success or validation.data is None:
            raise ValidationError(validation.error or UNKNOWN_ERROR)

        return path, validation.data

    async def _execute_import(
        self,
        buttons: list[Button],
        scope: ConfigurationTarget,
        strategy: ImportStrategy | None,
    ) -> ImportResult:
        """Back up the scope, reconcile and write.

        Raises:
            BackupError: If the backup could not be written; nothing is written
        """
        strategy = ImportStrategy(strategy or self.settings.default_import_strategy)
        imported_buttons = ensure_ids_in_array(buttons)
        existing_buttons = await self.config_store.get_buttons_for_scope(scope)

        backup = await self.backup_service.create_backup(existing_buttons, scope)
        if not backup.success:
            raise BackupError(
                f"Failed to create backup: {backup.error}. Import cancelled for safety."
            )

        result = apply_import_strategy(existing_buttons, imported_buttons, strategy)
        await self.config_store.write_buttons(result.final_buttons, scope)

        logger.info(
            "Imported %d buttons into %s (%s, %d conflicts resolved)",
            len(buttons),
            scope.value,
            strategy.value,
            result.conflicts_resolved,
        )
        return ImportResult(
            success=True,
            imported_count=len(buttons),
            conflicts_resolved=result.conflicts_resolved,
            backup_path=backup.backup_path,
        )
