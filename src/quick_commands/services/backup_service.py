"""Service for pre-import configuration backups."""

import logging
from datetime import datetime, timezone

from quick_commands.adapters.base import FileSystemOperations
from quick_commands.config import get_settings
from quick_commands.config.settings import Settings
from quick_commands.models.button import Button, ConfigurationTarget
from quick_commands.models.export_import import BackupResult, ExportFormat
from quick_commands.utils.ids import strip_ids_in_array
from quick_commands.utils.timestamps import filename_timestamp

logger = logging.getLogger(__name__)


class BackupService:
    """Writes identifier-free snapshots of a scope before it is overwritten."""

    def __init__(
        self,
        file_system: FileSystemOperations,
        settings: Settings | None = None,
    ) -> None:
        """Initialize backup service.

        Args:
            file_system: File system operations
            settings: Application settings (defaults to the global instance)
        """
        self.file_system = file_system
        self.settings = settings or get_settings()

    async def create_backup(
        self, buttons: list[Button], scope: ConfigurationTarget
    ) -> BackupResult:
        """Snapshot ``buttons`` under the backup directory.

        Failures are returned, not raised, and nothing already written is
        cleaned up. Callers must not proceed with a destructive write when
        ``success`` is False.

        Args:
            buttons: Current live buttons of the scope
            scope: Scope the buttons belong to

        Returns:
            BackupResult with the written path, or the failure message
        """
        try:
            scope = ConfigurationTarget(scope)
            backup_dir = self.settings.backup_path
            if not await self.file_system.exists(backup_dir):
                await self.file_system.create_directory(backup_dir)

            timestamp = filename_timestamp(datetime.now(timezone.utc))
            filename = f"{self.settings.backup_filename_prefix}-{scope.value}-{timestamp}.json"
            backup_path = backup_dir / filename

            payload = ExportFormat.create(strip_ids_in_array(buttons), scope)
            await self.file_system.write_file(backup_path, payload.to_json())
        except Exception as e:
            message = str(e) or "Unknown error"
            logger.error("Failed to create backup: %s", message, exc_info=True)
            return BackupResult(success=False, error=message)

        logger.info("Backed up %d buttons to %s", len(buttons), backup_path)
        return BackupResult(success=True, backup_path=str(backup_path))
