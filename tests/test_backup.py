"""Tests for the backup service."""

import json
import re
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from quick_commands.adapters.local import LocalFileSystem
from quick_commands.config.settings import Settings
from quick_commands.models.button import Button, ConfigurationTarget
from quick_commands.services.backup_service import BackupService


class TestCreateBackup:
    """Test create_backup with a mocked file system."""

    @pytest.mark.asyncio
    async def test_creates_missing_directory(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
        test_settings: Settings,
    ) -> None:
        mock_file_system.exists.return_value = False

        await backup_service.create_backup(sample_buttons, ConfigurationTarget.GLOBAL)

        mock_file_system.create_directory.assert_awaited_once_with(test_settings.backup_path)

    @pytest.mark.asyncio
    async def test_existing_directory_is_reused(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        mock_file_system.exists.return_value = True

        await backup_service.create_backup(sample_buttons, ConfigurationTarget.WORKSPACE)

        mock_file_system.create_directory.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_writes_export_format(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        result = await backup_service.create_backup(sample_buttons, ConfigurationTarget.LOCAL)

        assert result.success is True
        path, content = mock_file_system.write_file.call_args.args
        assert str(path) == result.backup_path
        payload = json.loads(content)
        assert payload["version"] == "1.0"
        assert payload["configurationTarget"] == "local"
        assert all("id" not in button for button in payload["buttons"])
        assert '"version": "1.0"' in content

    @pytest.mark.asyncio
    async def test_file_name(
        self,
        backup_service: BackupService,
        sample_buttons: list[Button],
        test_settings: Settings,
    ) -> None:
        result = await backup_service.create_backup(sample_buttons, ConfigurationTarget.WORKSPACE)

        path = Path(result.backup_path)
        assert path.parent == test_settings.storage_root / ".backup"
        assert re.fullmatch(
            r"backup-workspace-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.json", path.name
        )

    @pytest.mark.asyncio
    async def test_write_failure(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        mock_file_system.write_file.side_effect = OSError("Write failed")

        result = await backup_service.create_backup(sample_buttons, ConfigurationTarget.GLOBAL)

        assert result.success is False
        assert result.error == "Write failed"
        assert result.backup_path is None

    @pytest.mark.asyncio
    async def test_directory_failure(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        mock_file_system.exists.return_value = False
        mock_file_system.create_directory.side_effect = PermissionError("Permission denied")

        result = await backup_service.create_backup(sample_buttons, ConfigurationTarget.GLOBAL)

        assert result.success is False
        assert result.error == "Permission denied"
        mock_file_system.write_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_without_message(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        mock_file_system.write_file.side_effect = RuntimeError()

        result = await backup_service.create_backup(sample_buttons, ConfigurationTarget.GLOBAL)

        assert result.error == "Unknown error"

    @pytest.mark.asyncio
    async def test_unknown_scope(
        self,
        backup_service: BackupService,
        mock_file_system: AsyncMock,
        sample_buttons: list[Button],
    ) -> None:
        result = await backup_service.create_backup(sample_buttons, "nonsense")

        assert result.success is False
        assert "nonsense" in result.error
        assert result.backup_path is None
        mock_file_system.write_file.assert_not_awaited()


@pytest.mark.asyncio
async def test_backup_on_disk(test_settings: Settings) -> None:
    """Test a backup written through the local file system."""
    service = BackupService(LocalFileSystem(), test_settings)
    buttons = [Button(id="g", name="Group", group=[Button(id="c", name="C", command="ls")])]

    result = await service.create_backup(buttons, ConfigurationTarget.GLOBAL)

    assert result.success is True
    payload = json.loads(Path(result.backup_path).read_text(encoding="utf-8"))
    assert payload["buttons"] == [{"name": "Group", "group": [{"name": "C", "command": "ls"}]}]
