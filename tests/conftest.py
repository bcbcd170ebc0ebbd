"""Pytest configuration and fixtures for quick-commands tests."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from quick_commands.adapters.base import ConfigStore, FileStat, FileSystemOperations
from quick_commands.config import reset_settings
from quick_commands.config.settings import Settings
from quick_commands.models.button import Button
from quick_commands.services.backup_service import BackupService
from quick_commands.services.export_import_service import ExportImportService


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Drop the cached global settings around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Test configuration settings."""
    return Settings(
        storage_root=tmp_path / "storage",
        export_directory=tmp_path / "exports",
        log_level="DEBUG",
    )


@pytest.fixture
def sample_buttons() -> list[Button]:
    """Live buttons with identifiers."""
    return [
        Button(id="btn-1", name="Run Tests", command="npm test", shortcut="t"),
        Button(id="btn-2", name="Build", command="npm build"),
    ]


@pytest.fixture
def mock_file_system() -> AsyncMock:
    """File system whose backup directory exists and whose files are small."""
    mock = AsyncMock(spec=FileSystemOperations)
    mock.exists.return_value = True
    mock.stat.return_value = FileStat(size=1024)
    mock.show_open_dialog.return_value = Path("/import/config.json")
    mock.show_save_dialog.return_value = Path("/export/config.json")
    return mock


@pytest.fixture
def mock_config_store(sample_buttons: list[Button]) -> AsyncMock:
    """Configuration store returning the sample buttons for every scope."""
    mock = AsyncMock(spec=ConfigStore)
    mock.get_buttons_for_scope.return_value = sample_buttons
    return mock


@pytest_asyncio.fixture
async def backup_service(
    mock_file_system: AsyncMock, test_settings: Settings
) -> BackupService:
    """Backup service."""
    return BackupService(file_system=mock_file_system, settings=test_settings)


@pytest_asyncio.fixture
async def export_import_service(
    mock_config_store: AsyncMock,
    mock_file_system: AsyncMock,
    test_settings: Settings,
) -> ExportImportService:
    """Export/Import service."""
    return ExportImportService(
        config_store=mock_config_store,
        file_system=mock_file_system,
        settings=test_settings,
    )
