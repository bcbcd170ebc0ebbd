"""Abstract collaborators consumed by the import/export services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from quick_commands.models.button import Button, ButtonSet, ConfigurationTarget


@dataclass(frozen=True)
class FileStat:
    """File metadata needed before reading an import file."""

    size: int


class ConfigStore(ABC):
    """Abstract base class for the live button configuration store."""

    @abstractmethod
    async def get_buttons_for_scope(self, scope: ConfigurationTarget) -> list[Button]:
        """Read the live buttons for a scope.

        Args:
            scope: Configuration scope

        Returns:
            Buttons with identifiers populated
        """
        pass

    @abstractmethod
    async def write_buttons(
        self, buttons: list[Button], scope: ConfigurationTarget
    ) -> None:
        """Replace the live buttons for a scope.

        Args:
            buttons: Final button list
            scope: Configuration scope
        """
        pass

    @abstractmethod
    async def get_configuration_target(self) -> ConfigurationTarget:
        """Get the scope currently selected for editing."""
        pass

    @abstractmethod
    async def write_configuration_target(self, scope: ConfigurationTarget) -> None:
        """Select the scope used for editing."""
        pass

    @abstractmethod
    async def get_button_sets(self, scope: ConfigurationTarget) -> list[ButtonSet]:
        """Read the named button sets of a scope, identifiers populated."""
        pass

    @abstractmethod
    async def write_button_sets(
        self, sets: list[ButtonSet], scope: ConfigurationTarget
    ) -> None:
        """Replace the named button sets of a scope."""
        pass

    @abstractmethod
    async def get_active_set(self, scope: ConfigurationTarget) -> str | None:
        """Get the name of the active set, or None when the plain buttons are used."""
        pass

    @abstractmethod
    async def write_active_set(
        self, name: str | None, scope: ConfigurationTarget
    ) -> None:
        """Select the active set of a scope; None switches back to the plain buttons."""
        pass


class FileSystemOperations(ABC):
    """Abstract base class for file access and file selection."""

    @abstractmethod
    async def exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    async def create_directory(self, path: Path) -> None:
        pass

    @abstractmethod
    async def write_file(self, path: Path, content: str) -> None:
        pass

    @abstractmethod
    async def read_file(self, path: Path) -> str:
        pass

    @abstractmethod
    async def stat(self, path: Path) -> FileStat:
        pass

    @abstractmethod
    async def show_open_dialog(self, default_path: Path, title: str) -> Path | None:
        """Ask for a file to import.

        Args:
            default_path: Suggested location
            title: Dialog title

        Returns:
            Selected path, or None when the selection was cancelled
        """
        pass

    @abstractmethod
    async def show_save_dialog(self, default_path: Path, title: str) -> Path | None:
        """Ask where to write an export.

        Args:
            default_path: Suggested file path
            title: Dialog title

        Returns:
            Chosen path, or None when the prompt was cancelled
        """
        pass
