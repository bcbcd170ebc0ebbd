"""File-backed implementations of the collaborator interfaces."""

import json
import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from quick_commands.adapters.base import ConfigStore, FileStat, FileSystemOperations
from quick_commands.config import get_settings
from quick_commands.config.settings import Settings
from quick_commands.exceptions import NotFoundError
from quick_commands.models.button import Button, ButtonSet, ConfigurationTarget
from quick_commands.utils.ids import (
    ensure_ids_in_array,
    ensure_set_ids_in_array,
    strip_ids_in_array,
    strip_set_ids_in_array,
)

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystemOperations):
    """Local disk access with non-interactive file selection.

    The "dialogs" resolve to paths fixed at construction time: an unset
    ``open_path`` means the selection was cancelled, an unset ``save_path``
    accepts the suggested default.
    """

    def __init__(self, open_path: Path | None = None, save_path: Path | None = None) -> None:
        self.open_path = open_path
        self.save_path = save_path

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(path)

    async def create_directory(self, path: Path) -> None:
        await aiofiles.os.makedirs(path, exist_ok=True)

    async def write_file(self, path: Path, content: str) -> None:
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(content)

    async def read_file(self, path: Path) -> str:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()

    async def stat(self, path: Path) -> FileStat:
        if not await self.exists(path):
            raise NotFoundError(f"File not found: {path}")
        result = await aiofiles.os.stat(path)
        return FileStat(size=result.st_size)

    async def show_open_dialog(self, default_path: Path, title: str) -> Path | None:
        logger.debug("%s: %s", title, self.open_path)
        return self.open_path

    async def show_save_dialog(self, default_path: Path, title: str) -> Path | None:
        chosen = self.save_path or default_path
        logger.debug("%s: %s", title, chosen)
        return chosen


class JsonConfigStore(ConfigStore):
    """Configuration store kept in a single JSON document.

    Layout::

        {"configurationTarget": "workspace",
         "scopes": {"workspace": [...], "global": [...], "local": [...]},
         "buttonSets": {"workspace": [{"name": ..., "buttons": [...]}]},
         "activeSet": {"workspace": "Dev"}}

    Buttons and sets are stored without identifiers and receive fresh ones
    on read.
    """

    def __init__(self, settings: Settings | None = None, path: Path | None = None) -> None:
        self.settings = settings or get_settings()
        self.path = path or self.settings.config_path

    async def _load(self) -> dict:
        if not await aiofiles.os.path.exists(self.path):
            return {}
        async with aiofiles.open(self.path, encoding="utf-8") as f:
            content = await f.read()
        if not content.strip():
            return {}
        return json.loads(content)

    async def _save(self, document: dict) -> None:
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(document, indent=2))

    async def get_buttons_for_scope(self, scope: ConfigurationTarget) -> list[Button]:
        document = await self._load()
        raw = document.get("scopes", {}).get(ConfigurationTarget(scope).value, [])
        buttons = [Button.model_validate(item) for item in raw]
        return ensure_ids_in_array(buttons)

    async def write_buttons(
        self, buttons: list[Button], scope: ConfigurationTarget
    ) -> None:
        document = await self._load()
        scopes = document.setdefault("scopes", {})
        scopes[ConfigurationTarget(scope).value] = [
            button.to_dict() for button in strip_ids_in_array(buttons)
        ]
        await self._save(document)
        logger.info(
            "Wrote %d buttons to %s scope", len(buttons), ConfigurationTarget(scope).value
        )

    async def get_configuration_target(self) -> ConfigurationTarget:
        document = await self._load()
        return ConfigurationTarget(
            document.get("configurationTarget", ConfigurationTarget.WORKSPACE.value)
        )

    async def write_configuration_target(self, scope: ConfigurationTarget) -> None:
        document = await self._load()
        document["configurationTarget"] = ConfigurationTarget(scope).value
        await self._save(document)

    async def get_button_sets(self, scope: ConfigurationTarget) -> list[ButtonSet]:
        document = await self._load()
        raw = document.get("buttonSets", {}).get(ConfigurationTarget(scope).value, [])
        sets = [ButtonSet.model_validate(item) for item in raw]
        return ensure_set_ids_in_array(sets)

    async def write_button_sets(
        self, sets: list[ButtonSet], scope: ConfigurationTarget
    ) -> None:
        document = await self._load()
        stored = document.setdefault("buttonSets", {})
        stored[ConfigurationTarget(scope).value] = [
            button_set.model_dump(by_alias=True, exclude_none=True)
            for button_set in strip_set_ids_in_array(sets)
        ]
        await self._save(document)

    async def get_active_set(self, scope: ConfigurationTarget) -> str | None:
        document = await self._load()
        return document.get("activeSet", {}).get(ConfigurationTarget(scope).value)

    async def write_active_set(
        self, name: str | None, scope: ConfigurationTarget
    ) -> None:
        document = await self._load()
        active = document.setdefault("activeSet", {})
        if name is None:
            active.pop(ConfigurationTarget(scope).value, None)
        else:
            active[ConfigurationTarget(scope).value] = name
        await self._save(document)
