"""Tests for the file-backed collaborators."""

import json
from pathlib import Path

import pytest

from quick_commands.adapters.local import JsonConfigStore, LocalFileSystem
from quick_commands.config.settings import Settings
from quick_commands.exceptions import NotFoundError
from quick_commands.models.button import Button, ButtonSet, ConfigurationTarget


class TestLocalFileSystem:
    """Test LocalFileSystem."""

    @pytest.mark.asyncio
    async def test_write_read_stat(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        directory = tmp_path / "a" / "b"

        assert not await fs.exists(directory)
        await fs.create_directory(directory)
        await fs.create_directory(directory)
        target = directory / "file.json"
        await fs.write_file(target, "{}")

        assert await fs.read_file(target) == "{}"
        assert (await fs.stat(target)).size == 2

    @pytest.mark.asyncio
    async def test_stat_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            await LocalFileSystem().stat(tmp_path / "missing.json")

    @pytest.mark.asyncio
    async def test_dialogs(self, tmp_path: Path) -> None:
        default = tmp_path / "default.json"

        assert await LocalFileSystem().show_open_dialog(default, "Open") is None
        assert await LocalFileSystem().show_save_dialog(default, "Save") == default

        fs = LocalFileSystem(open_path=tmp_path / "in.json", save_path=tmp_path / "out.json")
        assert await fs.show_open_dialog(default, "Open") == tmp_path / "in.json"
        assert await fs.show_save_dialog(default, "Save") == tmp_path / "out.json"


class TestJsonConfigStore:
    """Test JsonConfigStore."""

    @pytest.mark.asyncio
    async def test_empty_store(self, test_settings: Settings) -> None:
        store = JsonConfigStore(test_settings)

        assert await store.get_buttons_for_scope(ConfigurationTarget.GLOBAL) == []
        assert await store.get_configuration_target() == ConfigurationTarget.WORKSPACE

    @pytest.mark.asyncio
    async def test_buttons_stored_without_ids(self, test_settings: Settings) -> None:
        store = JsonConfigStore(test_settings)
        buttons = [
            Button(id="1", name="Build", command="make", new_terminal=True),
            Button(id="2", name="Group", group=[Button(id="3", name="Test", command="pytest")]),
        ]

        await store.write_buttons(buttons, ConfigurationTarget.LOCAL)

        document = json.loads(test_settings.config_path.read_text(encoding="utf-8"))
        assert document["scopes"]["local"][0] == {
            "name": "Build",
            "command": "make",
            "newTerminal": True,
        }
        assert "id" not in document["scopes"]["local"][1]["group"][0]

        loaded = await store.get_buttons_for_scope(ConfigurationTarget.LOCAL)
        assert [b.name for b in loaded] == ["Build", "Group"]
        assert all(b.id for b in loaded)
        assert loaded[1].group[0].id
        assert await store.get_buttons_for_scope(ConfigurationTarget.GLOBAL) == []

    @pytest.mark.asyncio
    async def test_configuration_target(self, test_settings: Settings) -> None:
        store = JsonConfigStore(test_settings)
        await store.write_buttons([Button(name="A")], ConfigurationTarget.GLOBAL)

        await store.write_configuration_target(ConfigurationTarget.GLOBAL)

        assert await store.get_configuration_target() == ConfigurationTarget.GLOBAL
        assert len(await store.get_buttons_for_scope(ConfigurationTarget.GLOBAL)) == 1

    @pytest.mark.asyncio
    async def test_button_sets_stored_without_ids(self, test_settings: Settings) -> None:
        store = JsonConfigStore(test_settings)
        sets = [ButtonSet(id="s1", name="Dev", buttons=[Button(id="b1", name="Serve")])]

        await store.write_button_sets(sets, ConfigurationTarget.WORKSPACE)
        await store.write_active_set("Dev", ConfigurationTarget.WORKSPACE)

        document = json.loads(test_settings.config_path.read_text(encoding="utf-8"))
        assert document["buttonSets"]["workspace"] == [
            {"name": "Dev", "buttons": [{"name": "Serve"}]}
        ]
        assert document["activeSet"] == {"workspace": "Dev"}

        loaded = await store.get_button_sets(ConfigurationTarget.WORKSPACE)
        assert loaded[0].id and loaded[0].buttons[0].id

        await store.write_active_set(None, ConfigurationTarget.WORKSPACE)
        assert await store.get_active_set(ConfigurationTarget.WORKSPACE) is None
