"""Named button sets within a configuration scope."""

import logging

from quick_commands.adapters.base import ConfigStore
from quick_commands.models.button import (
    Button,
    ButtonSet,
    ButtonSetError,
    ButtonSetResult,
    ConfigurationTarget,
)
from quick_commands.utils.ids import ensure_ids_in_array, ensure_set_id, validate_unique_set_name

logger = logging.getLogger(__name__)


def _same_name(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()


class ButtonSetService:
    """Create, rename, delete and switch the named button sets of the current scope.

    Set names are compared case-insensitively and stored trimmed. Every
    operation works on the scope the configuration store currently edits.
    """

    def __init__(self, config_store: ConfigStore) -> None:
        """Initialize button set service.

        Args:
            config_store: Live configuration store holding sets and active set
        """
        self.config_store = config_store

    async def _scope(self) -> ConfigurationTarget:
        return await self.config_store.get_configuration_target()

    async def get_button_sets(self) -> list[ButtonSet]:
        return await self.config_store.get_button_sets(await self._scope())

    async def get_active_set(self) -> str | None:
        return await self.config_store.get_active_set(await self._scope())

    async def get_buttons_for_active_set(self) -> list[Button] | None:
        """Buttons of the active set, or None when no set is active or it is gone."""
        scope = await self._scope()
        active = await self.config_store.get_active_set(scope)
        if not active:
            return None
        for button_set in await self.config_store.get_button_sets(scope):
            if button_set.name == active:
                return button_set.buttons
        return None

    async def validate_unique_name(self, name: str) -> bool:
        return validate_unique_set_name(name, await self.get_button_sets())

    async def create_button_set(
        self,
        name: str,
        buttons: list[Button] | None = None,
        source_set_id: str | None = None,
    ) -> ButtonSetResult:
        """Add a set, optionally copying the buttons of another set.

        Args:
            name: New set name
            buttons: Initial buttons (ignored when the source set exists)
            source_set_id: Identifier of a set whose buttons are copied

        Returns:
            ButtonSetResult, failing on an empty or duplicate name
        """
        scope = await self._scope()
        sets = await self.config_store.get_button_sets(scope)
        trimmed, error = self._check_name(name, sets)
        if error:
            return ButtonSetResult(success=False, error=error)

        source = next((s for s in sets if source_set_id and s.id == source_set_id), None)
        initial = source.buttons if source else (buttons or [])

        new_set = ensure_set_id(ButtonSet(name=trimmed, buttons=initial))
        await self.config_store.write_button_sets([*sets, new_set], scope)
        logger.info("Created button set %s in %s scope", trimmed, scope.value)
        return ButtonSetResult(success=True)

    async def save_as_button_set(self, name: str) -> ButtonSetResult:
        """Store the buttons currently in use (active set or plain list) as a new set."""
        scope = await self._scope()
        buttons = await self.get_buttons_for_active_set()
        if buttons is None:
            buttons = await self.config_store.get_buttons_for_scope(scope)
        return await self.create_button_set(name, buttons=buttons)

    async def rename_button_set(self, current_name: str, new_name: str) -> ButtonSetResult:
        scope = await self._scope()
        sets = await self.config_store.get_button_sets(scope)
        index = next(
            (i for i, s in enumerate(sets) if _same_name(s.name, current_name)), None
        )
        if index is None:
            return ButtonSetResult(success=False, error=ButtonSetError.NOT_FOUND)

        others = [s for i, s in enumerate(sets) if i != index]
        trimmed, error = self._check_name(new_name, others)
        if error:
            return ButtonSetResult(success=False, error=error)

        updated = list(sets)
        updated[index] = sets[index].model_copy(update={"name": trimmed})
        active = await self.config_store.get_active_set(scope)

        await self.config_store.write_button_sets(updated, scope)
        if active and _same_name(active, current_name):
            await self.config_store.write_active_set(trimmed, scope)

        logger.info("Renamed button set %s to %s", current_name, trimmed)
        return ButtonSetResult(success=True)

    async def delete_button_set(self, name: str) -> ButtonSetResult:
        """Remove a set; deleting the active set switches back to the plain buttons."""
        scope = await self._scope()
        sets = await self.config_store.get_button_sets(scope)
        remaining = [s for s in sets if not _same_name(s.name, name)]
        if len(remaining) == len(sets):
            return ButtonSetResult(success=False, error=ButtonSetError.NOT_FOUND)

        await self.config_store.write_button_sets(remaining, scope)
        active = await self.config_store.get_active_set(scope)
        if active and _same_name(active, name):
            await self.config_store.write_active_set(None, scope)

        logger.info("Deleted button set %s from %s scope", name, scope.value)
        return ButtonSetResult(success=True)

    async def set_active_set(self, name: str | None) -> ButtonSetResult:
        """Switch to the named set, or to the plain buttons when ``name`` is None."""
        scope = await self._scope()
        if name is None:
            await self.config_store.write_active_set(None, scope)
            return ButtonSetResult(success=True)

        sets = await self.config_store.get_button_sets(scope)
        match = next((s for s in sets if _same_name(s.name, name)), None)
        if match is None:
            return ButtonSetResult(success=False, error=ButtonSetError.NOT_FOUND)

        await self.config_store.write_active_set(match.name, scope)
        return ButtonSetResult(success=True)

    async def update_active_set_buttons(self, buttons: list[Button]) -> bool:
        """Replace the buttons of the active set.

        Returns:
            False when no set is active (callers then save the plain buttons)
        """
        scope = await self._scope()
        active = await self.config_store.get_active_set(scope)
        if not active:
            return False

        sets = await self.config_store.get_button_sets(scope)
        index = next((i for i, s in enumerate(sets) if s.name == active), None)
        if index is None:
            return False

        updated = list(sets)
        updated[index] = sets[index].model_copy(
            update={"buttons": ensure_ids_in_array(buttons)}
        )
        await self.config_store.write_button_sets(updated, scope)
        return True

    @staticmethod
    def _check_name(
        name: str, sets: list[ButtonSet]
    ) -> tuple[str, ButtonSetError | None]:
        trimmed = name.strip()
        if not trimmed:
            return trimmed, ButtonSetError.NAME_REQUIRED
        if not validate_unique_set_name(trimmed, sets):
            return trimmed, ButtonSetError.DUPLICATE_NAME
        return trimmed, None
