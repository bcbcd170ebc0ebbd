"""Identifier helpers for buttons crossing the export boundary.

Live buttons always carry an opaque ``id``; serialized payloads never do.
``ensure_id`` and ``strip_id`` are applied at those two boundaries so the
rest of the code can stay identifier-agnostic.
"""

import uuid

from quick_commands.models.button import Button, ButtonSet


def _new_id() -> str:
    return str(uuid.uuid4())


def ensure_id(button: Button) -> Button:
    """Return a copy of ``button`` with ``id`` populated at every level.

    An existing identifier is kept; a missing one is freshly generated.
    """
    update: dict = {"id": button.id or _new_id()}
    if button.group is not None:
        update["group"] = [ensure_id(child) for child in button.group]
    return button.model_copy(update=update)


def strip_id(button: Button) -> Button:
    """Return a copy of ``button`` without ``id`` at every level."""
    update: dict = {"id": None}
    if button.group is not None:
        update["group"] = [strip_id(child) for child in button.group]
    return button.model_copy(update=update)


def ensure_ids_in_array(buttons: list[Button]) -> list[Button]:
    return [ensure_id(button) for button in buttons]


def strip_ids_in_array(buttons: list[Button]) -> list[Button]:
    return [strip_id(button) for button in buttons]


def is_content_equal(left: Button, right: Button) -> bool:
    """Compare two buttons on every field except ``id``, recursively."""
    return strip_id(left) == strip_id(right)


def ensure_set_id(button_set: ButtonSet) -> ButtonSet:
    return button_set.model_copy(
        update={
            "id": button_set.id or _new_id(),
            "buttons": ensure_ids_in_array(button_set.buttons),
        }
    )


def ensure_set_ids_in_array(sets: list[ButtonSet]) -> list[ButtonSet]:
    return [ensure_set_id(button_set) for button_set in sets]


def strip_set_id(button_set: ButtonSet) -> ButtonSet:
    return button_set.model_copy(
        update={"id": None, "buttons": strip_ids_in_array(button_set.buttons)}
    )


def strip_set_ids_in_array(sets: list[ButtonSet]) -> list[ButtonSet]:
    return [strip_set_id(button_set) for button_set in sets]


def validate_unique_set_name(name: str, existing_sets: list[ButtonSet]) -> bool:
    """Check that no existing set uses ``name``, ignoring case and surrounding space."""
    lowered = name.strip().lower()
    return not any(s.name.strip().lower() == lowered for s in existing_sets)
