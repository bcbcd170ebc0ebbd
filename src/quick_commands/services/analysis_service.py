"""Change analysis between existing and imported button trees."""

from collections.abc import Iterator

from quick_commands.models.button import Button
from quick_commands.models.export_import import (
    ImportAnalysis,
    ImportConflict,
    ShortcutConflict,
    ShortcutConflictButton,
)
from quick_commands.utils.ids import is_content_equal


def _as_conflict(existing: Button, imported: Button) -> ImportConflict:
    return ImportConflict(
        existing_button=existing,
        imported_button=imported.model_copy(update={"id": existing.id}),
    )


def detect_conflicts(
    existing_buttons: list[Button], imported_buttons: list[Button]
) -> list[ImportConflict]:
    """Find same-named top-level buttons whose content differs.

    The imported side of each conflict carries the existing button's ``id``
    so that a later in-place replacement keeps the same identity.

    Args:
        existing_buttons: Live buttons
        imported_buttons: Incoming buttons

    Returns:
        Conflicts in imported order
    """
    existing_by_name = {button.name: button for button in existing_buttons}
    conflicts = []
    for imported in imported_buttons:
        existing = existing_by_name.get(imported.name)
        if existing is not None and not is_content_equal(existing, imported):
            conflicts.append(_as_conflict(existing, imported))
    return conflicts


def _walk_shortcuts(
    buttons: list[Button], path: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], Button]]:
    """Yield ``(ancestor names, button)`` for every button bearing a shortcut."""
    stack = [(path, button) for button in reversed(buttons)]
    while stack:
        parent_path, button = stack.pop()
        if button.shortcut:
            yield parent_path, button
        if button.group:
            child_path = parent_path + (button.name,)
            stack.extend((child_path, child) for child in reversed(button.group))


def detect_shortcut_conflicts(
    existing_buttons: list[Button], imported_buttons: list[Button]
) -> list[ShortcutConflict]:
    """Find sibling buttons that share a shortcut but differ in content.

    Shortcuts are compared case-insensitively and only among buttons with
    the same ancestor path, so the same key used at the root and inside a
    group, or inside two different groups, is not a conflict.

    Args:
        existing_buttons: Live buttons
        imported_buttons: Incoming buttons

    Returns:
        One conflict per colliding (path, shortcut) key, in discovery order
    """
    entries: dict[tuple[tuple[str, ...], str], list[tuple[Button, str]]] = {}
    for source, buttons in (("existing", existing_buttons), ("imported", imported_buttons)):
        for parent_path, button in _walk_shortcuts(buttons):
            bucket = entries.setdefault((parent_path, button.shortcut.lower()), [])
            if any(is_content_equal(button, seen) for seen, _ in bucket):
                continue
            bucket.append((button, source))

    conflicts = []
    for bucket in entries.values():
        if len(bucket) < 2:
            continue
        conflicts.append(
            ShortcutConflict(
                shortcut=bucket[0][0].shortcut.lower(),
                buttons=[
                    ShortcutConflictButton(id=button.id, name=button.name, source=source)
                    for button, source in bucket
                ],
            )
        )
    return conflicts


def analyze_import_changes(
    existing_buttons: list[Button], imported_buttons: list[Button]
) -> ImportAnalysis:
    """Classify imported buttons as added, modified or unchanged.

    Matching is by top-level ``name``; equality ignores identifiers.

    Args:
        existing_buttons: Live buttons
        imported_buttons: Incoming buttons

    Returns:
        ImportAnalysis, including sibling shortcut conflicts
    """
    existing_by_name = {button.name: button for button in existing_buttons}
    analysis = ImportAnalysis()

    for imported in imported_buttons:
        existing = existing_by_name.get(imported.name)
        if existing is None:
            analysis.added.append(imported)
        elif is_content_equal(existing, imported):
            analysis.unchanged.append(imported)
        else:
            analysis.modified.append(_as_conflict(existing, imported))

    analysis.shortcut_conflicts = detect_shortcut_conflicts(
        existing_buttons, imported_buttons
    )
    return analysis
