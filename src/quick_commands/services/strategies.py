"""Reconciliation strategies for combining existing and imported buttons."""

from dataclasses import dataclass

from quick_commands.models.button import Button
from quick_commands.models.export_import import ImportStrategy
from quick_commands.services.analysis_service import detect_conflicts


@dataclass
class StrategyResult:
    """Final button list and the number of same-name conflicts it resolved."""

    final_buttons: list[Button]
    conflicts_resolved: int


def replace_buttons(
    existing_buttons: list[Button], imported_buttons: list[Button]
) -> StrategyResult:
    """Use the imported list verbatim."""
    conflicts = detect_conflicts(existing_buttons, imported_buttons)
    return StrategyResult(
        final_buttons=list(imported_buttons), conflicts_resolved=len(conflicts)
    )


def merge_buttons(
    existing_buttons: list[Button], imported_buttons: list[Button]
) -> StrategyResult:
    """Union by name, imported buttons winning.

    A same-named existing button is overwritten in its original position;
    new names are appended in imported order.
    """
    conflicts = detect_conflicts(existing_buttons, imported_buttons)
    by_name = {button.name: button for button in existing_buttons}
    for button in imported_buttons:
        by_name[button.name] = button
    return StrategyResult(
        final_buttons=list(by_name.values()), conflicts_resolved=len(conflicts)
    )


STRATEGIES = {
    ImportStrategy.MERGE: merge_buttons,
    ImportStrategy.REPLACE: replace_buttons,
}


def apply_import_strategy(
    existing_buttons: list[Button],
    imported_buttons: list[Button],
    strategy: ImportStrategy,
) -> StrategyResult:
    """Combine button lists with the given strategy.

    Raises:
        ValueError: If the strategy is unknown
    """
    return STRATEGIES[ImportStrategy(strategy)](existing_buttons, imported_buttons)
