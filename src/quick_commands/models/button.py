"""Button models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class ConfigurationTarget(str, Enum):
    """Configuration scope a button list belongs to."""

    WORKSPACE = "workspace"
    GLOBAL = "global"
    LOCAL = "local"


class Button(BaseModel):
    """Command button, or a group of buttons when ``group`` is set."""

    model_config = ConfigDict(populate_by_name=True)

    id: StrictStr | None = None
    name: StrictStr = Field(min_length=1)
    command: StrictStr | None = None
    shortcut: StrictStr | None = None
    group: list[Button] | None = None
    execute_all: StrictBool | None = Field(default=None, alias="executeAll")
    color: StrictStr | None = None
    terminal_name: StrictStr | None = Field(default=None, alias="terminalName")
    use_vs_code_api: StrictBool | None = Field(default=None, alias="useVsCodeApi")
    new_terminal: StrictBool | None = Field(default=None, alias="newTerminal")
    insert_only: StrictBool | None = Field(default=None, alias="insertOnly")

    @property
    def is_group(self) -> bool:
        return self.group is not None

    def to_dict(self) -> dict:
        """Serialize to the wire shape (camelCase keys, unset fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ButtonSet(BaseModel):
    """Named, switchable list of buttons."""

    id: StrictStr | None = None
    name: StrictStr = Field(min_length=1)
    buttons: list[Button] = Field(default_factory=list)


class ButtonSetError(str, Enum):
    """Reason a button set operation was refused."""

    DUPLICATE_NAME = "duplicateSetName"
    NAME_REQUIRED = "setNameRequired"
    NOT_FOUND = "setNotFound"


class ButtonSetResult(BaseModel):
    """Outcome of a button set operation."""

    success: bool
    error: ButtonSetError | None = None
