"""Pydantic DTOs for record-list editing operations."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class RecordOperation(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"
    ADD_NESTED = "add-nested"
    UPDATE_NESTED = "update-nested"
    REMOVE_NESTED = "remove-nested"
    REORDER = "reorder"
    ADD_PRESET = "add-preset"


class RecordOperationRequest(BaseModel):
    """Current list plus the arguments of one editing operation.

    Which arguments matter depends on the operation: ``index`` for
    remove/update, ``field``/``value`` for update, ``item_index`` for nested
    edits, ``from_index``/``to_index`` for reorder, ``title`` for presets.
    """

    items: list[dict[str, Any]] = Field(default_factory=list)
    index: int | None = None
    field: str | None = None
    value: Any = None
    item_index: int | None = None
    from_index: int | None = None
    to_index: int | None = None
    title: str | None = None
    max_items: int | None = Field(None, ge=0)


class RecordListResponse(BaseModel):
    shape: str
    items: list[dict[str, Any]]
    counter: str
    can_add: bool
    changed: bool = True
