"""Bounded ordered record lists: the controlled editor shared by all array fields.

One ``RecordListEditor`` serves achievements, testimonials, activities,
"more about" cards and process steps. Each concrete list is only a
``RecordShape``: the record dataclass (field list + default factory), optional
per-field validators, a maximum count and a blank-record predicate used when
the list is serialised.

The editor never mutates its ``value`` in place. Every operation builds a new
list and hands it to ``on_change``; the owner decides what to render next.
"""

import dataclasses
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from cigi_web.application.components.drag_reorder import DragReorderController
from cigi_web.domain.entities import Record
from cigi_web.domain.exceptions import InvalidFieldValueError, UnknownFieldError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

# A validator returns the (possibly normalised) value or raises ValueError/TypeError.
Validator = Callable[[Any], Any]
ChangeHandler = Callable[[list[Any]], object]


@dataclass(frozen=True)
class RecordShape(Generic[RecordT]):
    """Descriptor of one family of records."""

    name: str
    record_type: type[RecordT]
    max_items: int | None = None
    validators: Mapping[str, Validator] = field(default_factory=dict)
    blank_fields: tuple[str, ...] = ()
    normalize: Callable[[list[RecordT]], list[RecordT]] | None = None

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self.record_type) if f.name != "id")

    def new_record(self, **values: Any) -> RecordT:
        return self.record_type(**values)

    def clean(self, field_name: str, value: Any) -> Any:
        """Check ``field_name`` belongs to the shape and run its validator."""
        if field_name not in self.field_names:
            raise UnknownFieldError(self.name, field_name)
        validator = self.validators.get(field_name)
        if validator is None:
            return value
        try:
            return validator(value)
        except (TypeError, ValueError) as exc:
            raise InvalidFieldValueError(self.name, field_name, str(exc)) from exc

    def is_blank(self, record: RecordT) -> bool:
        """True when every blank-check field is empty or whitespace."""
        if not self.blank_fields:
            return False
        return all(not str(getattr(record, name) or "").strip() for name in self.blank_fields)

    def to_dict(self, record: RecordT) -> dict[str, Any]:
        return dataclasses.asdict(record)

    def from_dict(self, data: Mapping[str, Any]) -> RecordT:
        """Build a record from decoded JSON, ignoring unknown keys."""
        known = {"id", *self.field_names}
        values = {k: v for k, v in data.items() if k in known}
        if values.get("id") in (None, ""):
            values.pop("id", None)
        else:
            values["id"] = str(values["id"])
        return self.record_type(**values)


class RecordListEditor(Generic[RecordT]):
    """Controlled editor for a list of records of one shape.

    ``expanded_index`` is local UI state: the card currently unfolded. It is
    reconciled on removal so it never points past the list.
    """

    def __init__(
        self,
        shape: RecordShape[RecordT],
        value: Sequence[RecordT] = (),
        on_change: ChangeHandler | None = None,
        max_items: int | None = None,
    ):
        self.shape = shape
        self.value: list[RecordT] = list(value)
        self.max_items = max_items if max_items is not None else shape.max_items
        self.expanded_index: int | None = None
        self._on_change = on_change
        self.drag: DragReorderController[RecordT] = DragReorderController(self._emit)

    @property
    def can_add(self) -> bool:
        return self.max_items is None or len(self.value) < self.max_items

    @property
    def counter(self) -> str:
        """Badge text like "2/3", or just "2" for unbounded lists."""
        if self.max_items is None:
            return str(len(self.value))
        return f"{len(self.value)}/{self.max_items}"

    def add(self) -> list[RecordT]:
        """Append a default record; no-op once ``max_items`` is reached."""
        if not self.can_add:
            return self.value
        items = [*self.value, self.shape.new_record()]
        self.expanded_index = len(self.value)
        return self._emit(items)

    def add_preset(self, record: RecordT, unique_by: str = "title") -> list[RecordT]:
        """Append a suggested record unless one with the same key already exists."""
        key = str(getattr(record, unique_by, "")).lower()
        if not self.can_add or any(str(getattr(r, unique_by, "")).lower() == key for r in self.value):
            return self.value
        return self._emit([*self.value, record])

    def available_presets(self, presets: Sequence[RecordT], unique_by: str = "title") -> list[RecordT]:
        taken = {str(getattr(r, unique_by, "")).lower() for r in self.value}
        return [p for p in presets if str(getattr(p, unique_by, "")).lower() not in taken]

    def remove(self, index: int) -> list[RecordT]:
        self._check_index(index)
        items = [r for i, r in enumerate(self.value) if i != index]

        if self.expanded_index == index:
            self.expanded_index = None
        elif self.expanded_index is not None and self.expanded_index > index:
            self.expanded_index -= 1

        return self._emit(items)

    def update_field(self, index: int, field_name: str, new_value: Any) -> list[RecordT]:
        """Shallow-merge ``{field_name: new_value}`` into the record at ``index``.

        ``index == len(value)`` synthesises one default record there, as long as
        the list still has room; any other missing index raises ``IndexError``.
        """
        cleaned = self.shape.clean(field_name, new_value)

        items = list(self.value)
        if index == len(items) and self.can_add:
            items.append(self.shape.new_record())
        elif not 0 <= index < len(items):
            raise IndexError(f"Record index {index} out of range for {len(items)} items")
        items[index] = replace(items[index], **{field_name: cleaned})
        return self._emit(items)

    def add_nested(self, index: int, field_name: str) -> list[RecordT]:
        nested = self._nested(index, field_name)
        return self.update_field(index, field_name, [*nested, ""])

    def update_nested(self, index: int, field_name: str, item_index: int, new_value: str) -> list[RecordT]:
        nested = self._nested(index, field_name)
        if not 0 <= item_index < len(nested):
            raise IndexError(f"{field_name}[{item_index}] out of range")
        return self.update_field(
            index,
            field_name,
            [new_value if i == item_index else item for i, item in enumerate(nested)],
        )

    def remove_nested(self, index: int, field_name: str, item_index: int) -> list[RecordT]:
        nested = self._nested(index, field_name)
        return self.update_field(
            index,
            field_name,
            [item for i, item in enumerate(nested) if i != item_index],
        )

    def toggle_expanded(self, index: int) -> None:
        self.expanded_index = None if self.expanded_index == index else index

    def receive(self, value: Sequence[RecordT]) -> None:
        """Accept a new value from the owner (a re-render with fresh props)."""
        self.value = list(value)

    # ── internals ─────────────────────────────────────────────────────

    def _nested(self, index: int, field_name: str) -> list[Any]:
        self._check_index(index)
        current = getattr(self.value[index], field_name, None)
        if current is not None and not isinstance(current, list):
            raise InvalidFieldValueError(self.shape.name, field_name, "not a list field")
        return list(current or [])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.value):
            raise IndexError(f"Record index {index} out of range for {len(self.value)} items")

    def _emit(self, items: list[RecordT]) -> list[RecordT]:
        if self.shape.normalize is not None:
            items = self.shape.normalize(items)
        if self._on_change is None:
            self.value = items
        else:
            self._on_change(items)
        return items


class StringListEditor:
    """Controlled editor for a flat list of strings (features, benefits, tags)."""

    def __init__(
        self,
        value: Sequence[str] = (),
        on_change: Callable[[list[str]], object] | None = None,
        max_items: int | None = None,
    ):
        self.value: list[str] = list(value)
        self.max_items = max_items
        self._on_change = on_change

    @property
    def can_add(self) -> bool:
        return self.max_items is None or len(self.value) < self.max_items

    def add(self, text: str = "") -> list[str]:
        if not self.can_add:
            return self.value
        return self._emit([*self.value, text])

    def update(self, index: int, text: str) -> list[str]:
        if not 0 <= index < len(self.value):
            raise IndexError(f"Item index {index} out of range for {len(self.value)} items")
        return self._emit([text if i == index else item for i, item in enumerate(self.value)])

    def remove(self, index: int) -> list[str]:
        if not 0 <= index < len(self.value):
            raise IndexError(f"Item index {index} out of range for {len(self.value)} items")
        return self._emit([item for i, item in enumerate(self.value) if i != index])

    def toggle(self, text: str) -> list[str]:
        """Add ``text`` when absent, remove it when present (tag chips)."""
        if text in self.value:
            return self._emit([item for item in self.value if item != text])
        return self._emit([*self.value, text])

    def receive(self, value: Sequence[str]) -> None:
        self.value = list(value)

    def non_blank(self) -> list[str]:
        return [item for item in self.value if item.strip()]

    def _emit(self, items: list[str]) -> list[str]:
        if self._on_change is None:
            self.value = items
        else:
            self._on_change(items)
        return items
