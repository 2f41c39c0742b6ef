"""Create/edit form for global site variables.

The value editor depends on the variable type. ``value_input`` is the single
exhaustive dispatch over ``VariableType``: a new member fails type checking
here until it gets its own branch.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Literal, assert_never
from urllib.parse import urlparse

from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import GlobalVariable, VariableCategory, VariableType

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_KEY_RE = re.compile(r"^[a-z][a-z0-9_]*$")

TEXT_MAX_LENGTH = 255

TYPE_DESCRIPTIONS: dict[VariableType, str] = {
    VariableType.TEXT: "Teks sederhana, maksimal 255 karakter",
    VariableType.TEXTAREA: "Teks panjang dengan line breaks",
    VariableType.NUMBER: "Angka (integer atau decimal)",
    VariableType.EMAIL: "Format email yang valid",
    VariableType.URL: "URL yang valid (http/https)",
    VariableType.JSON: "Data dalam format JSON",
    VariableType.BOOLEAN: "True/False (1/0)",
}


@dataclass(frozen=True)
class ValueInput:
    """How the value field renders for one variable type."""

    widget: Literal["input", "textarea", "toggle"]
    input_type: str = "text"
    placeholder: str = ""
    rows: int | None = None
    hint: str | None = None


def value_input(variable_type: VariableType) -> ValueInput:
    match variable_type:
        case VariableType.TEXT:
            return ValueInput("input", placeholder="Masukkan nilai variabel...")
        case VariableType.TEXTAREA:
            return ValueInput("textarea", placeholder="Masukkan nilai variabel...", rows=4)
        case VariableType.NUMBER:
            return ValueInput("input", input_type="number", placeholder="0")
        case VariableType.EMAIL:
            return ValueInput("input", input_type="email", placeholder="user@example.com")
        case VariableType.URL:
            return ValueInput("input", input_type="url", placeholder="https://example.com")
        case VariableType.JSON:
            return ValueInput(
                "textarea",
                placeholder='{"key": "value"}',
                rows=6,
                hint='Pastikan format JSON valid. Contoh: {"name": "value", "number": 123}',
            )
        case VariableType.BOOLEAN:
            return ValueInput("toggle", input_type="boolean")
        case _:
            assert_never(variable_type)


def value_problem(variable_type: VariableType, value: str) -> str | None:
    """Render-time check of ``value`` against its type; None when it fits.

    Purely advisory: the backend stays the authority on validation.
    """
    if variable_type is VariableType.BOOLEAN:
        return None if value in ("0", "1") else "Nilai boolean harus 1 atau 0"
    if value == "":
        return None
    match variable_type:
        case VariableType.TEXT:
            if len(value) > TEXT_MAX_LENGTH:
                return f"Maksimal {TEXT_MAX_LENGTH} karakter"
        case VariableType.NUMBER:
            try:
                float(value)
            except ValueError:
                return "Nilai harus berupa angka"
        case VariableType.EMAIL:
            if not _EMAIL_RE.match(value):
                return "Format email tidak valid"
        case VariableType.URL:
            parsed = urlparse(value)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                return "URL harus diawali http:// atau https://"
        case VariableType.JSON:
            try:
                json.loads(value)
            except json.JSONDecodeError:
                return "Format JSON tidak valid"
    return None


class GlobalVariableForm(FormPage):
    store_route = "admin.global-variables.store"
    update_route = "admin.global-variables.update"

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {
            "key": "",
            "value": "",
            "type": VariableType.TEXT,
            "category": VariableCategory.GENERAL,
            "description": "",
            "is_public": True,
        }

    @classmethod
    def for_variable(cls, variable: GlobalVariable, navigator, routes, **kwargs: Any) -> "GlobalVariableForm":
        initial = {
            "key": variable.key,
            "value": variable.value,
            "type": variable.type,
            "category": variable.category,
            "description": variable.description or "",
            "is_public": variable.is_public,
        }
        return cls(navigator, routes, initial=initial, record_id=variable.id, **kwargs)

    @property
    def variable_type(self) -> VariableType:
        return VariableType(self.data["type"])

    @property
    def value_input(self) -> ValueInput:
        return value_input(self.variable_type)

    @property
    def type_description(self) -> str:
        return TYPE_DESCRIPTIONS[self.variable_type]

    @property
    def value_required(self) -> bool:
        return self.variable_type is not VariableType.BOOLEAN

    @property
    def value_problem(self) -> str | None:
        return value_problem(self.variable_type, str(self.data.get("value") or ""))

    @property
    def key_problem(self) -> str | None:
        key = self.data.get("key") or ""
        if key and not _KEY_RE.match(key):
            return "Gunakan huruf kecil, angka, dan underscore (snake_case)"
        return None

    @property
    def boolean_label(self) -> str:
        return "True" if self.data.get("value") == "1" else "False"

    @property
    def visibility_label(self) -> str:
        return "Publik" if self.data.get("is_public") else "Privat"

    def set_type(self, variable_type: VariableType | str) -> None:
        """Switching to boolean coerces a non-boolean value to ``"0"``."""
        new_type = VariableType(variable_type)
        self.set_data("type", new_type)
        if new_type is VariableType.BOOLEAN and self.data.get("value") not in ("0", "1"):
            self.set_data("value", "0")

    def toggle_boolean(self, pressed: bool | None = None) -> str:
        if pressed is None:
            pressed = self.data.get("value") != "1"
        self.set_data("value", "1" if pressed else "0")
        return self.data["value"]

    def toggle_public(self, pressed: bool | None = None) -> bool:
        self.set_data("is_public", not self.data.get("is_public") if pressed is None else pressed)
        return self.data["is_public"]
