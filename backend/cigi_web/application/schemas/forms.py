"""Pydantic DTOs for form payload preview and submission."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .toast import ToastResponse


class FormPayloadRequest(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)
    record_id: int | str | None = None


class FormPayloadResponse(BaseModel):
    """The request a submit would send: verb, URL and encoded fields."""

    form: str
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
    url: str
    fields: dict[str, Any]


class FormSubmitResponse(BaseModel):
    form: str
    ok: bool
    errors: dict[str, str] = Field(default_factory=dict)
    component: str | None = None
    url: str | None = None
    toasts: list[ToastResponse] = Field(default_factory=list)


class ValueInputResponse(BaseModel):
    type: str
    widget: str
    input_type: str
    placeholder: str
    rows: int | None = None
    hint: str | None = None
    description: str
    value_required: bool
    problem: str | None = None

