"""Pydantic DTOs for toast inspection and flash bridging."""

from typing import Any

from pydantic import BaseModel, Field

from cigi_web.domain.entities import ToastType


class ToastResponse(BaseModel):
    id: str
    type: ToastType
    title: str
    message: str | None = None
    duration: int | None = None

    model_config = {"from_attributes": True}


class FlashRequest(BaseModel):
    """Props of a re-rendered page; either carries a ``flash`` object or flat keys."""

    props: dict[str, Any] = Field(default_factory=dict)


class FlashResponse(BaseModel):
    toasts: list[ToastResponse]
