"""Transient UI notifications."""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class ToastType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    LOADING = "loading"


@dataclass(frozen=True)
class Toast:
    type: ToastType
    title: str
    message: str | None = None
    duration: int | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
