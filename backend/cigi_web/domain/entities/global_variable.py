"""Domain entity for global key-value site variables."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class VariableType(str, Enum):
    """Closed set of value kinds a global variable may hold."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    JSON = "json"
    BOOLEAN = "boolean"


class VariableCategory(str, Enum):
    COMPANY = "company"
    CONTACT = "contact"
    SOCIAL = "social"
    GENERAL = "general"
    SEO = "seo"
    CONFIG = "config"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    VariableCategory.COMPANY: "Informasi Perusahaan",
    VariableCategory.CONTACT: "Informasi Kontak",
    VariableCategory.SOCIAL: "Media Sosial",
    VariableCategory.GENERAL: "Umum",
    VariableCategory.SEO: "SEO",
    VariableCategory.CONFIG: "Konfigurasi",
}


@dataclass
class GlobalVariable:
    """A site-wide setting. ``value`` is always stored as a string."""

    key: str
    value: str = ""
    type: VariableType = VariableType.TEXT
    category: VariableCategory = VariableCategory.GENERAL
    description: str | None = None
    is_public: bool = True
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def as_bool(self) -> bool:
        return self.value == "1"
