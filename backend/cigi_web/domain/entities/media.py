"""Domain entity for media library assets."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePosixPath
from typing import Any

from .content import parse_timestamp


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int


@dataclass
class Media:
    """A media asset owned by the backend; ``id`` is its stable identity."""

    id: int
    original_filename: str = ""
    url: str | None = None
    thumbnail_url: str | None = None
    title: str | None = None
    alt_text: str | None = None
    description: str | None = None
    caption: str | None = None
    mime_type: str = ""
    size: int = 0
    human_size: str = ""
    tags: list[str] = field(default_factory=list)
    dimensions: Dimensions | None = None
    is_image: bool = False
    show_homepage: bool = False
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        return self.title or self.original_filename

    @property
    def extension(self) -> str:
        """Upper-cased file extension, used as a badge for non-image files."""
        return PurePosixPath(self.original_filename).suffix.lstrip(".").upper()

    @property
    def preview_url(self) -> str | None:
        return self.thumbnail_url or self.url

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Media":
        """Build from a backend media payload; missing optional keys become defaults."""
        dims = data.get("dimensions") or {}
        return cls(
            id=int(data["id"]),
            original_filename=str(data.get("original_filename") or ""),
            url=data.get("url"),
            thumbnail_url=data.get("thumbnail_url"),
            title=data.get("title"),
            alt_text=data.get("alt_text"),
            description=data.get("description"),
            caption=data.get("caption"),
            mime_type=str(data.get("mime_type") or ""),
            size=int(data.get("size") or 0),
            human_size=str(data.get("human_size") or ""),
            tags=list(data.get("tags") or []),
            dimensions=Dimensions(int(dims["width"]), int(dims["height"])) if dims.get("width") else None,
            is_image=bool(data.get("is_image", str(data.get("mime_type") or "").startswith("image/"))),
            show_homepage=bool(data.get("show_homepage", False)),
            created_at=parse_timestamp(data.get("created_at")),
        )
