"""Content entities received as page props: news, business units, clubs, messages."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .records import ProcessStep


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp from a page prop; None when absent or malformed."""
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


@dataclass
class News:
    title: str
    slug: str
    content: str = ""
    excerpt: str | None = None
    featured_image: str | None = None
    category: str = "umum"
    is_featured: bool = False
    is_published: bool = False
    published_at: datetime | None = None
    views_count: int = 0
    tags: list[str] = field(default_factory=list)
    id: int | None = None


@dataclass
class BusinessUnit:
    """Business unit as exposed to the navigation dropdown."""

    name: str
    slug: str
    description: str = ""
    image: str | None = None
    services_count: int = 0
    id: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BusinessUnit":
        return cls(
            name=str(data.get("name") or ""),
            slug=str(data.get("slug") or ""),
            description=str(data.get("description") or ""),
            image=data.get("image"),
            services_count=int(data.get("services_count") or 0),
            id=data.get("id"),
        )


@dataclass
class BusinessUnitService:
    business_unit_id: int
    title: str
    description: str = ""
    short_description: str | None = None
    image: str | None = None
    price: str | None = None
    duration: str = ""
    status: str = "active"
    featured: bool = False
    features: list[str] = field(default_factory=list)
    technologies: list[str] = field(default_factory=list)
    process_steps: list[ProcessStep] = field(default_factory=list)
    id: int | None = None


@dataclass
class CommunityClub:
    """Community club as exposed to the navigation dropdown."""

    name: str
    slug: str
    type: str
    description: str = ""
    image: str | None = None
    activities_count: int = 0
    id: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CommunityClub":
        return cls(
            name=str(data.get("name") or ""),
            slug=str(data.get("slug") or ""),
            type=str(data.get("type") or ""),
            description=str(data.get("description") or ""),
            image=data.get("image"),
            activities_count=int(data.get("activities_count") or 0),
            id=data.get("id"),
        )


@dataclass
class CommunityClubActivity:
    community_club_id: int
    title: str
    description: str = ""
    short_description: str | None = None
    image: str | None = None
    duration: str = ""
    max_participants: int | None = None
    requirements: str | None = None
    benefits: list[str] = field(default_factory=list)
    status: str = "active"
    schedule: str | None = None
    location: str | None = None
    contact_info: str | None = None
    featured: bool = False
    active: bool = True
    id: int | None = None


class MessageStatus(str, Enum):
    UNREAD = "unread"
    READ = "read"
    ARCHIVED = "archived"


@dataclass
class ContactMessage:
    id: int
    name: str
    email: str
    subject: str
    message: str
    phone: str | None = None
    status: MessageStatus = MessageStatus.UNREAD
    created_at: datetime | None = None

    @property
    def excerpt(self) -> str:
        return self.message if len(self.message) <= 150 else self.message[:150] + "..."

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ContactMessage":
        status = data.get("status") or MessageStatus.UNREAD.value
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            subject=str(data.get("subject") or ""),
            message=str(data.get("message") or ""),
            phone=data.get("phone") or None,
            status=MessageStatus(status),
            created_at=parse_timestamp(data.get("created_at")),
        )
