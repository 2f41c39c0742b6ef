"""Record-list items: structured entries edited inline as ordered arrays.

Every record carries a client-generated ``id`` so list keys stay stable
between renders. Records are frozen: edits produce a new record through
``dataclasses.replace`` and a new list around it.
"""

import uuid
from dataclasses import dataclass, field


def new_record_id() -> str:
    """Random short id for records not yet persisted by the backend."""
    return uuid.uuid4().hex[:9]


@dataclass(frozen=True, kw_only=True)
class Record:
    """Base class for all inline-editable records."""

    id: str = field(default_factory=new_record_id)


@dataclass(frozen=True, kw_only=True)
class AchievementEvent(Record):
    """An achievement or an event shown on a business unit / club page."""

    title: str = ""
    date: str = ""
    description: str = ""
    image: str | None = None


@dataclass(frozen=True, kw_only=True)
class Testimonial(Record):
    name: str = ""
    role: str = ""
    company: str = ""
    content: str = ""
    image: str | int | None = ""
    rating: int = 5
    featured: bool = False


@dataclass(frozen=True, kw_only=True)
class CommunityActivity(Record):
    title: str = ""
    description: str = ""
    image: str | int | None = ""
    duration: str = ""
    max_participants: int | None = None
    requirements: str = ""
    benefits: list[str] = field(default_factory=list)
    featured: bool = False
    active: bool = True


@dataclass(frozen=True, kw_only=True)
class MoreAboutItem(Record):
    """A "more about us" card (mission, vision, values...)."""

    title: str = ""
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class ProcessStep(Record):
    """One step of a business-unit service delivery process."""

    title: str = ""
    description: str = ""
    order: int = 1
