"""Concrete record shapes used by the admin forms."""

from dataclasses import replace
from typing import Any

from cigi_web.application.components.record_list import RecordShape
from cigi_web.domain.entities import (
    AchievementEvent,
    CommunityActivity,
    MoreAboutItem,
    ProcessStep,
    Testimonial,
)
from cigi_web.domain.exceptions import EntityNotFoundError


def _rating(value: Any) -> int:
    rating = int(value)
    if not 1 <= rating <= 5:
        raise ValueError("rating must be between 1 and 5")
    return rating


def _optional_positive_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    number = int(value)
    if number < 1:
        raise ValueError("must be a positive number")
    return number


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "on", "yes")
    return bool(value)


def _renumber(steps: list[ProcessStep]) -> list[ProcessStep]:
    return [step if step.order == i else replace(step, order=i) for i, step in enumerate(steps, start=1)]


ACHIEVEMENTS = RecordShape(
    name="achievements",
    record_type=AchievementEvent,
    max_items=3,
    blank_fields=("title",),
)

EVENTS = RecordShape(
    name="events",
    record_type=AchievementEvent,
    max_items=3,
    blank_fields=("title",),
)

TESTIMONIALS = RecordShape(
    name="testimonials",
    record_type=Testimonial,
    max_items=10,
    validators={"rating": _rating, "featured": _flag},
    blank_fields=("name", "content"),
)

ACTIVITIES = RecordShape(
    name="activities",
    record_type=CommunityActivity,
    max_items=15,
    validators={
        "max_participants": _optional_positive_int,
        "featured": _flag,
        "active": _flag,
    },
    blank_fields=("title",),
)

MORE_ABOUT = RecordShape(
    name="more_about",
    record_type=MoreAboutItem,
    max_items=6,
    blank_fields=("title", "description"),
)

PROCESS_STEPS = RecordShape(
    name="process_steps",
    record_type=ProcessStep,
    validators={"order": int},
    blank_fields=("title",),
    normalize=_renumber,
)

SHAPES: dict[str, RecordShape] = {
    shape.name: shape
    for shape in (ACHIEVEMENTS, EVENTS, TESTIMONIALS, ACTIVITIES, MORE_ABOUT, PROCESS_STEPS)
}

MORE_ABOUT_PRESETS: tuple[tuple[str, str], ...] = (
    ("Misi", "Misi dan tujuan utama komunitas"),
    ("Visi", "Visi dan cita-cita komunitas"),
    ("Nilai-Nilai", "Nilai-nilai yang dianut komunitas"),
    ("Sejarah", "Sejarah berdirinya komunitas"),
    ("Program Unggulan", "Program-program unggulan komunitas"),
    ("Target", "Target dan sasaran komunitas"),
)


def more_about_presets() -> list[MoreAboutItem]:
    """Fresh preset cards; each call yields new ids."""
    return [MoreAboutItem(title=title, description=description) for title, description in MORE_ABOUT_PRESETS]


def get_shape(name: str) -> RecordShape:
    try:
        return SHAPES[name]
    except KeyError:
        raise EntityNotFoundError("RecordShape", name) from None
