"""Create/edit form for news articles."""

import re
from typing import Any

from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import News

NEWS_CATEGORIES: dict[str, str] = {
    "umum": "Umum",
    "bisnis": "Bisnis",
    "komunitas": "Komunitas",
    "pengumuman": "Pengumuman",
    "acara": "Acara",
    "prestasi": "Prestasi",
}

EXCERPT_LENGTH = 150

_TAG_RE = re.compile(r"<[^>]*>")


def slugify(title: str) -> str:
    """Lowercase ASCII slug: letters, digits and single dashes.

    >>> slugify("  Hello,  World -- 2025! ")
    'hello-world-2025'
    """
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def split_tags(text: str) -> list[str]:
    return [tag.strip() for tag in text.split(",") if tag.strip()]


class NewsForm(FormPage):
    """Slug and excerpt fill themselves in until the user sets them."""

    store_route = "admin.news.store"
    update_route = "admin.news.update"

    def __init__(self, navigator, routes, **kwargs: Any):
        super().__init__(navigator, routes, **kwargs)
        self.slug_touched = bool(self.data.get("slug"))
        self.excerpt_touched = bool(self.data.get("excerpt"))

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {
            "title": "",
            "slug": "",
            "excerpt": "",
            "content": "",
            "featured_image": "",
            "category": "umum",
            "is_featured": False,
            "is_published": False,
            "published_at": "",
            "author_id": None,
            "tags": "",
        }

    @classmethod
    def for_news(cls, news: News, navigator, routes, **kwargs: Any) -> "NewsForm":
        initial = {
            "title": news.title,
            "slug": news.slug,
            "excerpt": news.excerpt or "",
            "content": news.content,
            "featured_image": news.featured_image or "",
            "category": news.category,
            "is_featured": news.is_featured,
            "is_published": news.is_published,
            "published_at": news.published_at.strftime("%Y-%m-%dT%H:%M") if news.published_at else "",
            "tags": ", ".join(news.tags),
        }
        # The update route is keyed by slug.
        return cls(navigator, routes, initial=initial, record_id=news.slug, **kwargs)

    def set_title(self, value: str) -> None:
        self.set_data("title", value)
        if not self.slug_touched:
            self.set_data("slug", slugify(value))

    def set_slug(self, value: str) -> None:
        """A hand-edited slug stops following the title; clearing it resumes."""
        self.set_data("slug", value)
        self.slug_touched = bool(value)

    def set_content(self, value: str) -> None:
        self.set_data("content", value)
        if not self.excerpt_touched:
            self.set_data("excerpt", _TAG_RE.sub("", value)[:EXCERPT_LENGTH])

    def set_excerpt(self, value: str) -> None:
        self.set_data("excerpt", value)
        self.excerpt_touched = bool(value)

    @property
    def tag_list(self) -> list[str]:
        return split_tags(self.data.get("tags") or "")
