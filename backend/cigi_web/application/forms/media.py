"""Edit form for media metadata (title, alt text, tags, homepage flag)."""

from collections.abc import Sequence
from typing import Any

from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import Media, Page


class MediaForm(FormPage):
    """Tags are chips toggled on and off; a saved edit returns to the library."""

    update_route = "admin.media.update"
    index_route = "admin.media.index"

    def __init__(self, navigator, routes, *, available_tags: Sequence[str] = (), **kwargs: Any):
        super().__init__(navigator, routes, **kwargs)
        self.available_tags = list(available_tags)
        self.tags = self.string_list("tags")

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {
            "title": "",
            "alt_text": "",
            "description": "",
            "tags": [],
            "show_homepage": False,
        }

    @classmethod
    def for_media(cls, media: Media, navigator, routes, **kwargs: Any) -> "MediaForm":
        initial = {
            "title": media.title or "",
            "alt_text": media.alt_text or "",
            "description": media.description or "",
            "tags": list(media.tags),
            "show_homepage": media.show_homepage,
        }
        return cls(navigator, routes, initial=initial, record_id=media.id, **kwargs)

    def toggle_tag(self, tag: str) -> list[str]:
        return self.tags.toggle(tag)

    def is_tag_selected(self, tag: str) -> bool:
        return tag in self.data["tags"]

    async def on_success(self, page: Page) -> None:
        await self._navigator.get(self._routes.resolve(self.index_route))
