"""Media library browser with grid/list layouts and multi-select."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from cigi_web.application.components.events import ClickEvent, DownloadRequest, invoke
from cigi_web.domain.entities import Media

logger = logging.getLogger(__name__)

ViewMode = Literal["grid", "list"]
MediaAction = Literal["view", "download", "edit", "delete"]

SKELETON_COUNT = 8

MediaHandler = Callable[[Media], object]


@dataclass(frozen=True)
class Skeleton:
    """Placeholder shaped like the target layout."""

    layout: ViewMode
    parts: tuple[str, ...]


_SKELETON_PARTS: dict[ViewMode, tuple[str, ...]] = {
    "grid": ("thumbnail", "title", "meta"),
    "list": ("checkbox", "thumbnail", "title", "meta", "actions"),
}


@dataclass
class MediaItemView:
    id: int
    name: str
    preview_url: str | None
    badge: str | None
    selected: bool
    human_size: str
    created_at: str | None
    dimensions: str | None
    tags: list[str] = field(default_factory=list)


@dataclass
class MediaBrowserView:
    view_mode: ViewMode
    loading: bool
    select_all: bool
    selected_count: int
    skeletons: list[Skeleton] = field(default_factory=list)
    items: list[MediaItemView] = field(default_factory=list)


class MediaBrowser:
    """Browses media in two interchangeable layouts.

    The owner holds ``selected_items``; the browser reports changes through
    ``on_selection_change``. ``select_all`` is derived from the selection,
    never stored.
    """

    def __init__(
        self,
        media: Sequence[Media],
        *,
        selected_items: Sequence[int] = (),
        on_selection_change: Callable[[list[int]], object] | None = None,
        on_view: MediaHandler | None = None,
        on_download: MediaHandler | None = None,
        on_edit: MediaHandler | None = None,
        on_delete: MediaHandler | None = None,
        loading: bool = False,
        view_mode: ViewMode = "grid",
        on_view_mode_change: Callable[[ViewMode], object] | None = None,
        skeleton_count: int = SKELETON_COUNT,
    ):
        self.media = list(media)
        self.selected_items: list[int] = list(selected_items)
        self.loading = loading
        self.view_mode: ViewMode = view_mode
        self.skeleton_count = skeleton_count
        self._on_selection_change = on_selection_change
        self._on_view_mode_change = on_view_mode_change
        self._handlers: dict[str, MediaHandler | None] = {
            "view": on_view,
            "download": on_download,
            "edit": on_edit,
            "delete": on_delete,
        }

    # ── Selection ────────────────────────────────────────────────────

    @property
    def select_all(self) -> bool:
        ids = {item.id for item in self.media}
        return bool(ids) and ids <= set(self.selected_items)

    def is_selected(self, media_id: int) -> bool:
        return media_id in self.selected_items

    def toggle_select_all(self, checked: bool) -> list[int]:
        selection = [item.id for item in self.media] if checked else []
        return self._emit_selection(selection)

    def toggle_item(self, media_id: int, selected: bool) -> list[int]:
        """Ids outside the current page of media are ignored."""
        if selected and media_id not in {item.id for item in self.media}:
            return self.selected_items
        if selected:
            selection = self.selected_items if media_id in self.selected_items else [*self.selected_items, media_id]
        else:
            selection = [i for i in self.selected_items if i != media_id]
        return self._emit_selection(selection)

    def _emit_selection(self, selection: list[int]) -> list[int]:
        self.selected_items = list(selection)
        if self._on_selection_change is not None:
            self._on_selection_change(list(selection))
        return self.selected_items

    # ── Layout ───────────────────────────────────────────────────────

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = mode
        if self._on_view_mode_change is not None:
            self._on_view_mode_change(mode)

    # ── Item interaction ─────────────────────────────────────────────

    async def item_action(self, action: MediaAction, item: Media, event: ClickEvent | None = None) -> bool:
        """Run an inner item action; its click never reaches the container."""
        event = event or ClickEvent()
        event.stop_propagation()
        handler = self._handlers.get(action)
        if handler is None:
            return False
        await invoke(handler, item)
        await self.click_item(item, event)
        return True

    async def click_item(self, item: Media, event: ClickEvent | None = None) -> bool:
        """Container click opens the item unless an inner action stopped it."""
        if event is not None and event.propagation_stopped:
            return False
        handler = self._handlers["view"]
        if handler is None:
            return False
        await invoke(handler, item)
        return True

    @staticmethod
    def download_request(item: Media) -> DownloadRequest | None:
        if not item.url:
            return None
        return DownloadRequest(href=item.url, filename=item.original_filename or f"media-{item.id}")

    # ── View ─────────────────────────────────────────────────────────

    def render(self) -> MediaBrowserView:
        view = MediaBrowserView(
            view_mode=self.view_mode,
            loading=self.loading,
            select_all=self.select_all,
            selected_count=len(self.selected_items),
        )
        if self.loading:
            parts = _SKELETON_PARTS[self.view_mode]
            view.skeletons = [Skeleton(layout=self.view_mode, parts=parts) for _ in range(self.skeleton_count)]
            return view

        view.items = [self._item_view(item) for item in self.media]
        return view

    def _item_view(self, item: Media) -> MediaItemView:
        return MediaItemView(
            id=item.id,
            name=item.display_name,
            preview_url=item.preview_url if item.is_image else None,
            badge=None if item.is_image else item.extension,
            selected=self.is_selected(item.id),
            human_size=item.human_size,
            created_at=item.created_at.date().isoformat() if item.created_at else None,
            dimensions=f"{item.dimensions.width} × {item.dimensions.height}" if item.dimensions else None,
            tags=list(item.tags),
        )
