"""Admin back-office index pages.

Each page receives the props the backend rendered it with, composes the
shared controllers (data table, media browser) and turns user intents into
visits. Destructive intents always pass through the ``Confirmer`` first; a
declined confirmation issues no request.
"""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

from cigi_web.application.components.data_table import CellContext, ColumnDef, DataTable, RowActions
from cigi_web.application.components.media_browser import MediaBrowser, MediaBrowserView, ViewMode
from cigi_web.application.components.timer import Debouncer, Sleep
from cigi_web.application.forms.news import NEWS_CATEGORIES
from cigi_web.application.interfaces import Confirmer, Navigator, RouteResolver
from cigi_web.application.services.notifier import Notifier
from cigi_web.domain.entities import (
    ContactMessage,
    Media,
    MessageStatus,
    NavigationOptions,
    Page,
    PaginationData,
    VariableCategory,
)
from cigi_web.domain.entities.content import parse_timestamp

logger = logging.getLogger(__name__)

FILTER_VISIT = NavigationOptions(preserve_state=True, preserve_scroll=True, replace=True)

_MONTHS_ID = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


def format_date(value: Any) -> str:
    """Short Indonesian date, e.g. ``5 Agu 2025``; ``-`` when missing."""
    moment = parse_timestamp(value)
    if moment is None:
        return "-"
    return f"{moment.day} {_MONTHS_ID[moment.month - 1]} {moment.year}"


def truncate(value: str | None, max_length: int = 50) -> str:
    if not value:
        return "-"
    return value if len(value) <= max_length else f"{value[:max_length]}..."


def _paginated(props: Mapping[str, Any], key: str) -> tuple[list[Any], PaginationData | None]:
    """Split a paginator prop into rows and descriptor; a bare list has no pagination."""
    payload = props.get(key)
    if isinstance(payload, Mapping):
        return list(payload.get("data") or []), PaginationData.from_mapping(payload)
    return list(payload or []), None


@dataclass
class DeleteDialog:
    """Alert-dialog state: which item is about to be deleted."""

    item: Any = None

    @property
    def is_open(self) -> bool:
        return self.item is not None

    def open(self, item: Any) -> None:
        self.item = item

    def close(self) -> None:
        self.item = None


# ── News ─────────────────────────────────────────────────────────────


class NewsIndexPage:
    route_name = "admin.news.index"

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        navigator: Navigator,
        routes: RouteResolver,
        confirmer: Confirmer,
        per_page_options: Sequence[int] = (10, 25, 50, 100),
    ):
        self._navigator = navigator
        self._routes = routes
        self._confirmer = confirmer
        self.categories: list[str] = list(props.get("categories") or [])
        rows, pagination = _paginated(props, "news")
        self.table: DataTable[Mapping[str, Any]] = DataTable(
            self.columns(),
            rows,
            navigator=navigator,
            routes=routes,
            pagination=pagination,
            route_name=self.route_name,
            filters=props.get("filters") or {},
            empty_message="Belum ada berita",
            actions=RowActions(view=self.view, edit=self.edit, delete=self.delete),
            per_page_options=per_page_options,
            search_placeholder="Cari berita...",
        )

    @staticmethod
    def columns() -> list[ColumnDef[Mapping[str, Any]]]:
        return [
            ColumnDef(header="Artikel", key="title", sortable=True, render=lambda n: n.get("title", "")),
            ColumnDef(header="Kategori", key="category", sortable=True, render=lambda n: category_label(n.get("category"))),
            ColumnDef(header="Penulis", accessor_key="author", cell=_author_name),
            ColumnDef(
                header="Status",
                key="is_published",
                sortable=True,
                render=lambda n: "Dipublikasi" if n.get("is_published") else "Draft",
            ),
            ColumnDef(
                header="Tanggal",
                key="published_at",
                sortable=True,
                render=lambda n: format_date(n.get("published_at") or n.get("created_at")),
            ),
            ColumnDef(header="Views", key="views_count", render=lambda n: n.get("views_count") or 0),
        ]

    @property
    def filter_options(self) -> dict[str, list[tuple[str, str]]]:
        return {
            "category": [(c, c[:1].upper() + c[1:]) for c in self.categories],
            "status": [("published", "Dipublikasi"), ("draft", "Draft"), ("featured", "Unggulan")],
        }

    async def view(self, news: Mapping[str, Any]) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.news.show", news["slug"]))

    async def edit(self, news: Mapping[str, Any]) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.news.edit", news["slug"]))

    async def delete(self, news: Mapping[str, Any]) -> Page | None:
        message = f'Apakah Anda yakin ingin menghapus artikel "{news.get("title", "")}"?'
        if not await self._confirmer.confirm(message):
            return None
        return await self._navigator.delete(self._routes.resolve("admin.news.destroy", news["slug"]))


def category_label(category: str | None) -> str:
    if not category:
        return NEWS_CATEGORIES["umum"]
    return NEWS_CATEGORIES.get(category, category[:1].upper() + category[1:])


def _author_name(ctx: CellContext[Mapping[str, Any]]) -> str:
    author = ctx.get_value()
    if isinstance(author, Mapping):
        return str(author.get("name") or "-")
    return str(author or "-")


# ── Global variables ─────────────────────────────────────────────────


class GlobalVariablesIndexPage:
    route_name = "admin.global-variables.index"

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        navigator: Navigator,
        routes: RouteResolver,
    ):
        self._navigator = navigator
        self._routes = routes
        self.dialog = DeleteDialog()
        rows, pagination = _paginated(props, "variables")
        self.table: DataTable[Mapping[str, Any]] = DataTable(
            self.columns(),
            rows,
            navigator=navigator,
            routes=routes,
            pagination=pagination,
            route_name=self.route_name,
            filters=props.get("filters") or {},
            empty_message="Belum ada variabel global",
            actions=RowActions(view=self.view, edit=self.edit, delete=self.request_delete),
            search_placeholder="Cari variabel...",
        )

    @staticmethod
    def columns() -> list[ColumnDef[Mapping[str, Any]]]:
        return [
            ColumnDef(header="Kunci", accessor_key="key", sortable=True),
            ColumnDef(header="Nilai", accessor_key="value", render=lambda v: truncate(v.get("value"))),
            ColumnDef(header="Tipe", accessor_key="type", sortable=True),
            ColumnDef(header="Kategori", accessor_key="category", sortable=True, render=_category_label),
            ColumnDef(
                header="Akses",
                accessor_key="is_public",
                render=lambda v: "Publik" if v.get("is_public") else "Privat",
            ),
        ]

    async def view(self, variable: Mapping[str, Any]) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.global-variables.show", variable["id"]))

    async def edit(self, variable: Mapping[str, Any]) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.global-variables.edit", variable["id"]))

    def request_delete(self, variable: Mapping[str, Any]) -> None:
        self.dialog.open(variable)

    def cancel_delete(self) -> None:
        self.dialog.close()

    async def confirm_delete(self) -> Page | None:
        """The dialog's confirm button; closes the dialog once the backend agrees."""
        if not self.dialog.is_open:
            return None
        url = self._routes.resolve("admin.global-variables.destroy", self.dialog.item["id"])
        page = await self._navigator.delete(url)
        if not page.errors:
            self.dialog.close()
        return page


def _category_label(variable: Mapping[str, Any]) -> str:
    raw = variable.get("category") or ""
    try:
        return VariableCategory(raw).label
    except ValueError:
        return str(raw)


# ── Media library ────────────────────────────────────────────────────


@dataclass
class MediaIndexView:
    browser: MediaBrowserView
    search_query: str
    selected_tags: list[str]
    homepage_filter: str
    all_tags: list[str]
    has_active_filters: bool
    processing: bool
    pagination: PaginationData | None = None
    delete_dialog_open: bool = False
    bulk_actions: list[str] = field(default_factory=list)


SEARCH_FAILED_MESSAGE = "Gagal memuat hasil pencarian media."


class MediaIndexPage:
    """Media manager: filters, grid/list browser, single and bulk delete.

    Typing in the search box is debounced; tag and homepage filters visit
    immediately. A filter only triggers a visit when it differs from what the
    backend last rendered.
    """

    route_name = "admin.media.index"

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        navigator: Navigator,
        routes: RouteResolver,
        confirmer: Confirmer,
        notifier: Notifier | None = None,
        search_debounce: float = 0.5,
        sleep: Sleep = asyncio.sleep,
        view_mode: ViewMode = "grid",
        skeleton_count: int = 8,
    ):
        self._navigator = navigator
        self._routes = routes
        self._confirmer = confirmer
        self._notifier = notifier

        rows, self.pagination = _paginated(props, "media")
        self.media = [Media.from_mapping(row) for row in rows]
        self.all_tags: list[str] = list(props.get("allTags") or [])
        self.filters: dict[str, Any] = dict(props.get("filters") or {})

        self.search_query: str = self.filters.get("search") or ""
        self.selected_tags: list[str] = list(self.filters.get("tags") or [])
        self.homepage_filter: str = self.filters.get("show_homepage") or "all"
        self.selected_items: list[int] = []
        self.processing = False
        self.dialog = DeleteDialog()

        self._debouncer = Debouncer(search_debounce, self._search_if_changed, sleep, on_error=self._search_failed)
        self.browser = MediaBrowser(
            self.media,
            selected_items=self.selected_items,
            on_selection_change=self._set_selection,
            on_view=self.view,
            on_download=self.download,
            on_edit=self.edit,
            on_delete=self.request_delete,
            view_mode=view_mode,
            skeleton_count=skeleton_count,
        )

    # ── Filters ──────────────────────────────────────────────────────

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.filters.get("search")
            or self.filters.get("tags")
            or (self.filters.get("show_homepage") or "all") != "all"
        )

    def _query(self) -> dict[str, Any]:
        return {
            "search": self.search_query,
            "tags": list(self.selected_tags),
            "show_homepage": self.homepage_filter,
        }

    async def _visit_index(self, params: Mapping[str, Any]) -> Page:
        return await self._navigator.get(self._routes.resolve(self.route_name), params, FILTER_VISIT)

    def set_search(self, query: str) -> None:
        """Update the search box; the visit happens once typing settles."""
        self.search_query = query
        self._debouncer.trigger()

    async def flush_search(self) -> None:
        await self._debouncer.wait()

    async def _search_if_changed(self) -> Page | None:
        if self.search_query == (self.filters.get("search") or ""):
            return None
        return await self._visit_index(self._query())

    def _search_failed(self, error: Exception) -> None:
        if self._notifier is not None:
            self._notifier.error(SEARCH_FAILED_MESSAGE, str(error) or None)

    async def toggle_tag(self, tag: str) -> Page | None:
        if tag in self.selected_tags:
            self.selected_tags = [t for t in self.selected_tags if t != tag]
        else:
            self.selected_tags = [*self.selected_tags, tag]
        if self.selected_tags == list(self.filters.get("tags") or []):
            return None
        return await self._visit_index(self._query())

    async def set_homepage_filter(self, value: str) -> Page | None:
        self.homepage_filter = value
        if value == (self.filters.get("show_homepage") or "all"):
            return None
        return await self._visit_index(self._query())

    async def apply_filters(self) -> Page:
        self._debouncer.cancel()
        self.processing = True
        try:
            return await self._visit_index(self._query())
        finally:
            self.processing = False

    async def clear_filters(self) -> Page:
        self._debouncer.cancel()
        self.search_query = ""
        self.selected_tags = []
        self.homepage_filter = "all"
        return await self._visit_index({"search": "", "tags": [], "show_homepage": "all"})

    # ── Items ────────────────────────────────────────────────────────

    def _set_selection(self, ids: list[int]) -> None:
        self.selected_items = list(ids)

    async def view(self, media: Media) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.media.show", media.id))

    def download(self, media: Media):
        return self.browser.download_request(media)

    async def edit(self, media: Media) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.media.edit", media.id))

    def request_delete(self, media: Media) -> None:
        self.dialog.open(media)

    def cancel_delete(self) -> None:
        self.dialog.close()

    async def confirm_delete(self) -> Page | None:
        if not self.dialog.is_open:
            return None
        page = await self._navigator.delete(self._routes.resolve("admin.media.destroy", self.dialog.item.id))
        if not page.errors:
            self.dialog.close()
        return page

    async def bulk_delete(self) -> Page | None:
        if not self.selected_items:
            return None
        count = len(self.selected_items)
        if not await self._confirmer.confirm(f"Hapus {count} media yang dipilih? Tindakan ini tidak dapat dibatalkan."):
            return None
        page = await self._navigator.post(
            self._routes.resolve("admin.media.bulk-delete"),
            {"ids": list(self.selected_items)},
        )
        if not page.errors:
            self.browser.toggle_select_all(False)
        return page

    def render(self) -> MediaIndexView:
        return MediaIndexView(
            browser=self.browser.render(),
            search_query=self.search_query,
            selected_tags=list(self.selected_tags),
            homepage_filter=self.homepage_filter,
            all_tags=list(self.all_tags),
            has_active_filters=self.has_active_filters,
            processing=self.processing,
            pagination=self.pagination,
            delete_dialog_open=self.dialog.is_open,
            bulk_actions=["bulk-delete"] if self.selected_items else [],
        )


# ── Contact messages ─────────────────────────────────────────────────


class BulkAction(str, Enum):
    MARK_AS_READ = "mark-as-read"
    MARK_AS_ARCHIVED = "mark-as-archived"
    BULK_DELETE = "bulk-delete"

    @property
    def route_name(self) -> str:
        return f"admin.contact-messages.{self.value}"

    @property
    def confirm_message(self) -> str:
        return _BULK_CONFIRM[self]


_BULK_CONFIRM = {
    BulkAction.MARK_AS_READ: "Tandai sebagai sudah dibaca?",
    BulkAction.MARK_AS_ARCHIVED: "Arsipkan pesan yang dipilih?",
    BulkAction.BULK_DELETE: "Hapus pesan yang dipilih? Tindakan ini tidak dapat dibatalkan.",
}


@dataclass(frozen=True)
class StatusBadge:
    label: str
    variant: str


STATUS_BADGES: dict[MessageStatus, StatusBadge] = {
    MessageStatus.UNREAD: StatusBadge("Belum Dibaca", "blue"),
    MessageStatus.READ: StatusBadge("Sudah Dibaca", "green"),
    MessageStatus.ARCHIVED: StatusBadge("Diarsipkan", "zinc"),
}

NOTHING_SELECTED_MESSAGE = "Silakan pilih pesan terlebih dahulu."
DELETE_MESSAGE_CONFIRM = "Apakah Anda yakin ingin menghapus pesan ini?"


class ContactMessagesIndexPage:
    route_name = "admin.contact-messages.index"

    def __init__(
        self,
        props: Mapping[str, Any],
        *,
        navigator: Navigator,
        routes: RouteResolver,
        confirmer: Confirmer,
        notifier: Notifier | None = None,
    ):
        self._navigator = navigator
        self._routes = routes
        self._confirmer = confirmer
        self._notifier = notifier

        rows, self.pagination = _paginated(props, "contactMessages")
        self.messages = [ContactMessage.from_mapping(row) for row in rows]
        self.stats: dict[str, int] = dict(props.get("stats") or {})
        filters = props.get("filters") or {}
        self.search_term: str = filters.get("search") or ""
        self.status_filter: str = filters.get("status") or "all"
        self.selected_ids: list[int] = []

    # ── Selection ────────────────────────────────────────────────────

    @property
    def all_selected(self) -> bool:
        return bool(self.messages) and len(self.selected_ids) == len(self.messages)

    def select_all(self, checked: bool) -> None:
        self.selected_ids = [m.id for m in self.messages] if checked else []

    def select_message(self, message_id: int, checked: bool) -> None:
        if checked:
            if message_id not in self.selected_ids:
                self.selected_ids = [*self.selected_ids, message_id]
        else:
            self.selected_ids = [i for i in self.selected_ids if i != message_id]

    # ── Actions ──────────────────────────────────────────────────────

    async def search(self) -> Page:
        params: dict[str, Any] = {"search": self.search_term}
        if self.status_filter != "all":
            params["status"] = self.status_filter
        return await self._navigator.get(
            self._routes.resolve(self.route_name),
            params,
            NavigationOptions(preserve_state=True, replace=True),
        )

    async def bulk_action(self, action: BulkAction | str) -> Page | None:
        action = BulkAction(action)
        if not self.selected_ids:
            if self._notifier is not None:
                self._notifier.warning(NOTHING_SELECTED_MESSAGE)
            return None
        if not await self._confirmer.confirm(action.confirm_message):
            return None
        page = await self._navigator.post(
            self._routes.resolve(action.route_name),
            {"ids": list(self.selected_ids)},
        )
        if not page.errors:
            self.selected_ids = []
        return page

    async def delete(self, message: ContactMessage) -> Page | None:
        if not await self._confirmer.confirm(DELETE_MESSAGE_CONFIRM):
            return None
        return await self._navigator.delete(self._routes.resolve("admin.contact-messages.destroy", message.id))

    async def view(self, message: ContactMessage) -> Page:
        return await self._navigator.get(self._routes.resolve("admin.contact-messages.show", message.id))

    @staticmethod
    def reply_link(message: ContactMessage) -> str:
        return f"mailto:{message.email}?subject={quote('Re: ' + message.subject)}"

    @staticmethod
    def status_badge(message: ContactMessage) -> StatusBadge:
        return STATUS_BADGES[message.status]
