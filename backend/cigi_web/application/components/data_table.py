"""Generic remote-backed data table.

The table never fetches rows itself. Search, sort, pagination and page-size
changes become visits to a named backend route carrying the current filters;
the backend answers with a re-rendered page holding the new rows and the new
pagination descriptor.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from cigi_web.application.components.events import ClickEvent, invoke
from cigi_web.application.interfaces import Navigator, RouteResolver
from cigi_web.domain.entities import PRESERVE, Page, PaginationData

logger = logging.getLogger(__name__)

T = TypeVar("T")

ELLIPSIS = "..."
PageItem = int | str
SortDirection = Literal["asc", "desc"]
ActionName = Literal["view", "edit", "delete"]


def page_numbers(current_page: int, last_page: int, delta: int = 2) -> list[PageItem]:
    """Compact pagination strip.

    Always starts with page 1 and ends with ``last_page`` (when > 1), keeps
    the window ``current_page ± delta`` contiguous, and puts ``"..."`` where
    the window does not touch the anchored first/last page.

    >>> page_numbers(5, 10)
    [1, '...', 3, 4, 5, 6, 7, '...', 10]
    """
    window = range(max(2, current_page - delta), min(last_page - 1, current_page + delta) + 1)

    strip: list[PageItem] = [1]
    if current_page - delta > 2:
        strip.append(ELLIPSIS)
    strip.extend(window)

    if current_page + delta < last_page - 1:
        strip.extend([ELLIPSIS, last_page])
    elif last_page > 1:
        strip.append(last_page)
    return strip


def extract(item: Any, key: str | None) -> Any:
    """Read ``key`` from a mapping row or an attribute row."""
    if not key:
        return None
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


@dataclass
class CellContext(Generic[T]):
    """Argument of a column's ``cell`` callback."""

    row: T
    accessor_key: str | None = None

    def get_value(self) -> Any:
        return extract(self.row, self.accessor_key) if self.accessor_key else ""


@dataclass
class ColumnDef(Generic[T]):
    header: str
    accessor_key: str | None = None
    key: str | None = None
    cell: Callable[[CellContext[T]], Any] | None = None
    render: Callable[[T], Any] | None = None
    sortable: bool = False
    searchable: bool = False
    class_name: str = ""


@dataclass
class RowActions(Generic[T]):
    view: Callable[[T], Any] | None = None
    edit: Callable[[T], Any] | None = None
    delete: Callable[[T], Any] | None = None

    @property
    def available(self) -> list[str]:
        return [name for name in ("view", "edit", "delete") if getattr(self, name) is not None]


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: SortDirection = "asc"


# ── View model ───────────────────────────────────────────────────────


@dataclass
class HeaderCell:
    label: str
    sort_key: str | None = None
    sort_indicator: str | None = None
    class_name: str = ""


@dataclass
class RowView:
    cells: list[Any]
    actions: list[str]
    clickable: bool
    item: Any = None


@dataclass
class EmptyRow:
    colspan: int
    content: Any


@dataclass
class PaginationView:
    summary: str
    current_page: int
    per_page: int
    per_page_options: list[int]
    pages: list[PageItem]
    previous_disabled: bool
    next_disabled: bool


@dataclass
class TableView:
    headers: list[HeaderCell]
    rows: list[RowView] = field(default_factory=list)
    empty: EmptyRow | None = None
    pagination: PaginationView | None = None
    search_query: str | None = None
    search_placeholder: str = "Search..."
    has_actions: bool = False


class DataTable(Generic[T]):
    """Column-configurable, remote-paginated, sortable, searchable table."""

    def __init__(
        self,
        columns: Sequence[ColumnDef[T]],
        data: Sequence[T] = (),
        *,
        navigator: Navigator | None = None,
        routes: RouteResolver | None = None,
        pagination: PaginationData | None = None,
        route_name: str | None = None,
        filters: Mapping[str, Any] | None = None,
        empty_message: str = "No data available",
        empty_state: Any = None,
        on_row_click: Callable[[T], Any] | None = None,
        actions: RowActions[T] | None = None,
        show_search: bool = True,
        show_pagination: bool = True,
        per_page_options: Sequence[int] = (10, 25, 50, 100),
        search_placeholder: str = "Search...",
    ):
        self.columns = list(columns)
        self.data = list(data)
        self.pagination = pagination
        self.route_name = route_name
        self.filters: dict[str, Any] = dict(filters or {})
        self.empty_message = empty_message
        self.empty_state = empty_state
        self.on_row_click = on_row_click
        self.actions = actions
        self.show_search = show_search
        self.show_pagination = show_pagination
        self.per_page_options = list(per_page_options)
        self.search_placeholder = search_placeholder
        self._navigator = navigator
        self._routes = routes

        self.search_query: str = str(self.filters.get("search") or "")
        self.sort_config: SortConfig | None = None

    # ── Cells ────────────────────────────────────────────────────────

    def cell_value(self, item: T, column: ColumnDef[T]) -> Any:
        """Resolve a cell: ``render`` → ``cell`` → ``accessor_key`` → ``""``."""
        if column.render is not None:
            return column.render(item)
        if column.cell is not None:
            return column.cell(CellContext(row=item, accessor_key=column.accessor_key))
        value = extract(item, column.accessor_key)
        return "" if value is None else value

    # ── Remote state changes ─────────────────────────────────────────

    async def search(self, query: str | None = None) -> Page | None:
        """Search with the current (or given) query; an empty query drops the filter."""
        if query is not None:
            self.search_query = query
        params = {**self.filters, "page": 1}
        term = self.search_query.strip()
        if term:
            params["search"] = term
        else:
            params.pop("search", None)
        return await self._navigate(params)

    async def sort(self, column_key: str) -> Page | None:
        """Sort by ``column_key``; a second click on the same column flips to desc."""
        same_ascending = (
            self.sort_config is not None
            and self.sort_config.key == column_key
            and self.sort_config.direction == "asc"
        )
        direction: SortDirection = "desc" if same_ascending else "asc"
        self.sort_config = SortConfig(key=column_key, direction=direction)
        return await self._navigate({**self.filters, "sort": column_key, "direction": direction, "page": 1})

    async def change_page(self, page: int) -> Page | None:
        """Go to ``page``; ignored outside ``1..last_page``."""
        if self.pagination is None or not 1 <= page <= self.pagination.last_page:
            logger.debug("Ignoring page change to %s", page)
            return None
        return await self._navigate({**self.filters, "page": page})

    async def change_per_page(self, per_page: int) -> Page | None:
        """Change page size; always restarts at page 1."""
        return await self._navigate({**self.filters, "per_page": per_page, "page": 1})

    async def _navigate(self, params: dict[str, Any]) -> Page | None:
        if not self.route_name or self._navigator is None or self._routes is None:
            return None
        url = self._routes.resolve(self.route_name)
        logger.debug("DataTable visit %s %s", self.route_name, params)
        return await self._navigator.get(url, params, PRESERVE)

    # ── Clicks ───────────────────────────────────────────────────────

    async def click_row(self, item: T, event: ClickEvent | None = None) -> bool:
        """Container-level row click; skipped when an inner control stopped it."""
        if self.on_row_click is None or (event is not None and event.propagation_stopped):
            return False
        await invoke(self.on_row_click, item)
        return True

    async def click_action(self, action: ActionName, item: T, event: ClickEvent | None = None) -> bool:
        """Run a row action. The click stops propagating before the callback runs."""
        handler = getattr(self.actions, action, None) if self.actions else None
        if handler is None:
            return False
        event = event or ClickEvent()
        event.stop_propagation()
        await invoke(handler, item)
        await self.click_row(item, event)
        return True

    # ── View ─────────────────────────────────────────────────────────

    def render(self) -> TableView:
        has_actions = self.actions is not None
        view = TableView(
            headers=[self._header(column) for column in self.columns],
            search_query=self.search_query if self.show_search else None,
            search_placeholder=self.search_placeholder,
            has_actions=has_actions,
        )
        if has_actions:
            view.headers.append(HeaderCell(label="Actions"))

        if not self.data:
            view.empty = EmptyRow(
                colspan=len(self.columns) + (1 if has_actions else 0),
                content=self.empty_state if self.empty_state is not None else self.empty_message,
            )
        else:
            action_names = self.actions.available if self.actions else []
            view.rows = [
                RowView(
                    cells=[self.cell_value(item, column) for column in self.columns],
                    actions=action_names,
                    clickable=self.on_row_click is not None,
                    item=item,
                )
                for item in self.data
            ]

        p = self.pagination
        if self.show_pagination and p is not None and p.last_page > 1:
            view.pagination = PaginationView(
                summary=p.summary,
                current_page=p.current_page,
                per_page=p.per_page,
                per_page_options=self.per_page_options,
                pages=page_numbers(p.current_page, p.last_page),
                previous_disabled=not p.has_previous,
                next_disabled=not p.has_next,
            )
        return view

    def _header(self, column: ColumnDef[T]) -> HeaderCell:
        sort_key = (column.accessor_key or column.key) if column.sortable else None
        indicator = None
        if sort_key and self.sort_config and self.sort_config.key == sort_key:
            indicator = "↑" if self.sort_config.direction == "asc" else "↓"
        return HeaderCell(
            label=column.header,
            sort_key=sort_key,
            sort_indicator=indicator,
            class_name=column.class_name,
        )
