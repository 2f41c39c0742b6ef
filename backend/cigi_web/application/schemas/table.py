"""Pydantic DTOs for the data-table render endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class PageNumbersResponse(BaseModel):
    current_page: int
    last_page: int
    pages: list[int | str]


class ColumnSchema(BaseModel):
    header: str
    accessor_key: str | None = None
    key: str | None = None
    sortable: bool = False
    class_name: str = ""


class PaginationSchema(BaseModel):
    current_page: int = Field(1, ge=1)
    last_page: int = Field(1, ge=1)
    per_page: int = Field(10, ge=1)
    total: int = Field(0, ge=0)
    from_: int | None = Field(None, alias="from")
    to: int | None = None

    model_config = {"populate_by_name": True}


class SortSchema(BaseModel):
    key: str
    direction: Literal["asc", "desc"] = "asc"


class TableRenderRequest(BaseModel):
    """A column configuration plus the rows and descriptor the backend rendered."""

    columns: list[ColumnSchema]
    data: list[dict[str, Any]] = Field(default_factory=list)
    pagination: PaginationSchema | None = None
    sort: SortSchema | None = None
    search_query: str = ""
    empty_message: str = "No data available"
    actions: list[Literal["view", "edit", "delete"]] = Field(default_factory=list)
    per_page_options: list[int] = Field(default_factory=lambda: [10, 25, 50, 100])


class HeaderCellResponse(BaseModel):
    label: str
    sort_key: str | None = None
    sort_indicator: str | None = None
    class_name: str = ""

    model_config = {"from_attributes": True}


class RowResponse(BaseModel):
    cells: list[Any]
    actions: list[str]
    clickable: bool

    model_config = {"from_attributes": True}


class EmptyRowResponse(BaseModel):
    colspan: int
    content: Any

    model_config = {"from_attributes": True}


class PaginationViewResponse(BaseModel):
    summary: str
    current_page: int
    per_page: int
    per_page_options: list[int]
    pages: list[int | str]
    previous_disabled: bool
    next_disabled: bool

    model_config = {"from_attributes": True}


class TableViewResponse(BaseModel):
    headers: list[HeaderCellResponse]
    rows: list[RowResponse] = Field(default_factory=list)
    empty: EmptyRowResponse | None = None
    pagination: PaginationViewResponse | None = None
    search_query: str | None = None
    search_placeholder: str = "Search..."
    has_actions: bool = False

    model_config = {"from_attributes": True}
