"""Data-table render endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from cigi_web.application.components.data_table import (
    ColumnDef,
    DataTable,
    RowActions,
    SortConfig,
    page_numbers,
)
from cigi_web.application.schemas import PageNumbersResponse, TableRenderRequest, TableViewResponse
from cigi_web.domain.entities import PaginationData

router = APIRouter(prefix="/tables", tags=["Tables"])


def _noop(item: object) -> None:
    return None


@router.get("/page-numbers", response_model=PageNumbersResponse)
async def get_page_numbers(
    current_page: int = Query(..., ge=1),
    last_page: int = Query(..., ge=1),
    delta: int = Query(2, ge=0),
) -> PageNumbersResponse:
    """Compact pagination strip for ``current_page`` of ``last_page``."""
    if current_page > last_page:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"current_page {current_page} is past last_page {last_page}",
        )
    return PageNumbersResponse(
        current_page=current_page,
        last_page=last_page,
        pages=page_numbers(current_page, last_page, delta),
    )


@router.post("/render", response_model=TableViewResponse)
async def render_table(request: TableRenderRequest) -> TableViewResponse:
    """Render headers, rows, empty state and pagination for a column config."""
    columns = [ColumnDef(**column.model_dump()) for column in request.columns]
    pagination = None
    if request.pagination is not None:
        pagination = PaginationData.from_mapping(request.pagination.model_dump(by_alias=True))

    actions = None
    if request.actions:
        actions = RowActions(**{name: _noop for name in request.actions})

    table = DataTable(
        columns,
        request.data,
        pagination=pagination,
        filters={"search": request.search_query} if request.search_query else None,
        empty_message=request.empty_message,
        actions=actions,
        per_page_options=request.per_page_options,
    )
    if request.sort is not None:
        table.sort_config = SortConfig(key=request.sort.key, direction=request.sort.direction)

    return TableViewResponse.model_validate(table.render(), from_attributes=True)
