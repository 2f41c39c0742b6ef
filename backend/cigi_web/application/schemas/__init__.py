from .table import (
    PageNumbersResponse,
    ColumnSchema,
    PaginationSchema,
    SortSchema,
    TableRenderRequest,
    TableViewResponse,
)
from .records import RecordOperation, RecordOperationRequest, RecordListResponse
from .toast import ToastResponse, FlashRequest, FlashResponse
from .forms import FormPayloadRequest, FormPayloadResponse, FormSubmitResponse, ValueInputResponse
from .navigation import HeaderRequest, HeaderResponse, RouteResponse

__all__ = [
    "PageNumbersResponse",
    "ColumnSchema",
    "PaginationSchema",
    "SortSchema",
    "TableRenderRequest",
    "TableViewResponse",
    "RecordOperation",
    "RecordOperationRequest",
    "RecordListResponse",
    "ToastResponse",
    "FlashRequest",
    "FlashResponse",
    "FormPayloadRequest",
    "FormPayloadResponse",
    "FormSubmitResponse",
    "ValueInputResponse",
    "HeaderRequest",
    "HeaderResponse",
    "RouteResponse",
]
