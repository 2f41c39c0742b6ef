from .events import ClickEvent, DownloadRequest
from .drag_reorder import DragReorderController, move_item
from .record_list import RecordListEditor, RecordShape, StringListEditor
from .record_shapes import SHAPES, get_shape, more_about_presets
from .data_table import (
    ELLIPSIS,
    CellContext,
    ColumnDef,
    DataTable,
    RowActions,
    SortConfig,
    TableView,
    page_numbers,
)
from .media_browser import MediaBrowser, MediaBrowserView
from .timer import Debouncer, IntervalTimer
from .gallery import GalleryImage, GalleryLayout, GalleryViewer, GalleryView

__all__ = [
    "ClickEvent",
    "DownloadRequest",
    "DragReorderController",
    "move_item",
    "RecordListEditor",
    "RecordShape",
    "StringListEditor",
    "SHAPES",
    "get_shape",
    "more_about_presets",
    "ELLIPSIS",
    "CellContext",
    "ColumnDef",
    "DataTable",
    "RowActions",
    "SortConfig",
    "TableView",
    "page_numbers",
    "MediaBrowser",
    "MediaBrowserView",
    "Debouncer",
    "IntervalTimer",
    "GalleryImage",
    "GalleryLayout",
    "GalleryViewer",
    "GalleryView",
]
