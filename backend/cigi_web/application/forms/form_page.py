"""Base class for create/edit form pages bound to a backend form endpoint.

A ``FormPage`` mirrors the server-driven form helper: it owns ``data``,
receives field ``errors`` from the backend after a submit, and exposes a
``processing`` flag while a visit is in flight. Validation happens on the
backend only; the page renders whatever ``errors`` come back.

Two payload encodings exist. Wire-format forms flatten everything into
string fields (lists as JSON) and spoof PUT through ``_method`` so the
request can stay multipart. Plain forms send their values as-is and let the
navigator encode lists as repeated ``key[]`` entries.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

from cigi_web.application.components.record_list import RecordListEditor, StringListEditor
from cigi_web.application.forms.wire_format import FlatFields, WireSchema, to_wire_format
from cigi_web.application.interfaces import Navigator, RouteResolver
from cigi_web.application.services.notifier import FlashToastBridge, Notifier
from cigi_web.domain.entities import FileUpload, NavigationOptions, Page
from cigi_web.domain.exceptions import RouteNotFoundError
from cigi_web.infrastructure.logging.colored_logger import UiChannel, UiEventLogger

logger = logging.getLogger(__name__)
plog = UiEventLogger("FormPage")

_MISSING = object()

ListEditor = StringListEditor | RecordListEditor


class FormPage:
    """Inertia-style form state plus submission."""

    schema: ClassVar[WireSchema] = {}
    store_route: ClassVar[str | None] = None
    update_route: ClassVar[str | None] = None
    use_wire_format: ClassVar[bool] = False

    def __init__(
        self,
        navigator: Navigator,
        routes: RouteResolver,
        *,
        initial: Mapping[str, Any] | None = None,
        record_id: int | str | None = None,
        notifier: Notifier | None = None,
        flash: FlashToastBridge | None = None,
        options: NavigationOptions = NavigationOptions(),
    ):
        self._navigator = navigator
        self._routes = routes
        self._notifier = notifier
        self._flash = flash
        self.options = options
        self.record_id = record_id

        self.defaults: dict[str, Any] = {**self.default_data(), **dict(initial or {})}
        self.data: dict[str, Any] = dict(self.defaults)
        self.errors: dict[str, str] = {}
        self.processing = False
        self.recently_successful = False
        self._editors: dict[str, ListEditor] = {}

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {}

    @property
    def is_editing(self) -> bool:
        return self.record_id is not None

    # ── State ────────────────────────────────────────────────────────

    def set_data(self, key: str | Mapping[str, Any], value: Any = _MISSING) -> None:
        """``set_data("title", "x")`` or ``set_data({"title": "x", ...})``."""
        if value is _MISSING and not isinstance(key, Mapping):
            raise TypeError("set_data(key) needs a value")
        updates = dict(key) if isinstance(key, Mapping) else {key: value}
        for name, new_value in updates.items():
            self.data[name] = new_value
            editor = self._editors.get(name)
            if editor is not None:
                editor.receive(new_value)

    def reset(self, *fields: str) -> None:
        """Restore defaults for ``fields``, or for everything when none given."""
        names = fields or tuple(self.defaults)
        self.set_data({name: self.defaults.get(name) for name in names})

    def clear_errors(self, *fields: str) -> None:
        if not fields:
            self.errors = {}
            return
        self.errors = {k: v for k, v in self.errors.items() if k not in fields}

    def error(self, field: str) -> str | None:
        return self.errors.get(field)

    def string_list(self, field: str, max_items: int | None = None) -> StringListEditor:
        """A controlled editor for a string-list field of ``data``."""
        editor = StringListEditor(
            self.data.get(field) or [],
            on_change=lambda items: self.set_data(field, items),
            max_items=max_items,
        )
        self._editors[field] = editor
        return editor

    def record_list(self, field: str, shape) -> RecordListEditor:
        """A controlled editor for a record-list field of ``data``."""
        editor = RecordListEditor(
            shape,
            self.data.get(field) or [],
            on_change=lambda items: self.set_data(field, items),
        )
        self._editors[field] = editor
        return editor

    # ── Payload ──────────────────────────────────────────────────────

    def transform(self, data: dict[str, Any]) -> dict[str, Any]:
        """Hook to reshape ``data`` right before it is encoded."""
        return data

    def payload(self, method: str) -> FlatFields | dict[str, Any]:
        data = self.transform(dict(self.data))
        if self.use_wire_format:
            return to_wire_format(data, method, self.schema)
        return _plain_payload(data)

    # ── Submission ───────────────────────────────────────────────────

    async def submit(self) -> Page:
        """Store when creating, update when editing."""
        if self.is_editing:
            return await self.send("PUT", self.update_route, self.record_id)
        return await self.send("POST", self.store_route)

    async def send(self, method: str, route_name: str | None, *params: Any) -> Page:
        if route_name is None:
            raise RouteNotFoundError(f"{type(self).__name__}:{method.lower()}")
        url = self._routes.resolve(route_name, *params)
        verb = method.upper()

        payload = self.payload(verb)
        files = {k: v for k, v in payload.items() if isinstance(v, FileUpload)}
        fields = {k: v for k, v in payload.items() if not isinstance(v, FileUpload)}
        # Wire-format forms always travel as POST; the verb rides in _method.
        http_method = "POST" if self.use_wire_format else verb

        self.processing = True
        self.recently_successful = False
        try:
            with plog.timed_step(UiChannel.SUBMIT, f"{verb} {route_name}", fields=len(fields), files=len(files)):
                page = await self._navigator.visit(
                    http_method,
                    url,
                    fields,
                    files=files or None,
                    options=self.options,
                )
        finally:
            self.processing = False

        self.errors = page.errors
        if self._flash is not None:
            self._flash.handle(page.props)
        if self.errors:
            logger.debug("%s rejected: %s", type(self).__name__, sorted(self.errors))
            await self.on_error(page)
        else:
            self.recently_successful = True
            await self.on_success(page)
        return page

    async def on_success(self, page: Page) -> None:
        """Called after a submit the backend accepted."""

    async def on_error(self, page: Page) -> None:
        """Called after a submit that came back with field errors."""


def _plain_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for name, value in data.items():
        if value is None:
            continue
        if isinstance(value, bool):
            payload[name] = "1" if value else "0"
        elif isinstance(value, Enum):
            payload[name] = value.value
        elif isinstance(value, (list, tuple)):
            payload[name] = [item for item in value if not isinstance(item, str) or item.strip()]
        else:
            payload[name] = value
    return payload
