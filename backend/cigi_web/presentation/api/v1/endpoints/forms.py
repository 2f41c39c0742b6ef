"""Form endpoints: preview the encoded request, or submit it to the backend."""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from cigi_web.config import Settings, get_settings
from cigi_web.application.forms import ContactForm, FormPage, get_form
from cigi_web.application.forms.wire_format import FieldKind
from cigi_web.application.schemas import FormPayloadRequest, FormPayloadResponse, FormSubmitResponse, ToastResponse
from cigi_web.application.services import FlashToastBridge, Notifier
from cigi_web.domain.entities import FileUpload
from cigi_web.domain.exceptions import (
    EntityNotFoundError,
    MissingRouteParameterError,
    NavigationError,
    RouteNotFoundError,
)
from cigi_web.infrastructure.dependencies import (
    get_flash_bridge,
    get_navigator,
    get_notifier,
    get_route_table,
    get_toast_host,
)
from cigi_web.infrastructure.http.inertia_navigator import InertiaHttpNavigator
from cigi_web.infrastructure.routing.route_table import YamlRouteTable
from cigi_web.infrastructure.toast.logging_toast_host import LoggingToastHost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/forms", tags=["Forms"])


def _form_class(name: str) -> type[FormPage]:
    try:
        return get_form(name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _initial(form_cls: type[FormPage], data: Mapping[str, Any]) -> dict[str, Any]:
    """Lift JSON record lists into records of the field's shape."""
    initial = dict(data)
    for name, field in form_cls.schema.items():
        if field.kind is FieldKind.RECORD_LIST and field.shape is not None and isinstance(initial.get(name), list):
            initial[name] = [field.shape.from_dict(item) for item in initial[name]]
    return initial


def _build(form_cls: type[FormPage], body: FormPayloadRequest, navigator, routes, **kwargs: Any) -> FormPage:
    try:
        return form_cls(navigator, routes, initial=_initial(form_cls, body.data), record_id=body.record_id, **kwargs)
    except TypeError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.post("/{form_name}/wire", response_model=FormPayloadResponse)
async def preview_payload(
    form_name: str,
    body: FormPayloadRequest,
    navigator: InertiaHttpNavigator = Depends(get_navigator),
    routes: YamlRouteTable = Depends(get_route_table),
) -> FormPayloadResponse:
    """The verb, URL and fields a submit of ``data`` would send."""
    form_cls = _form_class(form_name)
    form = _build(form_cls, body, navigator, routes)

    verb = "PUT" if form.is_editing else "POST"
    route_name = form.update_route if form.is_editing else form.store_route
    if route_name is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Form '{form_name}' cannot {'update' if form.is_editing else 'create'} records",
        )
    try:
        url = routes.resolve(route_name, *([form.record_id] if form.is_editing else []))
    except MissingRouteParameterError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    payload = form.payload(verb)
    fields = {
        k: (f"<file {v.filename}>" if isinstance(v, FileUpload) else v)
        for k, v in payload.items()
    }
    return FormPayloadResponse(
        form=form_name,
        method="POST" if form.use_wire_format else verb,
        url=url,
        fields=fields,
    )


@router.post("/{form_name}/submit", response_model=FormSubmitResponse)
async def submit_form(
    form_name: str,
    body: FormPayloadRequest,
    navigator: InertiaHttpNavigator = Depends(get_navigator),
    routes: YamlRouteTable = Depends(get_route_table),
    notifier: Notifier = Depends(get_notifier),
    flash: FlashToastBridge = Depends(get_flash_bridge),
    host: LoggingToastHost = Depends(get_toast_host),
    settings: Settings = Depends(get_settings),
) -> FormSubmitResponse:
    """Submit ``data`` through the form and report errors plus any toasts raised."""
    form_cls = _form_class(form_name)
    kwargs: dict[str, Any] = {}
    if issubclass(form_cls, ContactForm):
        kwargs["submit_delay"] = settings.contact_submit_delay_ms / 1000
    form = _build(form_cls, body, navigator, routes, notifier=notifier, flash=flash, **kwargs)

    seen = {toast.id for toast in host.history}
    try:
        page = await form.submit()
    except RouteNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MissingRouteParameterError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except NavigationError as e:
        logger.warning("Form %s submit failed: %s", form_name, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    toasts = [ToastResponse.model_validate(t, from_attributes=True) for t in host.history if t.id not in seen]
    return FormSubmitResponse(
        form=form_name,
        ok=page is not None and not form.errors,
        errors=form.errors,
        component=page.component if page is not None else None,
        url=page.url if page is not None else None,
        toasts=toasts,
    )
