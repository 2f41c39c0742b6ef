"""Toast history and flash bridging endpoints."""

from fastapi import APIRouter, Depends, status

from cigi_web.application.schemas import FlashRequest, FlashResponse, ToastResponse
from cigi_web.application.services import FlashToastBridge
from cigi_web.infrastructure.dependencies import get_flash_bridge, get_toast_host
from cigi_web.infrastructure.toast.logging_toast_host import LoggingToastHost

router = APIRouter(prefix="/toasts", tags=["Toasts"])


@router.get("", response_model=list[ToastResponse])
async def list_toasts(
    active_only: bool = False,
    host: LoggingToastHost = Depends(get_toast_host),
) -> list[ToastResponse]:
    """Recent toasts, oldest first."""
    toasts = host.active if active_only else host.history
    return [ToastResponse.model_validate(t, from_attributes=True) for t in toasts]


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_toasts(
    toast_id: str | None = None,
    host: LoggingToastHost = Depends(get_toast_host),
) -> None:
    """Dismiss one toast, or every active one when no id is given."""
    host.dismiss(toast_id)


@router.post("/flash", response_model=FlashResponse)
async def bridge_flash(
    body: FlashRequest,
    bridge: FlashToastBridge = Depends(get_flash_bridge),
    host: LoggingToastHost = Depends(get_toast_host),
) -> FlashResponse:
    """Turn the flash props of a re-rendered page into toasts."""
    ids = bridge.handle(body.props)
    by_id = {toast.id: toast for toast in host.history}
    return FlashResponse(
        toasts=[ToastResponse.model_validate(by_id[i], from_attributes=True) for i in ids if i in by_id]
    )
