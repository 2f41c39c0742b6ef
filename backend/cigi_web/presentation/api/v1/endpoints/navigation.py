"""Public header navigation endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from cigi_web.config import Settings, get_settings
from cigi_web.application.pages.public import PublicHeader
from cigi_web.application.schemas import HeaderRequest, HeaderResponse
from cigi_web.domain.exceptions import MissingRouteParameterError
from cigi_web.infrastructure.dependencies import get_route_table
from cigi_web.infrastructure.routing.route_table import YamlRouteTable

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.post("/header", response_model=HeaderResponse)
async def render_header(
    body: HeaderRequest,
    routes: YamlRouteTable = Depends(get_route_table),
    settings: Settings = Depends(get_settings),
) -> HeaderResponse:
    """Render the public header from navigation data and the current URL."""
    header = PublicHeader(
        routes,
        business_units=body.business_units,
        community_clubs=body.community_clubs,
        current_url=body.current_url,
        business_unit_limit=settings.nav_business_unit_limit,
        community_club_limit=settings.nav_community_club_limit,
    )
    header.on_scroll(body.scroll_y)
    if body.mobile_menu_open:
        header.toggle_mobile_menu()

    try:
        view = header.render()
    except MissingRouteParameterError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return HeaderResponse.model_validate(view, from_attributes=True)
