"""Named-route resolution endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cigi_web.application.schemas import RouteResponse
from cigi_web.domain.exceptions import MissingRouteParameterError, RouteNotFoundError
from cigi_web.infrastructure.dependencies import get_route_table
from cigi_web.infrastructure.routing.route_table import YamlRouteTable

router = APIRouter(prefix="/routes", tags=["Routes"])


@router.get("", response_model=list[str])
async def list_routes(routes: YamlRouteTable = Depends(get_route_table)) -> list[str]:
    """All known route names, sorted."""
    return routes.names


@router.get("/{name}", response_model=RouteResponse)
async def resolve_route(
    name: str,
    param: list[str] = Query(default=[]),
    routes: YamlRouteTable = Depends(get_route_table),
) -> RouteResponse:
    """Resolve ``name`` with positional ``param`` values, in placeholder order."""
    try:
        url = routes.resolve(name, *param)
    except RouteNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MissingRouteParameterError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return RouteResponse(name=name, url=url)
