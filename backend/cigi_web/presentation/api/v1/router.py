"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from cigi_web.presentation.api.v1.endpoints.health import router as health_router
from cigi_web.presentation.api.v1.endpoints.routes import router as routes_router
from cigi_web.presentation.api.v1.endpoints.tables import router as tables_router
from cigi_web.presentation.api.v1.endpoints.records import router as records_router
from cigi_web.presentation.api.v1.endpoints.forms import router as forms_router
from cigi_web.presentation.api.v1.endpoints.global_variables import router as global_variables_router
from cigi_web.presentation.api.v1.endpoints.navigation import router as navigation_router
from cigi_web.presentation.api.v1.endpoints.toasts import router as toasts_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(routes_router)
router.include_router(tables_router)
router.include_router(records_router)
router.include_router(forms_router)
router.include_router(global_variables_router)
router.include_router(navigation_router)
router.include_router(toasts_router)
