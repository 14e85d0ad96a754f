"""
Health check endpoint

GET /api/health - service and store status
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.config.loader import Settings
from web.dependencies import get_app_settings
from web.models.responses import HealthResponse
from web.services.health_service import HealthService

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"description": "Database unreachable"}},
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
):
    """Service and database status

    Returns:
        HealthResponse, or 500 with status=ERROR when the store is unreachable
    """
    healthy, body = await HealthService(settings).check()

    if not healthy:
        return JSONResponse(status_code=500, content=jsonable_encoder(body))

    return HealthResponse(**body)
