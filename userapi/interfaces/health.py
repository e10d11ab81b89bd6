"""
Health check router.

``/health`` is the liveness probe: it never touches MongoDB.
``/health/ready`` is the readiness probe: it pings MongoDB and
answers 503 while the database is unreachable.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo import MongoClient

from userapi.core.config import Settings, get_settings
from userapi.infrastructure.mongodb import check_connection, get_client
from userapi.interfaces.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns application status and version.",
)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Readiness probe",
    description="Pings MongoDB; 503 when it cannot be reached.",
)
def readiness_check(
    client: MongoClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    try:
        check_connection(client)
    except ConnectionError as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unavailable", version=settings.version).model_dump(),
        )
    return HealthResponse(status="ok", version=settings.version)
