"""
Admin / observability endpoints
===============================

GET /admin/health -- liveness, no dependencies touched
GET /admin/ready  -- readiness, pings MongoDB
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.api.schemas import HealthResponse
from src.infrastructure.database import ping

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check",
    responses={503: {"model": HealthResponse}},
)
async def ready(request: Request):
    if not await ping(request.app.state.database):
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return HealthResponse()
