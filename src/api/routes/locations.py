"""
Location endpoints
==================

PUT /loc -- record the caller's current position; reports distance traveled
GET /loc -- the caller's most recently recorded position
"""

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_current_user, get_location_gateway
from src.api.middleware import current_rate_limit, limiter
from src.api.schemas import (
    ErrorResponse,
    LocationPayload,
    QueryResponse,
    UpdateResponse,
)
from src.domain.entities import UserIdentity
from src.domain.tracking import LocationGateway, query_location, update_location

router = APIRouter(prefix="/loc", tags=["locations"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Missing, malformed or unknown API key."},
    500: {"model": ErrorResponse, "description": "Location store unavailable."},
}


@router.put(
    "",
    response_model=UpdateResponse,
    summary="Record the current location",
    description=(
        'Returns "Initial" for a user\'s first fix, otherwise the geodesic '
        "distance in km from the previously recorded fix."
    ),
    responses=_ERRORS,
)
@limiter.limit(current_rate_limit)
async def put_location(
    request: Request,
    body: LocationPayload,
    user: UserIdentity = Depends(get_current_user),
    gateway: LocationGateway = Depends(get_location_gateway),
):
    result = await update_location(gateway, user, body.to_location())
    return UpdateResponse.from_result(result)


@router.get(
    "",
    response_model=QueryResponse,
    summary="Get the most recent location",
    responses=_ERRORS,
)
@limiter.limit(current_rate_limit)
async def get_location(
    request: Request,
    user: UserIdentity = Depends(get_current_user),
    gateway: LocationGateway = Depends(get_location_gateway),
):
    result = await query_location(gateway, user)
    return QueryResponse.from_result(result)
