"""FastAPI dependency injection helpers."""

import logging

from fastapi import Depends, Request

from src.config import Settings
from src.domain.credentials import CredentialRegistry, resolve_identity
from src.domain.entities import UserIdentity
from src.domain.errors import CredentialError
from src.infrastructure.repositories import LocationRepository

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_location_gateway(request: Request) -> LocationRepository:
    """Gateway over the shared, lifespan-owned ``locations`` collection."""
    return LocationRepository(request.app.state.locations)


def get_credential_registry(request: Request) -> CredentialRegistry:
    return request.app.state.credential_registry


async def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings),
    registry: CredentialRegistry = Depends(get_credential_registry),
) -> UserIdentity:
    """Resolve the API key header; ``CredentialError`` becomes a 400."""
    values = request.headers.getlist(settings.api_key_header)
    try:
        return await resolve_identity(values, registry)
    except CredentialError as exc:
        logger.warning("Rejected credentials: %s", exc.detail)
        raise
