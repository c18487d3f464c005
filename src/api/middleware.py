"""Rate limiting shared by all routers (keyed on client address)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import settings

limiter = Limiter(key_func=get_remote_address)

_rate_limit = settings.rate_limit


def configure_rate_limit(value: str) -> None:
    """Set the per-address limit applied by ``current_rate_limit``."""
    global _rate_limit
    _rate_limit = value


def current_rate_limit() -> str:
    # evaluated per request so create_app(settings) can change it
    return _rate_limit
