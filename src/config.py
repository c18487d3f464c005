"""Centralised application settings loaded from environment / .env file."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # MongoDB (location history)
    mongo_url: str = "mongodb://localhost:27017"
    mongo_username: Optional[str] = None
    mongo_password: Optional[str] = None
    mongo_database: str = "gps"
    mongo_collection: str = "locations"
    mongo_tls_insecure: bool = False
    mongo_timeout_ms: int = 5000

    # Credential registry
    credential_backend: Literal["static", "redis"] = "static"
    api_keys: list[int] = []
    redis_url: str = "redis://localhost:6379/0"
    api_keys_redis_key: str = "auth:api_keys"
    api_key_header: str = "x-api-key"

    # HTTP
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
