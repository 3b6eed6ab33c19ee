"""
ptf_publisher.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (JWT secret, storage keys, SMTP password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PTF_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "ptf-publisher"
    app_version: str = "v1.0.002"
    site_name: str = "Project Timothy Fund Uganda"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "ptf-publisher"
    jwt_audience: str = "ptf-admin"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)
    jwt_ttl_minutes: int = 12 * 60

    # Reachable as `#admin-portal`; not linked from the public navigation.
    admin_route_secret: str = "admin-portal"
    admin_email: str | None = None
    admin_password: str | None = Field(default=None, repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./ptf.db"

    # S3-compatible object storage
    storage_endpoint_url: str | None = None
    storage_region: str = "auto"
    storage_access_key_id: str | None = Field(default=None, repr=False)
    storage_secret_access_key: str | None = Field(default=None, repr=False)
    storage_bucket: str = "post-assets"
    storage_public_base_url: str | None = None

    # SMTP relay used by broadcasts; no host means batches are only logged.
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = Field(default=None, repr=False)
    smtp_from: str = "updates@timothyfund.org"
    smtp_timeout: float = 60.0

    broadcast_batch_size: int = Field(default=30, ge=1)
    broadcast_batch_pause_seconds: float = Field(default=1.0, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every other module depends on this one; add fields here rather than reading
# os.environ directly.
