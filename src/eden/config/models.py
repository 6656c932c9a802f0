"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, eden.toml only contains
overrides. A development setup needs no file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# Development-only key; deployments override it via [auth] or EDEN_AUTH__SECRET_KEY.
DEFAULT_SECRET_KEY = (
    "eden-development-secret-key-change-me-"
    "0123456789abcdef0123456789abcdef0123456789abcdef"
)


class DatabaseConfig(BaseModel):
    """[database] section. ``url=None`` means SQLite under the data root."""

    model_config = {"frozen": True}

    url: str | None = None


class AuthConfig(BaseModel):
    """[auth] section."""

    model_config = {"frozen": True}

    secret_key: str = DEFAULT_SECRET_KEY
    hash_scheme: str = "pbkdf2_sha256"

    @field_validator("secret_key")
    @classmethod
    def _secret_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("secret_key must not be blank")
        return value


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    enabled: bool = False
    base_url: str = "http://localhost:8081"
    timeout_seconds: float = 5.0


class EdenConfig(BaseModel):
    """Root configuration composing all sections (the full eden.toml schema)."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
