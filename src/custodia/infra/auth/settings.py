"""Authentication configuration settings.

Loaded from environment variables with AUTH_ prefix.
Follows Pydantic BaseSettings pattern for type-safe configuration.

Environment Variables:
    AUTH_ADMIN_USERNAME: Username of the bootstrap admin account
    AUTH_ADMIN_PASSWORD: Password of the bootstrap admin account
    AUTH_HASH_TIME_COST: Argon2 iterations
    AUTH_HASH_MEMORY_COST: Argon2 memory in KiB
    AUTH_HASH_PARALLELISM: Argon2 lanes
    AUTH_SECRET_LENGTH: Length of generated secrets for new local accounts
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from custodia.foundation.domain.credential_value_objects import DEFAULT_SECRET_LENGTH


class AuthSettings(BaseSettings):
    """Authentication configuration loaded from environment variables.

    The admin credentials are read here once and then passed explicitly to
    ``bootstrap_admin``; nothing else in the package reads them.

    Argon2 defaults (m=19456 KiB, t=2, p=1) follow the OWASP password
    storage recommendation.

    Example:
        >>> settings = AuthSettings()
        >>> settings.admin_username
        'admin'
        >>> settings.hash_memory_cost
        19456
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    admin_username: str = Field(
        default="admin",
        min_length=1,
        description="Username of the bootstrap admin account",
    )
    admin_password: str = Field(
        default="admin",
        min_length=1,
        repr=False,  # Security: never log the admin password
        description="Password of the bootstrap admin account",
    )
    hash_time_cost: int = Field(
        default=2,
        ge=1,
        description="Argon2 time cost (iterations)",
    )
    hash_memory_cost: int = Field(
        default=19456,
        ge=8,
        description="Argon2 memory cost in KiB",
    )
    hash_parallelism: int = Field(
        default=1,
        ge=1,
        le=255,
        description="Argon2 parallelism (lanes)",
    )
    secret_length: int = Field(
        default=DEFAULT_SECRET_LENGTH,
        ge=8,
        le=128,
        description="Length of generated secrets for new local accounts",
    )

    def uses_default_admin_password(self) -> bool:
        """Check whether the admin password was left at its default."""
        return self.admin_password == "admin"


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Get singleton AuthSettings instance.

    Cached for performance - settings are loaded once per application lifecycle.
    Clear cache with ``get_auth_settings.cache_clear()`` for testing.

    Returns:
        AuthSettings instance with configuration from environment.
    """
    return AuthSettings()
