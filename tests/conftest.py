"""Shared fixtures for custodia tests."""

from __future__ import annotations

import pytest

from custodia.infra.auth.credential_codec import Argon2CredentialHasher, get_credential_hasher
from custodia.infra.auth.settings import get_auth_settings


@pytest.fixture()
def fast_hasher() -> Argon2CredentialHasher:
    """Argon2 hasher with minimal cost parameters (same format, fast)."""
    return Argon2CredentialHasher(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> None:
    get_auth_settings.cache_clear()
    get_credential_hasher.cache_clear()
