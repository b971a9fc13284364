"""Shared fixtures for domain-identity tests."""

from __future__ import annotations

import pytest

from custodia.domain.identity.identity import FederatedIdentity, LocalIdentity
from custodia.domain.identity.profile import IdentityProfile
from custodia.domain.identity.user import User
from custodia.infra.auth.credential_codec import Argon2CredentialHasher


@pytest.fixture()
def profile() -> IdentityProfile:
    """Profile with a display name and groups."""
    return IdentityProfile(
        name="Bobby Tables",
        preferred_username="bobby",
        email="bobby@example.com",
        updated_at=1_700_000_000,
        groups=("ops", "dev"),
    )


@pytest.fixture()
def local_user(fast_hasher: Argon2CredentialHasher) -> User:
    """Local user whose secret is 'correct horse'."""
    return User(
        identity=LocalIdentity(
            username="alice",
            credential_hash=fast_hasher.hash_secret("correct horse"),
        ),
        tenant_id="acme-corp",
        roles=["reader"],
    )


@pytest.fixture()
def federated_user(profile: IdentityProfile) -> User:
    """Federated user created from ``profile``."""
    return User(
        identity=FederatedIdentity.from_profile("bob", profile),
        tenant_id="acme-corp",
        roles=["ops"],
    )
