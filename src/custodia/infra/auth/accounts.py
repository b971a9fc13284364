"""Factories that create and maintain User aggregates.

Lives in the auth infrastructure because creating a local account means
generating and hashing a secret; the User aggregate itself only ever sees
the hash.

Security invariant: plaintext secrets exist only in local variables and in
the return value of ``new_local`` / ``rotate_credential``. They are never
logged, stored on the aggregate, or recorded in events.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from custodia.domain.identity.identity import FederatedIdentity, LocalIdentity
from custodia.domain.identity.user import User
from custodia.foundation.domain.identifiers import DEFAULT_TENANT_ID
from custodia.foundation.domain.user_value_objects import ADMIN_ROLE
from custodia.infra.auth.claims import ProviderClaims
from custodia.infra.auth.credential_codec import get_credential_hasher
from custodia.infra.auth.secret_generator import generate_credential

if TYPE_CHECKING:
    from custodia.domain.identity.profile import IdentityProfile
    from custodia.foundation.domain.ports import CredentialHasherPort
    from custodia.infra.auth.settings import AuthSettings

logger = logging.getLogger(__name__)


def new_local(
    username: str,
    *,
    hasher: CredentialHasherPort | None = None,
    tenant_id: str = DEFAULT_TENANT_ID,
) -> tuple[User, str]:
    """Create a local user with a freshly generated secret.

    Args:
        username: Login name.
        hasher: Credential hasher. Defaults to the process-wide Argon2 hasher.
        tenant_id: Tenant slug.

    Returns:
        (user, secret) -- the secret must be shown once and discarded.

    Raises:
        ValueError: If username or tenant_id fails validation.
    """
    credential = generate_credential(hasher)
    user = User(
        identity=LocalIdentity(username=username, credential_hash=credential.hash),
        tenant_id=tenant_id,
        roles=[],
    )
    logger.info(
        "local_user_created",
        extra={"user_id": str(user.id), "username": user.username, "tenant_id": user.tenant_id},
    )
    return user, credential.secret


def new_federated(
    fallback_username: str,
    roles: Iterable[str],
    profile: IdentityProfile,
    *,
    tenant_id: str = DEFAULT_TENANT_ID,
) -> User:
    """Create a user whose identity comes from an identity provider.

    Args:
        fallback_username: Used as subject id when the profile has no name.
        roles: Initial role names.
        profile: Profile mapped from provider claims.
        tenant_id: Tenant slug.

    Returns:
        The new User.
    """
    user = User(
        identity=FederatedIdentity.from_profile(fallback_username, profile),
        tenant_id=tenant_id,
        roles=sorted(set(roles)),
    )
    logger.info(
        "federated_user_created",
        extra={"user_id": str(user.id), "username": user.username, "tenant_id": user.tenant_id},
    )
    return user


def federated_from_claims(
    claims: Mapping[str, Any],
    fallback_username: str,
    roles: Iterable[str],
    *,
    tenant_id: str = DEFAULT_TENANT_ID,
) -> User:
    """Create a federated user straight from a provider claim set.

    Group memberships are taken from the ``groups``/``group`` claim.

    Raises:
        AuthenticationError: If the claims carry no subject.
    """
    provider_claims = ProviderClaims.model_validate(claims)
    logger.debug("provider_claims_received", extra={"oidc_sub": provider_claims.subject()})
    return new_federated(fallback_username, roles, provider_claims.profile(), tenant_id=tenant_id)


def bootstrap_admin(
    admin_username: str,
    admin_password: str,
    *,
    hasher: CredentialHasherPort | None = None,
    tenant_id: str = DEFAULT_TENANT_ID,
) -> User:
    """Build the privileged admin user from configured credentials.

    The password comes from trusted process configuration and is hashed
    here; the user gets exactly the ``admin`` role.

    Args:
        admin_username: Configured admin username.
        admin_password: Configured admin password (plaintext).
        hasher: Credential hasher. Defaults to the process-wide Argon2 hasher.
        tenant_id: Tenant slug.
    """
    hasher = hasher or get_credential_hasher()
    user = User(
        identity=LocalIdentity(
            username=admin_username,
            credential_hash=hasher.hash_secret(admin_password),
        ),
        tenant_id=tenant_id,
        roles=[ADMIN_ROLE],
    )
    logger.info(
        "admin_user_bootstrapped",
        extra={"user_id": str(user.id), "username": user.username, "tenant_id": user.tenant_id},
    )
    return user


def bootstrap_admin_from_settings(
    settings: AuthSettings,
    *,
    hasher: CredentialHasherPort | None = None,
    tenant_id: str = DEFAULT_TENANT_ID,
) -> User:
    """``bootstrap_admin`` with credentials taken from ``settings``."""
    if settings.uses_default_admin_password():
        logger.warning(
            "admin_default_password_in_use",
            extra={"detail": "Set AUTH_ADMIN_PASSWORD before exposing this service."},
        )
    return bootstrap_admin(
        settings.admin_username,
        settings.admin_password,
        hasher=hasher,
        tenant_id=tenant_id,
    )


def rotate_credential(user: User, *, hasher: CredentialHasherPort | None = None) -> str:
    """Give a local user a new random secret.

    Returns:
        The new plaintext secret (display-once).

    Raises:
        ValidationError: If the user is federated.
    """
    credential = generate_credential(hasher)
    user.request_rotate_credential(credential.hash)
    logger.info(
        "local_credential_rotated",
        extra={"user_id": str(user.id), "username": user.username},
    )
    return credential.secret
