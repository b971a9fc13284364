"""Custodia Infra Auth -- credential hashing, secrets, claims, account factories.

Provides the Argon2 credential codec, random secret generation, the OIDC
claim model, AuthSettings, and the factories that create local, federated
and bootstrap admin users.
"""

from custodia.infra.auth.accounts import (
    bootstrap_admin,
    bootstrap_admin_from_settings,
    federated_from_claims,
    new_federated,
    new_local,
    rotate_credential,
)
from custodia.infra.auth.claims import ProviderClaims
from custodia.infra.auth.credential_codec import (
    Argon2CredentialHasher,
    PhcHash,
    get_credential_hasher,
    hash_secret,
    verify_secret,
)
from custodia.infra.auth.secret_generator import generate_credential, generate_secret
from custodia.infra.auth.settings import AuthSettings, get_auth_settings

__all__ = [
    "Argon2CredentialHasher",
    "AuthSettings",
    "PhcHash",
    "ProviderClaims",
    "bootstrap_admin",
    "bootstrap_admin_from_settings",
    "federated_from_claims",
    "generate_credential",
    "generate_secret",
    "get_auth_settings",
    "get_credential_hasher",
    "hash_secret",
    "new_federated",
    "new_local",
    "rotate_credential",
    "verify_secret",
]
