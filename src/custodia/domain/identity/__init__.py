"""Custodia Domain Identity -- local and federated user identities."""

from custodia.domain.identity.identity import (
    FederatedIdentity,
    Identity,
    IdentityKind,
    LocalIdentity,
)
from custodia.domain.identity.profile import IdentityProfile
from custodia.domain.identity.user import User
from custodia.domain.identity.user_app import UserApplication

__all__ = [
    "FederatedIdentity",
    "Identity",
    "IdentityKind",
    "IdentityProfile",
    "LocalIdentity",
    "User",
    "UserApplication",
]
