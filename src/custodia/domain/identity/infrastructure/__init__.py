"""Identity infrastructure: event store transcodings."""

from custodia.domain.identity.infrastructure.transcodings import (
    USER_TRANSCODINGS,
    FederatedIdentityAsDict,
    LocalIdentityAsDict,
    RoleSetAsList,
)

__all__ = [
    "USER_TRANSCODINGS",
    "FederatedIdentityAsDict",
    "LocalIdentityAsDict",
    "RoleSetAsList",
]
