"""Custodia Foundation Domain -- pure Python domain primitives.

This package provides the foundational building blocks shared by the
identity domain and the auth infrastructure: identifiers, exceptions,
aggregates, value objects, and port interfaces.
"""

from custodia.foundation.domain.aggregates import BaseAggregate
from custodia.foundation.domain.credential_value_objects import (
    DEFAULT_SECRET_LENGTH,
    SecretAndHash,
)
from custodia.foundation.domain.exceptions import (
    AuthenticationError,
    CredentialHashingError,
    DomainError,
    MalformedHashError,
    ValidationError,
)
from custodia.foundation.domain.identifiers import DEFAULT_TENANT_ID, TenantId
from custodia.foundation.domain.ports import CredentialHasherPort
from custodia.foundation.domain.user_value_objects import (
    ADMIN_ROLE,
    OidcSub,
    RoleName,
    Username,
)

__all__ = [
    "ADMIN_ROLE",
    "DEFAULT_SECRET_LENGTH",
    "DEFAULT_TENANT_ID",
    "AuthenticationError",
    "BaseAggregate",
    "CredentialHasherPort",
    "CredentialHashingError",
    "DomainError",
    "MalformedHashError",
    "OidcSub",
    "RoleName",
    "SecretAndHash",
    "TenantId",
    "Username",
    "ValidationError",
]
