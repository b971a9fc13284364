"""Value objects for the User aggregate.

Immutable, validated domain primitives. All validation occurs at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

ADMIN_ROLE = "admin"

_MAX_LENGTH = 255


@dataclass(frozen=True, slots=True)
class Username:
    """Validated local username or federated subject id.

    Format: Non-empty after whitespace stripping, max 255 characters.

    Attributes:
        value: The validated username (whitespace stripped).

    Raises:
        ValueError: If username is empty/whitespace-only or exceeds 255 chars.
    """

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if not stripped:
            msg = "Username cannot be empty"
            raise ValueError(msg)
        if len(stripped) > _MAX_LENGTH:
            msg = f"Username too long: {len(stripped)} chars (max {_MAX_LENGTH})"
            raise ValueError(msg)
        object.__setattr__(self, "value", stripped)


@dataclass(frozen=True, slots=True)
class RoleName:
    """Validated authorization role name.

    Role names are opaque to this package; the authorization engine that
    consumes them decides what they mean.

    Attributes:
        value: The validated role name (whitespace stripped).

    Raises:
        ValueError: If role name is empty/whitespace-only or exceeds 255 chars.
    """

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if not stripped:
            msg = "Role name cannot be empty"
            raise ValueError(msg)
        if len(stripped) > _MAX_LENGTH:
            msg = f"Role name too long: {len(stripped)} chars (max {_MAX_LENGTH})"
            raise ValueError(msg)
        object.__setattr__(self, "value", stripped)


@dataclass(frozen=True, slots=True)
class OidcSub:
    """Validated OIDC subject identifier.

    Format: Non-empty string, max 255 characters (per OpenID Connect Core 1.0).
    No format constraints beyond non-empty to support multiple IdPs.

    Attributes:
        value: The validated OIDC sub string.

    Raises:
        ValueError: If sub is empty or exceeds 255 characters.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            msg = "OIDC sub cannot be empty"
            raise ValueError(msg)
        if len(self.value) > _MAX_LENGTH:
            msg = f"OIDC sub too long: {len(self.value)} chars (max {_MAX_LENGTH})"
            raise ValueError(msg)
