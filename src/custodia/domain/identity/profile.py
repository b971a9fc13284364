"""Normalized profile of a federated user, mapped from OIDC claims.

Every attribute is independently optional. ``None`` means the identity
provider did not send the claim, which is different from an empty value.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

# Standard OIDC claims copied straight across (OpenID Connect Core 1.0, 5.1).
_STRING_CLAIMS = ("name", "preferred_username", "picture", "email", "gender")


def _string_claim(claims: Mapping[str, Any], key: str) -> str | None:
    value = claims.get(key)
    return value if isinstance(value, str) else None


def _timestamp_claim(claims: Mapping[str, Any], key: str) -> int | None:
    value = claims.get(key)
    # bool is an int subclass; a boolean updated_at is not a timestamp
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


@dataclass(frozen=True, slots=True)
class IdentityProfile:
    """Descriptive attributes asserted by an identity provider.

    Attributes:
        name: Full name for display purposes.
        preferred_username: Shorthand name the user wishes to be referred to by.
        picture: Profile picture URL.
        email: Email address.
        gender: Gender claim as sent by the provider.
        updated_at: Last profile update, seconds since the Unix epoch.
        groups: Group memberships, in provider order. Sourced separately
            from provider-specific claims, never by ``from_claims``.
    """

    name: str | None = None
    preferred_username: str | None = None
    picture: str | None = None
    email: str | None = None
    gender: str | None = None
    updated_at: int | None = None
    groups: tuple[str, ...] | None = None

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> IdentityProfile:
        """Map an OIDC claim set onto a profile, best effort.

        Absent claims, and claims whose value has the wrong JSON type, leave
        the field unset. ``groups`` is always left unset.

        Args:
            claims: Decoded ID token or userinfo claims.

        Returns:
            IdentityProfile with the recognized claims copied across.

        Example:
            >>> IdentityProfile.from_claims({"sub": "42", "name": "Bobby"}).name
            'Bobby'
            >>> IdentityProfile.from_claims({"sub": "42"}).email is None
            True
        """
        values: dict[str, Any] = {key: _string_claim(claims, key) for key in _STRING_CLAIMS}
        return cls(**values, updated_at=_timestamp_claim(claims, "updated_at"))

    def with_groups(self, groups: list[str] | tuple[str, ...] | None) -> IdentityProfile:
        """Return a copy with ``groups`` replaced."""
        return IdentityProfile(
            name=self.name,
            preferred_username=self.preferred_username,
            picture=self.picture,
            email=self.email,
            gender=self.gender,
            updated_at=self.updated_at,
            groups=tuple(groups) if groups is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible primitives (unset fields kept as None)."""
        data = asdict(self)
        if self.groups is not None:
            data["groups"] = list(self.groups)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IdentityProfile:
        """Inverse of ``to_dict``."""
        groups = data.get("groups")
        return cls(
            name=data.get("name"),
            preferred_username=data.get("preferred_username"),
            picture=data.get("picture"),
            email=data.get("email"),
            gender=data.get("gender"),
            updated_at=data.get("updated_at"),
            groups=tuple(groups) if groups is not None else None,
        )
