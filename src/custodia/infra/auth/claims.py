"""Claim set received from an OpenID Connect identity provider.

Wraps the decoded ID token / userinfo payload. Standard profile claims are
mapped by ``IdentityProfile.from_claims``; this model adds the subject
accessor and the provider-specific group claim.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from custodia.domain.identity.profile import IdentityProfile
from custodia.foundation.domain.exceptions import AuthenticationError
from custodia.foundation.domain.user_value_objects import OidcSub


class ProviderClaims(BaseModel):
    """Claims asserted by the identity provider.

    Unknown claims are kept so the profile mapper can pick up the standard
    ones. Group memberships arrive as ``groups`` or, for some providers,
    ``group``.

    Example:
        >>> claims = ProviderClaims.model_validate({"sub": "42", "name": "Bobby", "group": ["ops"]})
        >>> claims.subject()
        '42'
        >>> claims.profile().groups
        ('ops',)
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    sub: str | None = None
    groups: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("groups", "group"),
    )

    def subject(self) -> str:
        """Return the provider's subject identifier.

        Raises:
            AuthenticationError: If the ``sub`` claim is missing or invalid.
        """
        try:
            return OidcSub(self.sub or "").value
        except ValueError as exc:
            raise AuthenticationError(
                "Identity provider claims carry no usable subject",
                error_code="MISSING_SUBJECT",
            ) from exc

    def as_mapping(self) -> dict[str, Any]:
        return {**(self.model_extra or {}), "sub": self.sub}

    def profile(self) -> IdentityProfile:
        """Normalized profile including group memberships."""
        return IdentityProfile.from_claims(self.as_mapping()).with_groups(self.groups)
