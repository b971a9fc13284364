"""Identity kinds a User can hold.

A user is either LOCAL (username plus a credential hash managed here) or
FEDERATED (subject id plus a profile asserted by an identity provider).
Each kind is its own frozen dataclass with a ``kind`` tag, so code resolving
the variant matches on the class, never on which attributes happen to exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar

from custodia.domain.identity.profile import IdentityProfile
from custodia.foundation.domain.user_value_objects import Username


class IdentityKind(StrEnum):
    """Discriminator for the identity variants."""

    LOCAL = "local"
    FEDERATED = "federated"


@dataclass(frozen=True, slots=True)
class LocalIdentity:
    """Locally managed credential.

    Attributes:
        username: Login name (validated, whitespace stripped).
        credential_hash: PHC-formatted one-way hash. Never the plaintext.

    Raises:
        ValueError: If username is invalid or credential_hash is not a
            PHC-style string.
    """

    kind: ClassVar[IdentityKind] = IdentityKind.LOCAL

    username: str
    credential_hash: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", Username(self.username).value)
        # PHC strings always start with '$'; anything else is plaintext or junk
        if not self.credential_hash.startswith("$"):
            msg = "credential_hash must be a PHC-formatted hash, not a plaintext secret"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FederatedIdentity:
    """Identity asserted by an external OIDC provider.

    Attributes:
        subject_id: Name this user is known by here, exactly as the provider
            or caller gave it (no trimming or length cap). Fixed at creation.
        profile: Profile mapped from the provider's claims.
    """

    kind: ClassVar[IdentityKind] = IdentityKind.FEDERATED

    subject_id: str
    profile: IdentityProfile = field(default_factory=IdentityProfile)

    @classmethod
    def from_profile(cls, fallback_username: str, profile: IdentityProfile) -> FederatedIdentity:
        """Derive the subject id from the profile's display name.

        Uses ``profile.name`` whenever the provider sent one, even if empty,
        otherwise ``fallback_username``.
        """
        if profile.name is not None:
            return cls(subject_id=profile.name, profile=profile)
        return cls(subject_id=fallback_username, profile=profile)


Identity = LocalIdentity | FederatedIdentity
