"""Event-sourced User aggregate.

A User holds exactly one identity (local or federated) for its whole life,
plus a set of role names. After registration only two things change: the
role set (grant/revoke) and, for local users, the credential hash (rotation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from eventsourcing.domain import event

from custodia.domain.identity.identity import FederatedIdentity, IdentityKind, LocalIdentity
from custodia.foundation.domain.aggregates import BaseAggregate
from custodia.foundation.domain.exceptions import ValidationError
from custodia.foundation.domain.identifiers import TenantId
from custodia.foundation.domain.user_value_objects import RoleName

if TYPE_CHECKING:
    from custodia.foundation.domain.ports import CredentialHasherPort


class User(BaseAggregate):
    """Event-sourced User aggregate.

    Attributes:
        identity: LocalIdentity or FederatedIdentity (immutable).
        tenant_id: Tenant slug (immutable, inherited from BaseAggregate).
        roles: Unique role names granted to this user.
    """

    # -- Creation (records User.Registered event) --

    @event("Registered")
    def __init__(
        self,
        *,
        identity: LocalIdentity | FederatedIdentity,
        tenant_id: str,
        roles: list[str],
    ) -> None:
        """Create a new User.

        Prefer the factories in ``custodia.infra.auth.accounts``, which
        take care of credential generation and hashing.

        Args:
            identity: The user's identity variant.
            tenant_id: Tenant slug.
            roles: Initial role names. Duplicates collapse.

        Raises:
            ValueError: If tenant_id or a role name fails validation.
        """
        self.identity: LocalIdentity | FederatedIdentity = identity
        self.tenant_id: str = TenantId(tenant_id).value
        self.roles: set[str] = {RoleName(role).value for role in roles}

    # -- Queries --

    @property
    def username(self) -> str:
        """Local username, or federated subject id."""
        match self.identity:
            case LocalIdentity(username=username):
                return username
            case FederatedIdentity(subject_id=subject_id):
                return subject_id
            case _:
                assert_never(self.identity)

    @property
    def kind(self) -> IdentityKind:
        return self.identity.kind

    @property
    def is_federated(self) -> bool:
        return isinstance(self.identity, FederatedIdentity)

    def list_roles(self) -> list[str]:
        """Role names as a list (sorted; callers must not rely on order)."""
        return sorted(self.roles)

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def check_credential(self, candidate: str, hasher: CredentialHasherPort) -> bool:
        """Check a plaintext candidate against this user's stored hash.

        Args:
            candidate: Plaintext secret presented by the caller.
            hasher: Credential hasher that produced the stored hash.

        Returns:
            True if the candidate matches.

        Raises:
            ValidationError: If the user is federated.
            MalformedHashError: If the stored hash cannot be parsed.
        """
        identity = self._require_local("check a credential")
        return hasher.verify_secret(identity.credential_hash, candidate)

    # -- Public command methods --

    def request_grant_role(self, role: str) -> None:
        """Grant a role. Idempotent: granting a held role records nothing.

        Raises:
            ValueError: If role is empty or too long.
        """
        validated = RoleName(role).value
        if validated in self.roles:
            return  # idempotent
        self._apply_role_granted(role=validated)

    def request_revoke_role(self, role: str) -> None:
        """Revoke a role. Idempotent: revoking an absent role records nothing."""
        validated = RoleName(role).value
        if validated not in self.roles:
            return  # idempotent
        self._apply_role_revoked(role=validated)

    def request_rotate_credential(self, credential_hash: str) -> None:
        """Replace the local credential hash.

        Args:
            credential_hash: New PHC-formatted hash (never plaintext).

        Raises:
            ValidationError: If the user is federated.
            ValueError: If credential_hash is not a PHC-style string.
        """
        identity = self._require_local("rotate a credential")
        rotated = LocalIdentity(username=identity.username, credential_hash=credential_hash)
        self._apply_credential_rotated(credential_hash=rotated.credential_hash)

    def _require_local(self, action: str) -> LocalIdentity:
        if not isinstance(self.identity, LocalIdentity):
            raise ValidationError(
                "identity",
                f"Cannot {action} for a federated user",
                user_id=str(self.id),
            )
        return self.identity

    # -- Private @event mutators --

    @event("RoleGranted")
    def _apply_role_granted(self, role: str) -> None:
        self.roles.add(role)

    @event("RoleRevoked")
    def _apply_role_revoked(self, role: str) -> None:
        self.roles.discard(role)

    @event("CredentialRotated")
    def _apply_credential_rotated(self, credential_hash: str) -> None:
        self.identity = LocalIdentity(
            username=self.username,
            credential_hash=credential_hash,
        )
