"""Unit tests for User aggregate."""

from __future__ import annotations

import pytest

from custodia.domain.identity.identity import FederatedIdentity, IdentityKind, LocalIdentity
from custodia.domain.identity.profile import IdentityProfile
from custodia.domain.identity.user import User
from custodia.foundation.domain.exceptions import MalformedHashError, ValidationError
from custodia.infra.auth.credential_codec import Argon2CredentialHasher

_HASH = "$argon2id$v=19$m=1024,t=1,p=1$c2FsdHNhbHQ$aGFzaGhhc2g"


@pytest.mark.unit
class TestUserCreation:
    """User aggregate registration."""

    def test_local_user(self, local_user: User) -> None:
        assert local_user.username == "alice"
        assert local_user.is_federated is False
        assert local_user.kind is IdentityKind.LOCAL
        assert local_user.tenant_id == "acme-corp"
        assert local_user.roles == {"reader"}

    def test_federated_user_uses_profile_name(self, federated_user: User) -> None:
        assert federated_user.username == "Bobby Tables"
        assert federated_user.is_federated is True
        assert federated_user.kind is IdentityKind.FEDERATED

    def test_federated_user_fallback_username(self) -> None:
        user = User(
            identity=FederatedIdentity.from_profile("bob", IdentityProfile()),
            tenant_id="acme-corp",
            roles=[],
        )
        assert user.username == "bob"

    def test_records_registered_event(self, local_user: User) -> None:
        events = local_user.collect_events()
        assert len(events) == 1
        registered = events[0]
        assert registered.__class__.__name__ == "Registered"
        assert registered.tenant_id == "acme-corp"
        assert registered.roles == ["reader"]

    def test_duplicate_initial_roles_collapse(self) -> None:
        user = User(
            identity=LocalIdentity(username="carol", credential_hash=_HASH),
            tenant_id="acme-corp",
            roles=["ops", "ops", " ops "],
        )
        assert user.roles == {"ops"}

    def test_rejects_invalid_tenant(self) -> None:
        with pytest.raises(ValueError, match="Invalid tenant ID"):
            User(
                identity=LocalIdentity(username="carol", credential_hash=_HASH),
                tenant_id="Not A Slug",
                roles=[],
            )

    def test_rejects_empty_role(self) -> None:
        with pytest.raises(ValueError, match="Role name cannot be empty"):
            User(
                identity=LocalIdentity(username="carol", credential_hash=_HASH),
                tenant_id="acme-corp",
                roles=[""],
            )


@pytest.mark.unit
class TestUserRoles:
    """Role set management."""

    def test_grant_role(self, local_user: User) -> None:
        local_user.request_grant_role("editor")
        assert local_user.has_role("editor")
        assert local_user.list_roles() == ["editor", "reader"]

    def test_grant_same_role_twice_keeps_one(self, local_user: User) -> None:
        local_user.request_grant_role("editor")
        local_user.request_grant_role("editor")
        assert local_user.list_roles().count("editor") == 1

    def test_grant_held_role_records_no_event(self, local_user: User) -> None:
        version = local_user.version
        local_user.request_grant_role("reader")
        assert local_user.version == version

    def test_grant_records_event(self, local_user: User) -> None:
        local_user.request_grant_role("editor")
        events = local_user.collect_events()
        assert events[-1].__class__.__name__ == "RoleGranted"
        assert events[-1].role == "editor"

    def test_revoke_role(self, local_user: User) -> None:
        local_user.request_revoke_role("reader")
        assert local_user.roles == set()
        assert local_user.collect_events()[-1].__class__.__name__ == "RoleRevoked"

    def test_revoke_absent_role_is_noop(self, local_user: User) -> None:
        version = local_user.version
        local_user.request_revoke_role("admin")
        assert local_user.version == version

    def test_rejects_empty_role(self, local_user: User) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            local_user.request_grant_role("   ")


@pytest.mark.unit
class TestUserCredential:
    """Local credential checks and rotation."""

    def test_check_credential_match(
        self, local_user: User, fast_hasher: Argon2CredentialHasher
    ) -> None:
        assert local_user.check_credential("correct horse", fast_hasher) is True

    def test_check_credential_mismatch(
        self, local_user: User, fast_hasher: Argon2CredentialHasher
    ) -> None:
        assert local_user.check_credential("battery staple", fast_hasher) is False

    def test_check_credential_federated_rejected(
        self, federated_user: User, fast_hasher: Argon2CredentialHasher
    ) -> None:
        with pytest.raises(ValidationError, match="federated user"):
            federated_user.check_credential("anything", fast_hasher)

    def test_check_credential_propagates_malformed_hash(
        self, fast_hasher: Argon2CredentialHasher
    ) -> None:
        user = User(
            identity=LocalIdentity(username="dave", credential_hash="$argon2id$broken"),
            tenant_id="acme-corp",
            roles=[],
        )
        with pytest.raises(MalformedHashError):
            user.check_credential("anything", fast_hasher)

    def test_rotate_credential(
        self, local_user: User, fast_hasher: Argon2CredentialHasher
    ) -> None:
        local_user.request_rotate_credential(fast_hasher.hash_secret("new secret"))
        assert local_user.check_credential("new secret", fast_hasher) is True
        assert local_user.check_credential("correct horse", fast_hasher) is False
        assert local_user.username == "alice"
        assert local_user.collect_events()[-1].__class__.__name__ == "CredentialRotated"

    def test_rotate_rejects_plaintext(self, local_user: User) -> None:
        with pytest.raises(ValueError, match="PHC-formatted"):
            local_user.request_rotate_credential("plaintext")

    def test_rotate_federated_rejected(self, federated_user: User) -> None:
        with pytest.raises(ValidationError, match="federated user"):
            federated_user.request_rotate_credential(_HASH)

    def test_identity_kind_never_changes(
        self, local_user: User, fast_hasher: Argon2CredentialHasher
    ) -> None:
        local_user.request_grant_role("editor")
        local_user.request_rotate_credential(fast_hasher.hash_secret("x"))
        assert isinstance(local_user.identity, LocalIdentity)
