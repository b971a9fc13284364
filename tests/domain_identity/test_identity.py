"""Unit tests for the identity variants."""

from __future__ import annotations

import pytest

from custodia.domain.identity.identity import FederatedIdentity, IdentityKind, LocalIdentity
from custodia.domain.identity.profile import IdentityProfile

_HASH = "$argon2id$v=19$m=8,t=1,p=1$c2FsdHNhbHQ$aGFzaGhhc2g"


@pytest.mark.unit
class TestLocalIdentity:
    def test_kind(self) -> None:
        identity = LocalIdentity(username="alice", credential_hash=_HASH)
        assert identity.kind is IdentityKind.LOCAL

    def test_rejects_plaintext_credential(self) -> None:
        with pytest.raises(ValueError, match="PHC-formatted"):
            LocalIdentity(username="alice", credential_hash="hunter2")

    def test_rejects_empty_username(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            LocalIdentity(username=" ", credential_hash="$argon2id$x")

    def test_repr_hides_hash(self) -> None:
        identity = LocalIdentity(username="alice", credential_hash="$argon2id$secretish")
        assert "secretish" not in repr(identity)


@pytest.mark.unit
class TestFederatedIdentity:
    def test_kind(self) -> None:
        assert FederatedIdentity(subject_id="bob").kind is IdentityKind.FEDERATED

    def test_subject_from_profile_name(self) -> None:
        identity = FederatedIdentity.from_profile("bob", IdentityProfile(name="Bobby"))
        assert identity.subject_id == "Bobby"

    def test_subject_falls_back_to_username(self) -> None:
        identity = FederatedIdentity.from_profile("bob", IdentityProfile(email="b@example.com"))
        assert identity.subject_id == "bob"
        assert identity.profile.email == "b@example.com"

    def test_blank_name_is_kept(self) -> None:
        identity = FederatedIdentity.from_profile("bob", IdentityProfile(name="  "))
        assert identity.subject_id == "  "
        assert identity.profile.name == "  "

    def test_default_profile_is_empty(self) -> None:
        assert FederatedIdentity(subject_id="bob").profile == IdentityProfile()


@pytest.mark.unit
class TestIdentityKind:
    def test_values(self) -> None:
        assert IdentityKind.LOCAL == "local"
        assert IdentityKind.FEDERATED == "federated"
